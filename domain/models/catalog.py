"""Static ISO 4217 currency catalog.

Display names follow the labels central banks publish, which is what the
HTML source matches against.
"""

from domain.models.currency import Currency

CURRENCIES: dict[str, Currency] = {
    'AED': Currency('AED', 'United Arab Emirates Dirham', 2),
    'AFN': Currency('AFN', 'Afghan Afghani', 2),
    'ALL': Currency('ALL', 'Albanian Lek', 2),
    'AMD': Currency('AMD', 'Armenian Dram', 2),
    'ANG': Currency('ANG', 'Netherlands Antillean Guilder', 2),
    'AOA': Currency('AOA', 'Angolan Kwanza', 2),
    'ARS': Currency('ARS', 'Argentine Peso', 2),
    'AUD': Currency('AUD', 'Australian Dollar', 2),
    'AWG': Currency('AWG', 'Aruban Florin', 2),
    'AZN': Currency('AZN', 'Azerbaijani Manat', 2),
    'BAM': Currency('BAM', 'Bosnia-Herzegovina Convertible Mark', 2),
    'BBD': Currency('BBD', 'Barbadian Dollar', 2),
    'BDT': Currency('BDT', 'Bangladeshi Taka', 2),
    'BGN': Currency('BGN', 'Bulgarian Lev', 2),
    'BHD': Currency('BHD', 'Bahraini Dinar', 3),
    'BIF': Currency('BIF', 'Burundian Franc', 0),
    'BMD': Currency('BMD', 'Bermudian Dollar', 2),
    'BND': Currency('BND', 'Brunei Dollar', 2),
    'BOB': Currency('BOB', 'Bolivian Boliviano', 2),
    'BOV': Currency('BOV', 'Bolivian Mvdol', 2),
    'BRL': Currency('BRL', 'Brazilian Real', 2),
    'BSD': Currency('BSD', 'Bahamian Dollar', 2),
    'BTN': Currency('BTN', 'Bhutanese Ngultrum', 2),
    'BWP': Currency('BWP', 'Botswanan Pula', 2),
    'BYN': Currency('BYN', 'Belarusian Rouble', 2),
    'BZD': Currency('BZD', 'Belize Dollar', 2),
    'CAD': Currency('CAD', 'Canadian Dollar', 2),
    'CDF': Currency('CDF', 'Congolese Franc', 2),
    'CHE': Currency('CHE', 'WIR Euro', 2),
    'CHF': Currency('CHF', 'Swiss Franc', 2),
    'CHW': Currency('CHW', 'WIR Franc', 2),
    'CLF': Currency('CLF', 'Chilean Unit of Account (UF)', 4),
    'CLP': Currency('CLP', 'Chilean Peso', 0),
    'CNY': Currency('CNY', 'Chinese Yuan', 2),
    'COP': Currency('COP', 'Colombian Peso', 2),
    'COU': Currency('COU', 'Colombian Real Value Unit', 2),
    'CRC': Currency('CRC', 'Costa Rican Colón', 2),
    'CUC': Currency('CUC', 'Cuban Convertible Peso', 2),
    'CUP': Currency('CUP', 'Cuban Peso', 2),
    'CVE': Currency('CVE', 'Cape Verdean Escudo', 2),
    'CZK': Currency('CZK', 'Czech Koruna', 2),
    'DJF': Currency('DJF', 'Djiboutian Franc', 0),
    'DKK': Currency('DKK', 'Danish Krone', 2),
    'DOP': Currency('DOP', 'Dominican Peso', 2),
    'DZD': Currency('DZD', 'Algerian Dinar', 2),
    'EGP': Currency('EGP', 'Egyptian Pound', 2),
    'ERN': Currency('ERN', 'Eritrean Nakfa', 2),
    'ETB': Currency('ETB', 'Ethiopian Birr', 2),
    'EUR': Currency('EUR', 'Euro', 2),
    'FJD': Currency('FJD', 'Fijian Dollar', 2),
    'FKP': Currency('FKP', 'Falkland Islands Pound', 2),
    'GBP': Currency('GBP', 'British Pound', 2),
    'GEL': Currency('GEL', 'Georgian Lari', 2),
    'GHS': Currency('GHS', 'Ghanaian Cedi', 2),
    'GIP': Currency('GIP', 'Gibraltar Pound', 2),
    'GMD': Currency('GMD', 'Gambian Dalasi', 2),
    'GNF': Currency('GNF', 'Guinean Franc', 0),
    'GTQ': Currency('GTQ', 'Guatemalan Quetzal', 2),
    'GYD': Currency('GYD', 'Guyanaese Dollar', 2),
    'HKD': Currency('HKD', 'Hong Kong Dollar', 2),
    'HNL': Currency('HNL', 'Honduran Lempira', 2),
    'HRK': Currency('HRK', 'Croatian Kuna', 2),
    'HTG': Currency('HTG', 'Haitian Gourde', 2),
    'HUF': Currency('HUF', 'Hungarian Forint', 2),
    'IDR': Currency('IDR', 'Indonesian Rupiah', 2),
    'ILS': Currency('ILS', 'Israeli New Shekel', 2),
    'INR': Currency('INR', 'Indian Rupee', 2),
    'IQD': Currency('IQD', 'Iraqi Dinar', 3),
    'IRR': Currency('IRR', 'Iranian Rial', 2),
    'ISK': Currency('ISK', 'Icelandic Króna', 0),
    'JMD': Currency('JMD', 'Jamaican Dollar', 2),
    'JOD': Currency('JOD', 'Jordanian Dinar', 3),
    'JPY': Currency('JPY', 'Japanese Yen', 0),
    'KES': Currency('KES', 'Kenyan Shilling', 2),
    'KGS': Currency('KGS', 'Kyrgystani Som', 2),
    'KHR': Currency('KHR', 'Cambodian Riel', 2),
    'KMF': Currency('KMF', 'Comorian Franc', 0),
    'KPW': Currency('KPW', 'North Korean Won', 2),
    'KRW': Currency('KRW', 'South Korean Won', 0),
    'KWD': Currency('KWD', 'Kuwaiti Dinar', 3),
    'KYD': Currency('KYD', 'Cayman Islands Dollar', 2),
    'KZT': Currency('KZT', 'Kazakhstani Tenge', 2),
    'LAK': Currency('LAK', 'Laotian Kip', 2),
    'LBP': Currency('LBP', 'Lebanese Pound', 2),
    'LKR': Currency('LKR', 'Sri Lankan Rupee', 2),
    'LRD': Currency('LRD', 'Liberian Dollar', 2),
    'LSL': Currency('LSL', 'Lesotho Loti', 2),
    'LYD': Currency('LYD', 'Libyan Dinar', 3),
    'MAD': Currency('MAD', 'Moroccan Dirham', 2),
    'MDL': Currency('MDL', 'Moldovan Leu', 2),
    'MGA': Currency('MGA', 'Malagasy Ariary', 2),
    'MKD': Currency('MKD', 'Macedonian Denar', 2),
    'MMK': Currency('MMK', 'Myanmar Kyat', 2),
    'MNT': Currency('MNT', 'Mongolian Tugrik', 2),
    'MOP': Currency('MOP', 'Macanese Pataca', 2),
    'MRU': Currency('MRU', 'Mauritanian Ouguiya', 2),
    'MUR': Currency('MUR', 'Mauritian Rupee', 2),
    'MVR': Currency('MVR', 'Maldivian Rufiyaa', 2),
    'MWK': Currency('MWK', 'Malawian Kwacha', 2),
    'MXN': Currency('MXN', 'Mexican Peso', 2),
    'MXV': Currency('MXV', 'Mexican Investment Unit', 2),
    'MYR': Currency('MYR', 'Malaysian Ringgit', 2),
    'MZN': Currency('MZN', 'Mozambican Metical', 2),
    'NAD': Currency('NAD', 'Namibian Dollar', 2),
    'NGN': Currency('NGN', 'Nigerian Naira', 2),
    'NIO': Currency('NIO', 'Nicaraguan Córdoba', 2),
    'NOK': Currency('NOK', 'Norwegian Krone', 2),
    'NPR': Currency('NPR', 'Nepalese Rupee', 2),
    'NZD': Currency('NZD', 'New Zealand Dollar', 2),
    'OMR': Currency('OMR', 'Omani Rial', 3),
    'PAB': Currency('PAB', 'Panamanian Balboa', 2),
    'PEN': Currency('PEN', 'Peruvian Sol', 2),
    'PGK': Currency('PGK', 'Papua New Guinean Kina', 2),
    'PHP': Currency('PHP', 'Philippine Peso', 2),
    'PKR': Currency('PKR', 'Pakistani Rupee', 2),
    'PLN': Currency('PLN', 'Polish Zloty', 2),
    'PYG': Currency('PYG', 'Paraguayan Guarani', 0),
    'QAR': Currency('QAR', 'Qatari Rial', 2),
    'RON': Currency('RON', 'Romanian Leu', 2),
    'RSD': Currency('RSD', 'Serbian Dinar', 2),
    'RUB': Currency('RUB', 'Russian Rouble', 2),
    'RWF': Currency('RWF', 'Rwandan Franc', 0),
    'SAR': Currency('SAR', 'Saudi Riyal', 2),
    'SBD': Currency('SBD', 'Solomon Islands Dollar', 2),
    'SCR': Currency('SCR', 'Seychellois Rupee', 2),
    'SDG': Currency('SDG', 'Sudanese Pound', 2),
    'SEK': Currency('SEK', 'Swedish Krona', 2),
    'SGD': Currency('SGD', 'Singapore Dollar', 2),
    'SHP': Currency('SHP', 'St Helena Pound', 2),
    'SLL': Currency('SLL', 'Sierra Leonean Leone', 2),
    'SOS': Currency('SOS', 'Somali Shilling', 2),
    'SRD': Currency('SRD', 'Surinamese Dollar', 2),
    'SSP': Currency('SSP', 'South Sudanese Pound', 2),
    'STN': Currency('STN', 'São Tomé & Príncipe Dobra', 2),
    'SVC': Currency('SVC', 'Salvadoran Colón', 2),
    'SYP': Currency('SYP', 'Syrian Pound', 2),
    'SZL': Currency('SZL', 'Swazi Lilangeni', 2),
    'THB': Currency('THB', 'Thai Baht', 2),
    'TJS': Currency('TJS', 'Tajikistani Somoni', 2),
    'TMT': Currency('TMT', 'Turkmenistani Manat', 2),
    'TND': Currency('TND', 'Tunisian Dinar', 3),
    'TOP': Currency('TOP', 'Tongan Paʻanga', 2),
    'TRY': Currency('TRY', 'Turkish Lira', 2),
    'TTD': Currency('TTD', 'Trinidad & Tobago Dollar', 2),
    'TWD': Currency('TWD', 'New Taiwan Dollar', 2),
    'TZS': Currency('TZS', 'Tanzanian Shilling', 2),
    'UAH': Currency('UAH', 'Ukrainian Hryvnia', 2),
    'UGX': Currency('UGX', 'Ugandan Shilling', 0),
    'USD': Currency('USD', 'US Dollar', 2),
    'USN': Currency('USN', 'US Dollar (Next day)', 2),
    'UYI': Currency('UYI', 'Uruguayan Peso (Indexed Units)', 0),
    'UYU': Currency('UYU', 'Uruguayan Peso', 2),
    'UYW': Currency('UYW', 'Uruguayan Nominal Wage Index Unit', 4),
    'UZS': Currency('UZS', 'Uzbekistani Som', 2),
    'VES': Currency('VES', 'Venezuelan Bolívar', 2),
    'VND': Currency('VND', 'Vietnamese Dong', 0),
    'VUV': Currency('VUV', 'Vanuatu Vatu', 0),
    'WST': Currency('WST', 'Samoan Tala', 2),
    'XAF': Currency('XAF', 'Central African CFA Franc', 0),
    'XAG': Currency('XAG', 'Silver', 0),
    'XAU': Currency('XAU', 'Gold', 0),
    'XBA': Currency('XBA', 'European Composite Unit', 0),
    'XBB': Currency('XBB', 'European Monetary Unit', 0),
    'XBC': Currency('XBC', 'European Unit of Account (XBC)', 0),
    'XBD': Currency('XBD', 'European Unit of Account (XBD)', 0),
    'XCD': Currency('XCD', 'East Caribbean Dollar', 2),
    'XDR': Currency('XDR', 'Special Drawing Rights', 0),
    'XOF': Currency('XOF', 'West African CFA Franc', 0),
    'XPD': Currency('XPD', 'Palladium', 0),
    'XPF': Currency('XPF', 'CFP Franc', 0),
    'XPT': Currency('XPT', 'Platinum', 0),
    'XSU': Currency('XSU', 'Sucre', 0),
    'XTS': Currency('XTS', 'Testing Currency Code', 0),
    'XUA': Currency('XUA', 'ADB Unit of Account', 0),
    'XXX': Currency('XXX', 'Unknown Currency', 0),
    'YER': Currency('YER', 'Yemeni Rial', 2),
    'ZAR': Currency('ZAR', 'South African Rand', 2),
    'ZMW': Currency('ZMW', 'Zambian Kwacha', 2),
    'ZWL': Currency('ZWL', 'Zimbabwean Dollar (2009)', 2),
}

_NAMES: dict[str, str] = {currency.name: symbol for symbol, currency in CURRENCIES.items()}


def lookup(symbol: str) -> Currency | None:
    return CURRENCIES.get(symbol)


def by_name(name: str) -> Currency | None:
    symbol = _NAMES.get(name.strip())
    if symbol is None:
        return None
    return CURRENCIES[symbol]


def is_known(symbol: str) -> bool:
    return symbol in CURRENCIES
