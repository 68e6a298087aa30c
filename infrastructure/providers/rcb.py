import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx
from lxml import etree

from domain.exceptions.currency import ProviderError
from domain.models import catalog
from domain.models.currency import ExchangeRate
from domain.services.triangulation import triangulate
from infrastructure.providers.base import ExchangeRateSource, SourceHTTPClient

logger = logging.getLogger(__name__)

ANCHOR = 'RUB'

LATEST_URL = 'https://cbr.ru/scripts/XML_daily.asp'

EXCHANGEABLE_SYMBOLS = [
    'RUB', 'AUD', 'AZN', 'GBP', 'AMD', 'BYN', 'BGN', 'BRL', 'HUF', 'HKD', 'DKK', 'USD',
    'EUR', 'INR', 'KZT', 'CAD', 'KGS', 'CNY', 'MDL', 'NOK', 'PLN', 'RON', 'XDR',
    'SGD', 'TJS', 'TRY', 'TMT', 'UZS', 'UAH', 'CZK', 'SEK', 'CHF', 'ZAR', 'KRW',
    'JPY',
]


@dataclass
class RubDailyRates:
    time: datetime
    rates: list[tuple[str, float]] = field(default_factory=list)


def _parse_number(value: str) -> float:
    return float(value.strip().replace(',', '.'))


def decode_xml(content: bytes) -> RubDailyRates:
    """<ValCurs Date="DD.MM.YYYY"><Valute><CharCode/><Nominal/><Value>52,9101</Value></Valute>...</ValCurs>

    Values are rubles per `Nominal` units of the currency; the document is
    usually windows-1251 encoded, which the XML declaration announces.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    root = etree.fromstring(content, parser=parser)
    if root.tag != 'ValCurs':
        raise ValueError(f'unexpected root element {root.tag}')

    date = root.get('Date')
    if not date:
        raise ValueError('attr is not valid: missing Date')

    daily = RubDailyRates(time=datetime.strptime(date, '%d.%m.%Y').replace(tzinfo=UTC))
    for valute in root.iter('Valute'):
        symbol = (valute.findtext('CharCode') or '').strip()
        if not catalog.is_known(symbol):
            continue

        value = _parse_number(valute.findtext('Value') or '')
        nominal = _parse_number(valute.findtext('Nominal') or '1')
        if value <= 0 or nominal <= 0:
            raise ValueError(f'attr is not valid: {symbol} value={value} nominal={nominal}')

        daily.rates.append((symbol, value / nominal))

    return daily


class RCBSource(ExchangeRateSource):
    """Central Bank of Russia. Quotes are rubles per unit of currency."""

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 10, url: str = LATEST_URL):
        self._http = SourceHTTPClient(client, timeout=timeout)
        self.url = url

    @property
    def name(self) -> str:
        return 'rcb'

    def get_exchangeable(self) -> list[str]:
        return list(EXCHANGEABLE_SYMBOLS)

    async def fetch_latest(self) -> list[ExchangeRate]:
        params = {'date_req': datetime.now(tz=UTC).strftime('%d/%m/%Y')}
        content = await self._http.get(self.url, params=params)

        try:
            daily = decode_xml(content)
        except (ValueError, etree.XMLSyntaxError) as e:
            raise ProviderError(f'decode: {e}') from e

        logger.debug(f'RCB published {len(daily.rates)} rates for {daily.time.date()}')
        return triangulate(ANCHOR, daily.rates, daily.time, inverse=True)

    async def close(self) -> None:
        await self._http.close()
