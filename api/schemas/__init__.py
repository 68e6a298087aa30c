from .responses import (
	ConversionResponse,
	CurrencyResponse,
	LatestRatesResponse,
	ProviderInfoResponse,
	RateResponse,
	SupportedCurrenciesResponse,
)

__all__ = [
	'ConversionResponse',
	'CurrencyResponse',
	'LatestRatesResponse',
	'ProviderInfoResponse',
	'RateResponse',
	'SupportedCurrenciesResponse',
]
