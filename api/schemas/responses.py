from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.models.currency import ConversionResult, Currency, ExchangeRate, LatestResponse, SourceInfo


class ProviderInfoResponse(BaseModel):
	name: str = Field(..., description='Provider name')
	status: str = Field(..., description='ok or failed')
	error: str | None = Field(None, description='Last error message when the provider failed')

	@classmethod
	def from_info(cls, info: SourceInfo) -> 'ProviderInfoResponse':
		return cls(name=info.name, status=info.status.value, error=info.error_message or None)


class RateResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: float = Field(..., description='Units of to_currency for one unit of from_currency')
	timestamp: datetime = Field(..., description='Publication date of the source quote')

	@classmethod
	def from_rate(cls, rate: ExchangeRate) -> 'RateResponse':
		return cls(
			from_currency=rate.from_currency.symbol,
			to_currency=rate.to_currency.symbol,
			rate=rate.rate,
			timestamp=rate.timestamp,
		)


class LatestRatesResponse(BaseModel):
	expected: list[str] = Field(..., description='Every symbol some provider can quote')
	unreceived: list[str] = Field(..., description='Expected symbols missing from this round')
	providers: list[ProviderInfoResponse]
	rates: list[RateResponse]

	@classmethod
	def from_latest(cls, latest: LatestResponse) -> 'LatestRatesResponse':
		return cls(
			expected=list(latest.expected),
			unreceived=list(latest.unreceived),
			providers=[ProviderInfoResponse.from_info(info) for info in latest.info],
			rates=[RateResponse.from_rate(rate) for rate in latest.result],
		)


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	original_amount: float = Field(..., description='Original amount requested')
	converted_amount: float = Field(..., description='Converted amount')
	exchange_rate: float = Field(..., description='Exchange rate used for conversion')
	timestamp: datetime | None = Field(None, description='Publication date of the rate')
	providers: list[ProviderInfoResponse] = Field(default_factory=list)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'EUR',
				'original_amount': 100.00,
				'converted_amount': 85.50,
				'exchange_rate': 0.8550,
				'timestamp': '2025-09-27T00:00:00Z',
				'providers': [{'name': 'ecb', 'status': 'ok', 'error': None}],
			}
		}
	)

	@classmethod
	def from_result(cls, result: ConversionResult) -> 'ConversionResponse':
		return cls(
			from_currency=result.from_currency.symbol,
			to_currency=result.to_currency.symbol,
			original_amount=result.value,
			converted_amount=result.amount,
			exchange_rate=result.rate,
			timestamp=result.timestamp,
			providers=[ProviderInfoResponse.from_info(info) for info in result.info],
		)


class CurrencyResponse(BaseModel):
	symbol: str
	name: str
	minor_units: int

	@classmethod
	def from_currency(cls, currency: Currency) -> 'CurrencyResponse':
		return cls(symbol=currency.symbol, name=currency.name, minor_units=currency.minor_units)


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyResponse] = Field(description='Exchangeable currencies')

	model_config = ConfigDict(
		json_schema_extra={
			'examples': [{'currencies': [{'symbol': 'USD', 'name': 'US Dollar', 'minor_units': 2}]}]
		}
	)
