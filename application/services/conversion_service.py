import logging
from collections.abc import Awaitable, Callable

from application.services.currency_service import CurrencyService
from application.services.rate_service import RateService
from domain.exceptions.currency import ConversionRateError
from domain.models.currency import ConversionResult, LatestResponse

logger = logging.getLogger(__name__)

FetchFunc = Callable[[], Awaitable[LatestResponse]]


class ConversionService:
	def __init__(self, rate_service: RateService, currency_service: CurrencyService):
		self.rate_service = rate_service
		self.currency_service = currency_service

	async def convert(
		self,
		from_symbol: str,
		to_symbol: str,
		amount: float,
		fetch: FetchFunc | None = None,
	) -> ConversionResult:
		"""Convert `amount` using the latest aggregate.

		Both symbols are validated before anything is fetched. `fetch` replaces
		the live round, e.g. with a cached snapshot. Raises ConversionRateError
		carrying the unconverted amount when the pair has no rate.
		"""
		from_currency = self.currency_service.validate_currency(from_symbol)
		to_currency = self.currency_service.validate_currency(to_symbol)

		latest = await (fetch or self.rate_service.get_latest)()

		rate = latest.find(from_symbol, to_symbol)
		if rate is None:
			logger.info(f'No rate for {from_symbol}->{to_symbol} this round')
			raise ConversionRateError(
				ConversionResult(
					value=amount,
					from_currency=from_currency,
					to_currency=to_currency,
					info=latest.info,
				)
			)

		return ConversionResult(
			value=amount,
			from_currency=from_currency,
			to_currency=to_currency,
			rate=rate.rate,
			amount=amount * rate.rate,
			timestamp=rate.timestamp,
			info=latest.info,
		)
