import logging

from application.services.registry import ProviderRegistry
from domain.exceptions.currency import CurrencyNotExchangeableError, UnknownCurrencyError
from domain.models import catalog
from domain.models.currency import Currency

logger = logging.getLogger(__name__)


class CurrencyService:
	def __init__(self, registry: ProviderRegistry):
		self.registry = registry

	def validate_currency(self, symbol: str) -> Currency:
		currency = catalog.lookup(symbol)
		if currency is None:
			raise UnknownCurrencyError(symbol)

		if symbol not in self.registry.get_exchangeable():
			raise CurrencyNotExchangeableError(symbol)

		return currency

	def get_supported_currencies(self) -> list[Currency]:
		"""Exchangeable symbols with their catalog records, sorted by symbol."""
		currencies = []
		for symbol in self.registry.get_exchangeable():
			currency = catalog.lookup(symbol)
			if currency is None:
				logger.warning(f'Provider declares {symbol} which is missing from the catalog')
				continue
			currencies.append(currency)
		return currencies
