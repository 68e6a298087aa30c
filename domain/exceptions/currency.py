from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.models.currency import ConversionResult


class CurrencyException(Exception):
    pass


class ProviderError(CurrencyException):
    pass


class DeadlineExceededError(ProviderError, TimeoutError):
    """The shared round deadline fired before the provider finished."""


class CurrencyNotFoundError(CurrencyException):
    def __init__(self, symbol: str, message: str | None = None):
        self.symbol = symbol
        super().__init__(message or f'Currency symbol is not supported: {symbol}')


class UnknownCurrencyError(CurrencyNotFoundError):
    def __init__(self, symbol: str):
        super().__init__(symbol, f'Currency symbol is not supported: {symbol}')


class CurrencyNotExchangeableError(CurrencyNotFoundError):
    def __init__(self, symbol: str):
        super().__init__(symbol, f'Currency {symbol} is not exchangeable by any registered provider')


class ConversionRateError(CurrencyException):
    """No provider produced a rate for the requested pair this round."""

    def __init__(self, result: ConversionResult):
        self.result = result
        super().__init__(
            f'Can not convert {result.from_currency.symbol} to {result.to_currency.symbol}: no rate available'
        )


class UnresolvableMergeError(CurrencyException):
    pass


class CacheError(CurrencyException):
    pass
