from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class Currency:
    symbol: str
    name: str
    minor_units: int


# Sentinel for "no currency"; merge policies treat an empty symbol as a missing side.
EMPTY_CURRENCY = Currency(symbol='', name='', minor_units=0)


@dataclass(frozen=True)
class ExchangeRate:
    """1 unit of from_currency buys `rate` units of to_currency."""

    timestamp: datetime
    from_currency: Currency
    to_currency: Currency
    rate: float
    priority: int = 0


class ProviderStatus(Enum):
    FAILED = 'failed'
    OK = 'ok'


@dataclass(frozen=True)
class SourceInfo:
    name: str
    status: ProviderStatus
    error_message: str = ''

    @property
    def is_successful(self) -> bool:
        return self.status is ProviderStatus.OK


@dataclass(frozen=True)
class LatestResponse:
    expected: tuple[str, ...] = ()
    unreceived: tuple[str, ...] = ()
    info: tuple[SourceInfo, ...] = ()
    result: tuple[ExchangeRate, ...] = ()

    def verify(self) -> bool:
        """True when every expected symbol showed up in this round's rates."""
        return bool(self.expected) and not self.unreceived

    def find(self, from_symbol: str, to_symbol: str) -> ExchangeRate | None:
        for rate in self.result:
            if rate.from_currency.symbol == from_symbol and rate.to_currency.symbol == to_symbol:
                return rate
        return None


@dataclass(frozen=True)
class ConversionResult:
    """`value` units of from_currency buy `amount` units of to_currency; `amount` stays 0 without a rate."""

    value: float
    from_currency: Currency
    to_currency: Currency
    rate: float = 0.0
    amount: float = 0.0
    timestamp: datetime | None = None
    info: tuple[SourceInfo, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return (
            f'Value: {self.value:f}, From: {self.from_currency.symbol}, To: {self.to_currency.symbol}, '
            f'Rate: {self.rate:f}, Amount: {self.amount:f}'
        )
