import asyncio
import logging
from collections.abc import Iterable

from domain.exceptions.currency import UnresolvableMergeError
from domain.models.currency import ExchangeRate
from domain.models.merge import MergePolicy

logger = logging.getLogger(__name__)


class MergeTable:
    """from-symbol -> to-symbol -> ExchangeRate, shared by all providers of one round.

    A single lock guards the whole table: one batch merge (or one flatten)
    at a time.
    """

    def __init__(self, policy: MergePolicy | None = None):
        self.policy = policy or MergePolicy.race()
        self.items: dict[str, dict[str, ExchangeRate]] = {}
        self.dropped = 0
        self._lock = asyncio.Lock()

    async def merge(self, rates: Iterable[ExchangeRate]) -> None:
        async with self._lock:
            for rate in rates:
                self._merge_one(rate)

    def _merge_one(self, rate: ExchangeRate) -> None:
        from_symbol, to_symbol = rate.from_currency.symbol, rate.to_currency.symbol
        row = self.items.setdefault(from_symbol, {})

        current = row.get(to_symbol)
        if current is None:
            row[to_symbol] = rate
            return

        try:
            row[to_symbol] = self.policy(current, rate)
        except UnresolvableMergeError as e:
            self.dropped += 1
            logger.debug(f'Dropped {from_symbol}->{to_symbol} rate {rate.rate}: {e}')

    async def flatten(self) -> list[ExchangeRate]:
        async with self._lock:
            return [rate for row in self.items.values() for rate in row.values()]
