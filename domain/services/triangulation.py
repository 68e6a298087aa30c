import logging
import math
from collections.abc import Iterable
from datetime import datetime

from domain.models import catalog
from domain.models.currency import ExchangeRate

logger = logging.getLogger(__name__)


def triangulate(
    anchor: str,
    quotes: Iterable[tuple[str, float]],
    timestamp: datetime,
    *,
    inverse: bool = False,
) -> list[ExchangeRate]:
    """
    Expand anchor-relative quotes into every ordered pair of supported symbols.

    Each quote is (symbol, rate). With inverse=False the rate is the number
    of `symbol` units one anchor unit buys (ECB style); with inverse=True it
    is the number of anchor units one `symbol` unit costs (RCB, CAE style)
    and is inverted first. The anchor itself is always present at 1.

    rate(A -> B) = per_anchor[B] / per_anchor[A]
    """
    per_anchor: dict[str, float] = {}
    for symbol, rate in quotes:
        if symbol == anchor:
            continue
        if not catalog.is_known(symbol):
            logger.debug(f'Skipping {symbol}: not in currency catalog')
            continue
        if not math.isfinite(rate) or rate <= 0:
            logger.warning(f'Skipping {symbol}: invalid rate {rate!r} against {anchor}')
            continue
        per_anchor[symbol] = 1 / rate if inverse else rate

    anchor_currency = catalog.lookup(anchor)
    if anchor_currency is None:
        logger.error(f'Anchor currency {anchor} is not in the catalog')
        return []
    per_anchor[anchor] = 1.0

    currencies = [catalog.CURRENCIES[symbol] for symbol in per_anchor]
    rates: list[ExchangeRate] = []
    for from_currency in currencies:
        for to_currency in currencies:
            if from_currency.symbol == to_currency.symbol:
                continue
            rates.append(
                ExchangeRate(
                    timestamp=timestamp,
                    from_currency=from_currency,
                    to_currency=to_currency,
                    rate=per_anchor[to_currency.symbol] / per_anchor[from_currency.symbol],
                )
            )
    return rates
