"""Conflict resolution for two rates landing in the same (from, to) cell.

A merge function receives the current occupant and the incoming rate and
returns the rate that should occupy the cell. Raising
UnresolvableMergeError leaves the cell untouched and drops the incoming
rate.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum

from domain.exceptions.currency import UnresolvableMergeError
from domain.models.currency import ExchangeRate

MergeFunc = Callable[[ExchangeRate, ExchangeRate], ExchangeRate]


class MergeStrategy(str, Enum):
    RACE = 'race'
    AVERAGE = 'average'
    PRIORITY = 'priority'
    CUSTOM = 'custom'


def merge_race(current: ExchangeRate, incoming: ExchangeRate) -> ExchangeRate:
    # First writer wins
    if current.from_currency.symbol:
        return current
    if incoming.to_currency.symbol:
        return incoming
    raise UnresolvableMergeError('both rates are empty')


def merge_average(current: ExchangeRate, incoming: ExchangeRate) -> ExchangeRate:
    if not current.from_currency.symbol or not incoming.to_currency.symbol:
        raise UnresolvableMergeError('one of the rates is empty')
    return replace(current, rate=(current.rate + incoming.rate) / 2)


def merge_priority(current: ExchangeRate, incoming: ExchangeRate) -> ExchangeRate:
    if current.priority < incoming.priority:
        return incoming
    return current


_BUILTIN: dict[MergeStrategy, MergeFunc] = {
    MergeStrategy.RACE: merge_race,
    MergeStrategy.AVERAGE: merge_average,
    MergeStrategy.PRIORITY: merge_priority,
}


@dataclass(frozen=True)
class MergePolicy:
    strategy: MergeStrategy
    func: MergeFunc

    def __call__(self, current: ExchangeRate, incoming: ExchangeRate) -> ExchangeRate:
        return self.func(current, incoming)

    @classmethod
    def race(cls) -> 'MergePolicy':
        return cls(MergeStrategy.RACE, merge_race)

    @classmethod
    def average(cls) -> 'MergePolicy':
        return cls(MergeStrategy.AVERAGE, merge_average)

    @classmethod
    def priority(cls) -> 'MergePolicy':
        return cls(MergeStrategy.PRIORITY, merge_priority)

    @classmethod
    def custom(cls, func: MergeFunc) -> 'MergePolicy':
        return cls(MergeStrategy.CUSTOM, func)

    @classmethod
    def from_name(cls, name: str) -> 'MergePolicy':
        try:
            strategy = MergeStrategy(name.strip().lower())
        except ValueError as e:
            raise ValueError(f'Unknown merge strategy: {name}') from e
        if strategy is MergeStrategy.CUSTOM:
            raise ValueError('A custom merge strategy needs a function, use MergePolicy.custom()')
        return cls(strategy, _BUILTIN[strategy])
