import asyncio
from dataclasses import replace
from unittest.mock import Mock

import pytest
from tests.fakes import make_rate, table_cells

from application.services.merge_table import MergeTable
from domain.exceptions.currency import UnresolvableMergeError
from domain.models.currency import EMPTY_CURRENCY
from domain.models.merge import MergePolicy


@pytest.mark.asyncio
async def test_empty_cell_never_calls_the_policy():
    func = Mock(side_effect=lambda current, incoming: incoming)
    table = MergeTable(MergePolicy.custom(func))

    await table.merge([make_rate('EUR', 'USD', 1.1), make_rate('USD', 'EUR', 0.9)])

    func.assert_not_called()
    assert len(await table.flatten()) == 2


@pytest.mark.asyncio
async def test_occupied_cell_always_calls_the_policy():
    func = Mock(side_effect=lambda current, incoming: incoming)
    table = MergeTable(MergePolicy.custom(func))

    first = make_rate('EUR', 'USD', 1.1)
    second = make_rate('EUR', 'USD', 1.2)
    await table.merge([first])
    await table.merge([second])

    func.assert_called_once_with(first, second)
    cells = await table_cells(table)
    assert cells[('EUR', 'USD')] is second
    assert len(cells) == 1


@pytest.mark.asyncio
async def test_unresolvable_merge_drops_incoming_and_counts():
    table = MergeTable(MergePolicy.custom(Mock(side_effect=UnresolvableMergeError('nope'))))

    first = make_rate('EUR', 'USD', 1.1)
    await table.merge([first, make_rate('EUR', 'USD', 1.2), make_rate('EUR', 'USD', 1.3)])

    assert (await table_cells(table))[('EUR', 'USD')] is first
    assert table.dropped == 2


@pytest.mark.asyncio
async def test_race_keeps_first_writer():
    table = MergeTable()

    await table.merge([make_rate('GBP', 'USD', 1.2)])
    await table.merge([make_rate('GBP', 'USD', 3.0)])

    assert (await table_cells(table))[('GBP', 'USD')].rate == 1.2


@pytest.mark.asyncio
async def test_race_with_empty_rates_is_dropped():
    table = MergeTable(MergePolicy.race())
    empty = replace(make_rate('GBP', 'USD', 1.2), from_currency=EMPTY_CURRENCY, to_currency=EMPTY_CURRENCY)

    await table.merge([empty, empty])

    assert table.dropped == 1


@pytest.mark.asyncio
async def test_flatten_returns_every_cell():
    table = MergeTable()
    await table.merge([make_rate('EUR', 'USD', 1.1), make_rate('USD', 'JPY', 110.0), make_rate('EUR', 'JPY', 121.0)])

    flattened = await table.flatten()

    assert len(flattened) == 3
    assert {(r.from_currency.symbol, r.to_currency.symbol) for r in flattened} == {
        ('EUR', 'USD'),
        ('USD', 'JPY'),
        ('EUR', 'JPY'),
    }


@pytest.mark.asyncio
async def test_concurrent_merges_keep_one_rate_per_cell():
    table = MergeTable(MergePolicy.average())
    batches = [[make_rate('EUR', 'USD', 1.0), make_rate('USD', 'EUR', 1.0)] for _ in range(20)]

    await asyncio.gather(*(table.merge(batch) for batch in batches))

    cells = await table_cells(table)
    assert len(cells) == 2
    assert cells[('EUR', 'USD')].rate == 1.0
    assert table.dropped == 0
