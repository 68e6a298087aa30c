import math

from tests.fakes import TIMESTAMP

from domain.services.triangulation import triangulate


def _by_pair(rates):
    return {(r.from_currency.symbol, r.to_currency.symbol): r for r in rates}


def test_cross_rate_from_anchor_quotes():
    rates = _by_pair(triangulate('AED', [('USD', 0.27229), ('AUD', 0.37092)], TIMESTAMP))

    assert rates[('USD', 'AUD')].rate == 0.37092 / 0.27229
    assert math.isclose(rates[('USD', 'AUD')].rate, 1.3622, rel_tol=1e-4)
    assert rates[('AUD', 'USD')].rate == 0.27229 / 0.37092


def test_anchor_is_implicit_identity():
    rates = _by_pair(triangulate('EUR', [('USD', 1.1448), ('JPY', 130.3)], TIMESTAMP))

    assert rates[('EUR', 'USD')].rate == 1.1448 / 1.0
    assert rates[('USD', 'EUR')].rate == 1.0 / 1.1448
    assert rates[('EUR', 'JPY')].rate == 130.3


def test_every_ordered_pair_without_self_pairs():
    rates = triangulate('EUR', [('USD', 1.1), ('GBP', 0.85), ('JPY', 130.0)], TIMESTAMP)
    pairs = {(r.from_currency.symbol, r.to_currency.symbol) for r in rates}

    assert len(rates) == 4 * 3
    assert len(pairs) == len(rates)
    assert all(a != b for a, b in pairs)


def test_timestamp_is_propagated():
    rates = triangulate('EUR', [('USD', 1.1)], TIMESTAMP)
    assert {r.timestamp for r in rates} == {TIMESTAMP}


def test_inverse_quotes_are_inverted_first():
    # 52.9 RUB per USD, 61.2 RUB per EUR
    rates = _by_pair(triangulate('RUB', [('USD', 52.9), ('EUR', 61.2)], TIMESTAMP, inverse=True))

    assert rates[('RUB', 'USD')].rate == (1 / 52.9) / 1.0
    assert rates[('USD', 'RUB')].rate == 1.0 / (1 / 52.9)
    assert rates[('USD', 'EUR')].rate == (1 / 61.2) / (1 / 52.9)


def test_reverse_pair_is_reciprocal():
    rates = _by_pair(triangulate('EUR', [('USD', 1.1448), ('GBP', 0.8543)], TIMESTAMP))

    forward = rates[('USD', 'GBP')].rate
    backward = rates[('GBP', 'USD')].rate
    assert math.isclose(forward * backward, 1.0, rel_tol=1e-12)


def test_skips_unknown_and_invalid_quotes():
    rates = triangulate('EUR', [('USD', 1.1), ('ZZZ', 2.0), ('GBP', 0.0), ('JPY', float('nan'))], TIMESTAMP)
    symbols = {r.from_currency.symbol for r in rates}

    assert symbols == {'EUR', 'USD'}


def test_anchor_quote_is_ignored():
    rates = _by_pair(triangulate('EUR', [('EUR', 5.0), ('USD', 1.1)], TIMESTAMP))
    assert rates[('EUR', 'USD')].rate == 1.1


def test_unknown_anchor_yields_nothing():
    assert triangulate('ZZZ', [('USD', 1.1)], TIMESTAMP) == []


def test_only_anchor_yields_nothing():
    assert triangulate('EUR', [], TIMESTAMP) == []
