from tests.fakes import TIMESTAMP, make_rate

from domain.models import catalog
from domain.models.currency import ConversionResult, LatestResponse, ProviderStatus, SourceInfo


def test_catalog_lookup():
    usd = catalog.lookup('USD')

    assert usd is not None
    assert usd.name == 'US Dollar'
    assert usd.minor_units == 2
    assert catalog.lookup('JPY').minor_units == 0
    assert catalog.lookup('KWD').minor_units == 3
    assert catalog.lookup('ZZZ') is None


def test_catalog_by_name():
    assert catalog.by_name('Euro').symbol == 'EUR'
    assert catalog.by_name(' US Dollar ').symbol == 'USD'
    assert catalog.by_name('Galactic Credit') is None


def test_source_info_success_flag():
    assert SourceInfo(name='ecb', status=ProviderStatus.OK).is_successful
    assert not SourceInfo(name='ecb', status=ProviderStatus.FAILED, error_message='boom').is_successful


def test_verify_requires_every_expected_symbol():
    complete = LatestResponse(expected=('EUR', 'USD'), unreceived=())
    partial = LatestResponse(expected=('EUR', 'USD'), unreceived=('USD',))

    assert complete.verify()
    assert not partial.verify()
    assert not LatestResponse().verify()


def test_find_exact_ordered_pair():
    latest = LatestResponse(result=(make_rate('EUR', 'USD', 1.1), make_rate('USD', 'EUR', 1 / 1.1)))

    assert latest.find('EUR', 'USD').rate == 1.1
    assert latest.find('EUR', 'GBP') is None


def test_conversion_result_str():
    result = ConversionResult(
        value=100.0,
        from_currency=catalog.CURRENCIES['EUR'],
        to_currency=catalog.CURRENCIES['USD'],
        rate=1.1,
        amount=110.0,
        timestamp=TIMESTAMP,
    )

    assert str(result) == 'Value: 100.000000, From: EUR, To: USD, Rate: 1.100000, Amount: 110.000000'
