from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from domain.exceptions.currency import ProviderError
from infrastructure.providers.rcb import LATEST_URL, RCBSource, decode_xml

DAILY_XML = """<?xml version="1.0" encoding="windows-1251"?>
<ValCurs Date="12.11.2021" name="Foreign Currency Market">
    <Valute ID="R01235">
        <NumCode>840</NumCode>
        <CharCode>USD</CharCode>
        <Nominal>1</Nominal>
        <Name>Доллар США</Name>
        <Value>71,6538</Value>
    </Valute>
    <Valute ID="R01820">
        <NumCode>392</NumCode>
        <CharCode>JPY</CharCode>
        <Nominal>100</Nominal>
        <Name>Японских иен</Name>
        <Value>63,0500</Value>
    </Valute>
    <Valute ID="R00000">
        <CharCode>ABC</CharCode>
        <Nominal>1</Nominal>
        <Value>1,0</Value>
    </Valute>
</ValCurs>
""".encode('windows-1251')


class TestDecodeXml:
    def test_values_are_per_unit(self):
        daily = decode_xml(DAILY_XML)

        assert daily.time == datetime(2021, 11, 12, tzinfo=UTC)
        assert daily.rates == [('USD', 71.6538 / 1.0), ('JPY', 63.05 / 100.0)]

    def test_wrong_root(self):
        with pytest.raises(ValueError, match='unexpected root'):
            decode_xml(b'<Rates Date="12.11.2021"/>')

    def test_missing_date(self):
        with pytest.raises(ValueError, match='Date'):
            decode_xml(b'<ValCurs></ValCurs>')

    def test_non_positive_value(self):
        content = b'<ValCurs Date="12.11.2021"><Valute><CharCode>USD</CharCode><Nominal>1</Nominal><Value>0</Value></Valute></ValCurs>'

        with pytest.raises(ValueError):
            decode_xml(content)


class TestRCBSource:
    def test_identity(self):
        source = RCBSource(client=AsyncMock())

        assert source.name == 'rcb'
        assert 'RUB' in source.get_exchangeable()
        assert 'XDR' in source.get_exchangeable()

    @pytest.mark.asyncio
    async def test_fetch_latest_inverts_ruble_quotes(self):
        source = RCBSource(client=AsyncMock())
        source._http.get = AsyncMock(return_value=DAILY_XML)

        rates = {(r.from_currency.symbol, r.to_currency.symbol): r.rate for r in await source.fetch_latest()}

        assert rates[('RUB', 'USD')] == (1 / 71.6538) / 1.0
        assert rates[('USD', 'RUB')] == 1.0 / (1 / 71.6538)
        assert rates[('USD', 'JPY')] == (1 / (63.05 / 100.0)) / (1 / 71.6538)
        assert len(rates) == 3 * 2

        url, = source._http.get.call_args.args
        assert url == LATEST_URL
        assert 'date_req' in source._http.get.call_args.kwargs['params']

    @pytest.mark.asyncio
    async def test_decode_failure_is_provider_error(self):
        source = RCBSource(client=AsyncMock())
        source._http.get = AsyncMock(return_value=b'<html>maintenance</html>')

        with pytest.raises(ProviderError, match='decode'):
            await source.fetch_latest()
