from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from domain.exceptions.currency import ProviderError
from infrastructure.providers.cae import CAESource, parse_html

RATES_PAGE = b"""<!DOCTYPE html>
<html>
<body>
<div id="ratesDatePicker">
    <h3>Exchange rates <span>for <span>Fri 12-11-2021</span></span></h3>
</div>
<table id="ratesDateTable">
    <thead><tr><th>Currency</th><th>Rate</th></tr></thead>
    <tbody>
        <tr><td>US Dollar</td><td>3.6725</td></tr>
        <tr><td>Euro</td><td>4.2044</td></tr>
        <tr><td>Indian Rupee</td><td>0.049344</td></tr>
        <tr><td>Unobtainium</td><td>1.0</td></tr>
    </tbody>
</table>
</body>
</html>
"""


def _page(rows: str, date: str = 'Fri 12-11-2021') -> bytes:
    return (
        f'<html><body><div id="ratesDatePicker"><h3><span><span>{date}</span></span></h3></div>'
        f'<table id="ratesDateTable"><tbody>{rows}</tbody></table></body></html>'
    ).encode()


class TestParseHtml:
    def test_rates_by_display_name(self):
        daily = parse_html(RATES_PAGE)

        assert daily.time == datetime(2021, 11, 12, tzinfo=UTC)
        assert daily.rates == [('USD', 3.6725), ('EUR', 4.2044), ('INR', 0.049344)]

    def test_missing_date(self):
        with pytest.raises(ValueError, match='rates date'):
            parse_html(b'<html><body><table id="ratesDateTable"></table></body></html>')

    def test_malformed_date(self):
        with pytest.raises(ValueError, match='rates date'):
            parse_html(_page('', date='Fri 2021/11/12'))

    def test_empty_name(self):
        with pytest.raises(ValueError, match='empty currency name'):
            parse_html(_page('<tr><td> </td><td>3.6</td></tr>'))

    def test_bad_rate(self):
        with pytest.raises(ValueError, match='rate for US Dollar'):
            parse_html(_page('<tr><td>US Dollar</td><td>n/a</td></tr>'))


class TestCAESource:
    def test_identity(self):
        source = CAESource(client=AsyncMock())

        assert source.name == 'cae'
        assert 'AED' in source.get_exchangeable()

    @pytest.mark.asyncio
    async def test_fetch_latest_inverts_dirham_quotes(self):
        source = CAESource(client=AsyncMock())
        source._http.get = AsyncMock(return_value=RATES_PAGE)

        rates = {(r.from_currency.symbol, r.to_currency.symbol): r.rate for r in await source.fetch_latest()}

        assert rates[('AED', 'USD')] == (1 / 3.6725) / 1.0
        assert rates[('USD', 'EUR')] == (1 / 4.2044) / (1 / 3.6725)
        assert len(rates) == 4 * 3

    @pytest.mark.asyncio
    async def test_decode_failure_is_provider_error(self):
        source = CAESource(client=AsyncMock())
        source._http.get = AsyncMock(return_value=b'<html><body>maintenance</body></html>')

        with pytest.raises(ProviderError, match='decode'):
            await source.fetch_latest()
