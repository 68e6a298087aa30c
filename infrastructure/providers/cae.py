import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx
from bs4 import BeautifulSoup

from domain.exceptions.currency import ProviderError
from domain.models import catalog
from domain.models.currency import ExchangeRate
from domain.services.triangulation import triangulate
from infrastructure.providers.base import ExchangeRateSource, SourceHTTPClient

logger = logging.getLogger(__name__)

ANCHOR = 'AED'

LATEST_URL = 'https://www.centralbank.ae/en/fx-rates'

EXCHANGEABLE_SYMBOLS = [
    'AED', 'USD', 'ARS', 'AUD', 'BND', 'BRL', 'CAD', 'CHF', 'CLP', 'CNY', 'COP',
    'CZK', 'DKK', 'DZD', 'EUR', 'HUF', 'INR', 'JPY', 'KWD', 'MAD', 'MXN',
    'NGN', 'NOK', 'OMR', 'PLN', 'RSD', 'SAR', 'SDG', 'SEK', 'SGD', 'THB',
    'TND', 'TRY', 'ZMW',
]

HTML_PARSER = 'lxml'


@dataclass
class AedDailyRates:
    time: datetime
    rates: list[tuple[str, float]] = field(default_factory=list)


def parse_html(content: bytes) -> AedDailyRates:
    """Rates page: a date picker header (`Thu 11-11-2021`) and a two column table of
    currency display name and dirhams per unit."""
    soup = BeautifulSoup(content, HTML_PARSER)

    date_node = soup.select_one('#ratesDatePicker > h3 > span > span')
    date = date_node.get_text() if date_node else ''
    if len(date) < 4:
        raise ValueError('attr is not valid: missing rates date')
    try:
        time = datetime.strptime(date[4:].strip(), '%d-%m-%Y').replace(tzinfo=UTC)
    except ValueError as e:
        raise ValueError(f'attr is not valid: rates date {date!r}') from e

    daily = AedDailyRates(time=time)
    for row in soup.select('#ratesDateTable tbody tr'):
        cells = row.find_all('td')
        if len(cells) < 2:
            continue

        name = cells[0].get_text(strip=True)
        if not name:
            raise ValueError('attr is not valid: empty currency name')

        currency = catalog.by_name(name)
        if currency is None:
            continue

        try:
            rate = float(cells[1].get_text(strip=True))
        except ValueError as e:
            raise ValueError(f'attr is not valid: rate for {name}') from e

        daily.rates.append((currency.symbol, rate))

    return daily


class CAESource(ExchangeRateSource):
    """Central Bank of the UAE. Quotes are dirhams per unit of currency."""

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 10, url: str = LATEST_URL):
        self._http = SourceHTTPClient(client, timeout=timeout)
        self.url = url

    @property
    def name(self) -> str:
        return 'cae'

    def get_exchangeable(self) -> list[str]:
        return list(EXCHANGEABLE_SYMBOLS)

    async def fetch_latest(self) -> list[ExchangeRate]:
        content = await self._http.get(self.url)

        try:
            daily = parse_html(content)
        except ValueError as e:
            raise ProviderError(f'decode: {e}') from e

        logger.debug(f'CAE published {len(daily.rates)} rates for {daily.time.date()}')
        return triangulate(ANCHOR, daily.rates, daily.time, inverse=True)

    async def close(self) -> None:
        await self._http.close()
