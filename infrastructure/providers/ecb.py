import asyncio
import csv
import io
import logging
import zipfile
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx
from lxml import etree

from domain.exceptions.currency import ProviderError
from domain.models import catalog
from domain.models.currency import ExchangeRate
from domain.services.triangulation import triangulate
from infrastructure.providers.base import ExchangeRateSource, SourceHTTPClient

logger = logging.getLogger(__name__)

ANCHOR = 'EUR'

LATEST_XML_URL = 'https://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml'
LATEST_CSV_URL = 'https://www.ecb.europa.eu/stats/eurofxref/eurofxref.zip'

EXCHANGEABLE_SYMBOLS = [
    'USD', 'EUR', 'JPY', 'BGN', 'CZK', 'DKK', 'GBP', 'HUF', 'PLN',
    'RON', 'SEK', 'CHF', 'ISK', 'NOK', 'HRK', 'RUB', 'TRY', 'AUD',
    'BRL', 'CAD', 'CNY', 'HKD', 'IDR', 'ILS', 'INR', 'KRW', 'MXN', 'MYR',
    'NZD', 'PHP', 'SGD', 'THB', 'ZAR',
]


@dataclass
class EuroDailyRates:
    time: datetime
    rates: list[tuple[str, float]] = field(default_factory=list)


DecodeFunc = Callable[[bytes], EuroDailyRates]


def _parse_rate(value: str) -> float:
    rate = float(value)
    if rate <= 0:
        raise ValueError(f'attr is not valid: rate {value}')
    return rate


def decode_xml(content: bytes) -> EuroDailyRates:
    """Daily reference rates: <Cube time="YYYY-MM-DD"><Cube currency="USD" rate="1.1"/>...</Cube>."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    root = etree.fromstring(content, parser=parser)

    for cube in root.iter('{*}Cube'):
        day = cube.get('time')
        if day is None:
            continue

        daily = EuroDailyRates(time=datetime.strptime(day, '%Y-%m-%d').replace(tzinfo=UTC))
        for item in cube.iterchildren('{*}Cube'):
            symbol = item.get('currency')
            value = item.get('rate')
            if symbol is None or value is None or not catalog.is_known(symbol):
                continue
            daily.rates.append((symbol, _parse_rate(value)))
        return daily

    raise ValueError('node not found: Cube with time attribute')


def decode_csv(content: bytes) -> EuroDailyRates:
    """Zipped single-row CSV: `Date, USD, JPY, ...` then `12 November 2021, 1.1448, ...`."""
    with zipfile.ZipFile(io.BytesIO(content)) as archive:
        names = archive.namelist()
        if not names:
            raise ValueError('empty archive')
        text = archive.read(names[0]).decode('utf-8-sig')

    reader = csv.reader(io.StringIO(text))
    header = [column.strip(' \t') for column in next(reader, [])]
    if not header or header[0] != 'Date':
        raise ValueError('attr is not valid: missing Date column')

    for line in reader:
        daily: EuroDailyRates | None = None
        rates: list[tuple[str, float]] = []
        for n, column in enumerate(line):
            token = column.strip(' \t')
            if not token or n >= len(header):
                continue
            if n == 0:
                daily = EuroDailyRates(time=datetime.strptime(token, '%d %B %Y').replace(tzinfo=UTC))
                continue
            symbol = header[n]
            if not catalog.is_known(symbol):
                continue
            rates.append((symbol, _parse_rate(token)))

        if daily is not None:
            daily.rates = rates
            return daily

    raise ValueError('no data rows')


@dataclass(frozen=True)
class Fetcher:
    url: str
    decode: DecodeFunc


class ECBSource(ExchangeRateSource):
    """European Central Bank. Quotes are units of currency per 1 EUR."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10,
        fetchers: list[Fetcher] | None = None,
    ):
        self._http = SourceHTTPClient(client, timeout=timeout)
        self.fetchers = fetchers or [
            Fetcher(LATEST_CSV_URL, decode_csv),
            Fetcher(LATEST_XML_URL, decode_xml),
        ]

    @property
    def name(self) -> str:
        return 'ecb'

    def get_exchangeable(self) -> list[str]:
        return list(EXCHANGEABLE_SYMBOLS)

    async def fetch_latest(self) -> list[ExchangeRate]:
        daily = await self._fetching_plan()
        logger.debug(f'ECB published {len(daily.rates)} rates for {daily.time.date()}')
        return triangulate(ANCHOR, daily.rates, daily.time)

    async def _fetching_plan(self) -> EuroDailyRates:
        # Both resources carry the same data; the first one to decode wins.
        tasks = [asyncio.create_task(self._fetch(fetcher)) for fetcher in self.fetchers]
        errors: list[str] = []
        try:
            for next_done in asyncio.as_completed(tasks):
                try:
                    return await next_done
                except ProviderError as e:
                    errors.append(str(e))
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        raise ProviderError(f'fetching plan: {"; ".join(errors)}')

    async def _fetch(self, fetcher: Fetcher) -> EuroDailyRates:
        content = await self._http.get(fetcher.url)
        try:
            return fetcher.decode(content)
        except (ValueError, KeyError, csv.Error, zipfile.BadZipFile, etree.XMLSyntaxError) as e:
            raise ProviderError(f'decode {fetcher.url}: {e}') from e

    async def close(self) -> None:
        await self._http.close()
