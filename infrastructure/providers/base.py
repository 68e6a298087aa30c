from abc import ABC, abstractmethod

import httpx

from domain.exceptions.currency import ProviderError
from domain.models.currency import ExchangeRate

DEFAULT_USER_AGENT = 'fx-aggregator/0.1.0'


class ExchangeRateSource(ABC):
    """A central bank feed, already triangulated into pairwise rates."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    async def fetch_latest(self) -> list[ExchangeRate]:
        ...

    @abstractmethod
    def get_exchangeable(self) -> list[str]:
        ...

    async def close(self) -> None:
        return None


class SourceHTTPClient:
    """Thin GET-bytes wrapper over httpx shared by the central bank sources."""

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 10, user_agent: str = DEFAULT_USER_AGENT):
        self.user_agent = user_agent
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def get(self, url: str, params: dict | None = None) -> bytes:
        try:
            response = await self._client.get(
                url,
                params=params,
                headers={'User-Agent': self.user_agent, 'Accept-Encoding': 'gzip'},
            )
            response.raise_for_status()
            return response.content

        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f'http status: {e.response.status_code}, {e.response.text[:200]}'
            ) from e
        except httpx.RequestError as e:
            raise ProviderError(f'make HTTP request: {e.__class__.__name__}') from e

    async def close(self) -> None:
        await self._client.aclose()
