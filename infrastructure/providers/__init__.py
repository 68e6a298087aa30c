import httpx

from config.settings import Settings

from .base import ExchangeRateSource, SourceHTTPClient
from .cae import CAESource
from .ecb import ECBSource
from .rcb import RCBSource

__all__ = [
    'CAESource',
    'ECBSource',
    'ExchangeRateSource',
    'RCBSource',
    'SourceHTTPClient',
    'build_default_sources',
]


def build_default_sources(
    settings: Settings, client: httpx.AsyncClient | None = None
) -> list[tuple[str, int, ExchangeRateSource]]:
    """(name, priority, source) for every enabled central bank, in settings order."""
    timeout = settings.HTTP_TIMEOUT_SECONDS
    available = {
        'ecb': (settings.ECB_PRIORITY, lambda: ECBSource(client, timeout=timeout)),
        'rcb': (settings.RCB_PRIORITY, lambda: RCBSource(client, timeout=timeout)),
        'cae': (settings.CAE_PRIORITY, lambda: CAESource(client, timeout=timeout)),
    }

    sources = []
    for name in settings.ENABLED_PROVIDERS:
        if name not in available:
            raise ValueError(f'Unknown provider: {name}')
        priority, factory = available[name]
        sources.append((name, priority, factory()))
    return sources
