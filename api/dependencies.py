import logging
from typing import Annotated

from fastapi import Depends
from redis.asyncio import Redis

from application.services import (
	ConversionService,
	CurrencyService,
	ProviderRegistry,
	RateService,
)
from config.settings import get_settings
from domain.exceptions.currency import CacheError
from domain.models.currency import LatestResponse
from infrastructure.cache.redis_cache import RedisCacheService
from infrastructure.providers import build_default_sources

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	redis_client: Redis | None = None
	redis_cache: RedisCacheService | None = None
	registry: ProviderRegistry | None = None
	rate_service: RateService | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	deps.redis_client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
	deps.redis_cache = RedisCacheService(deps.redis_client, ttl=settings.LATEST_CACHE_TTL_SECONDS)

	deps.registry = ProviderRegistry()
	for name, priority, source in build_default_sources(settings):
		deps.registry.register(name, source, priority)

	deps.rate_service = RateService.from_settings(settings, deps.registry)
	logger.info(f'Dependencies initialized with providers: {", ".join(deps.registry.names())}')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.rate_service:
		await deps.rate_service.close()
	if deps.redis_client:
		await deps.redis_client.aclose()

	logger.info('Cleanup complete')


def get_registry() -> ProviderRegistry:
	if deps.registry is None:
		raise RuntimeError('Provider registry not initialized')
	return deps.registry


def get_redis_cache() -> RedisCacheService:
	if deps.redis_cache is None:
		raise RuntimeError('Redis cache not initialized')
	return deps.redis_cache


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service


def get_currency_service(
	registry: Annotated[ProviderRegistry, Depends(get_registry)],
) -> CurrencyService:
	return CurrencyService(registry=registry)


def get_conversion_service(
	rate_service: Annotated[RateService, Depends(get_rate_service)],
	currency_service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> ConversionService:
	return ConversionService(rate_service=rate_service, currency_service=currency_service)


async def get_latest_cached(rate_service: RateService, cache: RedisCacheService) -> LatestResponse:
	"""Latest aggregate from Redis, falling back to (and storing) a live round."""
	try:
		cached = await cache.get_latest()
	except CacheError as e:
		logger.warning(f'Cache read failed, running a live round: {e}')
		cached = None

	if cached is not None:
		return cached

	latest = await rate_service.get_latest()
	await store_latest(latest, cache)
	return latest


async def store_latest(latest: LatestResponse, cache: RedisCacheService) -> None:
	try:
		await cache.set_latest(latest)
	except CacheError as e:
		logger.warning(f'Cache write failed: {e}')
