from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import (
	get_conversion_service,
	get_currency_service,
	get_latest_cached,
	get_rate_service,
	get_redis_cache,
	store_latest,
)
from api.schemas import (
	ConversionResponse,
	CurrencyResponse,
	LatestRatesResponse,
	SupportedCurrenciesResponse,
)
from application.services import ConversionService, CurrencyService, RateService
from infrastructure.cache.redis_cache import RedisCacheService

router = APIRouter(prefix='/api', tags=['rates'])


@router.get(
	'/latest',
	response_model=LatestRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Run a fetch round across all providers',
)
async def get_latest_rates(
	service: Annotated[RateService, Depends(get_rate_service)],
	cache: Annotated[RedisCacheService, Depends(get_redis_cache)],
) -> LatestRatesResponse:
	latest = await service.get_latest()
	await store_latest(latest, cache)
	return LatestRatesResponse.from_latest(latest)


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: Annotated[
		str,
		Path(
			min_length=3,
			max_length=5,
		),
	],
	to_currency: Annotated[
		str,
		Path(
			min_length=3,
			max_length=5,
		),
	],
	amount: Annotated[
		float,
		Path(
			ge=0,
		),
	],
	service: Annotated[ConversionService, Depends(get_conversion_service)],
	cache: Annotated[RedisCacheService, Depends(get_redis_cache)],
) -> ConversionResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()

	async def fetch():
		return await get_latest_cached(service.rate_service, cache)

	result = await service.convert(from_currency, to_currency, amount, fetch=fetch)
	return ConversionResponse.from_result(result)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List exchangeable currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	currencies = service.get_supported_currencies()
	return SupportedCurrenciesResponse(
		currencies=[CurrencyResponse.from_currency(currency) for currency in currencies]
	)
