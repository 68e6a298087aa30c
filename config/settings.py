from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Fetch round
	RETRY_ATTEMPTS: int = 1
	RETRY_BACKOFF_SECONDS: float = 5.0
	REQUEST_TIMEOUT_SECONDS: float = 10.0
	MERGE_STRATEGY: str = 'race'

	# Sources
	HTTP_TIMEOUT_SECONDS: float = 10.0
	ENABLED_PROVIDERS: list[str] = ['ecb', 'rcb', 'cae']
	ECB_PRIORITY: int = 0
	RCB_PRIORITY: int = 1
	CAE_PRIORITY: int = 2

	REDIS_URL: str = 'redis://localhost:6379'
	LATEST_CACHE_TTL_SECONDS: int = 300

	# Application
	APP_NAME: str = 'Exchange Rate Aggregator'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')

	@field_validator('RETRY_ATTEMPTS')
	@classmethod
	def retry_attempts_not_negative(cls, v: int):
		if v < 0:
			raise ValueError('RETRY_ATTEMPTS must be >= 0')
		return v

	@field_validator('RETRY_BACKOFF_SECONDS', 'REQUEST_TIMEOUT_SECONDS', 'HTTP_TIMEOUT_SECONDS')
	@classmethod
	def durations_not_negative(cls, v: float):
		if v < 0:
			raise ValueError('durations must be >= 0')
		return v

	@field_validator('MERGE_STRATEGY')
	@classmethod
	def known_merge_strategy(cls, v: str):
		normalized = v.strip().lower()
		if normalized not in {'race', 'average', 'priority'}:
			raise ValueError(f'Unknown merge strategy: {v}')
		return normalized

	@field_validator('ENABLED_PROVIDERS')
	@classmethod
	def lowercase_providers(cls, v: list[str]):
		return [name.strip().lower() for name in v if name.strip()]


@lru_cache
def get_settings() -> Settings:
	return Settings()
