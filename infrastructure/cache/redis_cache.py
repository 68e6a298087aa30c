import json
import logging
from datetime import datetime, timedelta

from redis import asyncio as redis
from redis.exceptions import RedisError

from domain.exceptions.currency import CacheError
from domain.models import catalog
from domain.models.currency import ExchangeRate, LatestResponse, ProviderStatus, SourceInfo

logger = logging.getLogger(__name__)

LATEST_KEY = 'rates:latest'


class RedisCacheService:
    def __init__(self, redis_client: redis.Redis, ttl: int | timedelta = timedelta(minutes=5)):
        self.redis = redis_client
        self.latest_ttl = ttl if isinstance(ttl, timedelta) else timedelta(seconds=ttl)

    async def get_latest(self) -> LatestResponse | None:
        try:
            data = await self.redis.get(LATEST_KEY)
        except RedisError as e:
            raise CacheError(f'Failed to read {LATEST_KEY}: {e}') from e

        if not data:
            return None

        try:
            return self._decode(json.loads(data))
        except (ValueError, KeyError, TypeError) as e:
            raise CacheError(f'Corrupt snapshot under {LATEST_KEY}: {e}') from e

    async def set_latest(self, latest: LatestResponse) -> None:
        payload = {
            'expected': list(latest.expected),
            'unreceived': list(latest.unreceived),
            'info': [
                {'name': info.name, 'status': info.status.value, 'error_message': info.error_message}
                for info in latest.info
            ],
            'result': [
                {
                    'timestamp': rate.timestamp.isoformat(),
                    'from': rate.from_currency.symbol,
                    'to': rate.to_currency.symbol,
                    'rate': rate.rate,
                    'priority': rate.priority,
                }
                for rate in latest.result
            ],
        }

        try:
            await self.redis.setex(LATEST_KEY, self.latest_ttl, json.dumps(payload))
        except RedisError as e:
            raise CacheError(f'Failed to write {LATEST_KEY}: {e}') from e

    def _decode(self, payload: dict) -> LatestResponse:
        result = []
        for item in payload['result']:
            from_currency = catalog.lookup(item['from'])
            to_currency = catalog.lookup(item['to'])
            if from_currency is None or to_currency is None:
                raise ValueError(f'unknown pair {item["from"]}->{item["to"]}')
            result.append(
                ExchangeRate(
                    timestamp=datetime.fromisoformat(item['timestamp']),
                    from_currency=from_currency,
                    to_currency=to_currency,
                    rate=float(item['rate']),
                    priority=int(item.get('priority', 0)),
                )
            )

        return LatestResponse(
            expected=tuple(payload['expected']),
            unreceived=tuple(payload['unreceived']),
            info=tuple(
                SourceInfo(
                    name=info['name'],
                    status=ProviderStatus(info['status']),
                    error_message=info.get('error_message', ''),
                )
                for info in payload['info']
            ),
            result=tuple(result),
        )
