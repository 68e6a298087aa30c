import logging
from collections.abc import Sequence

from application.services.fetch_orchestrator import FetchOrchestrator
from application.services.merge_table import MergeTable
from application.services.registry import ProviderBinding, ProviderRegistry
from config.settings import Settings
from domain.models.currency import ExchangeRate, LatestResponse, SourceInfo
from domain.models.merge import MergePolicy
from infrastructure.providers.base import ExchangeRateSource

logger = logging.getLogger(__name__)


def assemble_response(
	exchangeable: Sequence[str],
	bindings: Sequence[ProviderBinding],
	reports: Sequence[SourceInfo],
	rates: Sequence[ExchangeRate],
) -> LatestResponse:
	"""Package one round. Ordering never depends on provider arrival order."""
	expected = tuple(sorted(exchangeable))

	received: set[str] = set()
	for rate in rates:
		received.add(rate.from_currency.symbol)
		received.add(rate.to_currency.symbol)
	unreceived = tuple(symbol for symbol in expected if symbol not in received)

	position = {binding.name: n for n, binding in enumerate(bindings)}
	info = tuple(sorted(reports, key=lambda report: position.get(report.name, len(position))))

	result = tuple(sorted(rates, key=lambda rate: (rate.from_currency.symbol, rate.to_currency.symbol)))

	return LatestResponse(expected=expected, unreceived=unreceived, info=info, result=result)


class RateService:
	def __init__(
		self,
		registry: ProviderRegistry,
		orchestrator: FetchOrchestrator | None = None,
		policy: MergePolicy | None = None,
	):
		self.registry = registry
		self.orchestrator = orchestrator or FetchOrchestrator()
		self.policy = policy or MergePolicy.race()

	@classmethod
	def from_settings(cls, settings: Settings, registry: ProviderRegistry) -> 'RateService':
		return cls(
			registry=registry,
			orchestrator=FetchOrchestrator(
				retry_attempts=settings.RETRY_ATTEMPTS,
				retry_backoff=settings.RETRY_BACKOFF_SECONDS,
				request_timeout=settings.REQUEST_TIMEOUT_SECONDS,
			),
			policy=MergePolicy.from_name(settings.MERGE_STRATEGY),
		)

	async def get_latest(self, timeout: float | None = None) -> LatestResponse:
		bindings = self.registry.snapshot()
		table = MergeTable(self.policy)

		reports = await self.orchestrator.run(bindings, table, timeout=timeout)
		rates = await table.flatten()

		if table.dropped:
			logger.warning(f'Merge dropped {table.dropped} unresolvable rates ({self.policy.strategy.value})')

		response = assemble_response(self.registry.get_exchangeable(), bindings, reports, rates)

		ok = sum(1 for report in response.info if report.is_successful)
		failed = len(response.info) - ok
		logger.info(
			f'Round finished: {ok} providers ok, {failed} failed, '
			f'{len(response.result)} rates, {len(response.unreceived)} unreceived',
			extra={'extra_data': {'ok': ok, 'failed': failed, 'unreceived': response.unreceived}},
		)
		return response

	def get_exchangeable(self) -> tuple[str, ...]:
		return self.registry.get_exchangeable()

	def register_provider(self, name: str, source: ExchangeRateSource, priority: int = 0) -> None:
		self.registry.register(name, source, priority)

	def remove_providers(self, *names: str) -> list[ProviderBinding]:
		return self.registry.remove(*names)

	def set_priority(self, name: str, priority: int) -> bool:
		return self.registry.set_priority(name, priority)

	async def close(self) -> None:
		for binding in self.registry.snapshot():
			await binding.source.close()
