import asyncio
import logging
import time
from collections.abc import Sequence
from dataclasses import replace

from tenacity import (
	AsyncRetrying,
	before_sleep_log,
	retry_if_exception_type,
	retry_if_not_exception_type,
	stop_after_attempt,
	wait_fixed,
)

from application.services.merge_table import MergeTable
from application.services.registry import ProviderBinding
from domain.exceptions.currency import DeadlineExceededError
from domain.models.currency import ExchangeRate, ProviderStatus, SourceInfo

logger = logging.getLogger(__name__)


class FetchOrchestrator:
	"""Runs one fetch round: every provider concurrently, retried, bounded by a shared deadline.

	A provider outcome never aborts its siblings. Successful rates are tagged
	with the provider priority and merged into the table; every provider
	produces exactly one `SourceInfo`.
	"""

	def __init__(self, retry_attempts: int = 1, retry_backoff: float = 5.0, request_timeout: float = 10.0):
		if retry_attempts < 0:
			raise ValueError('retry_attempts must be >= 0')
		self.retry_attempts = retry_attempts
		self.retry_backoff = retry_backoff
		self.request_timeout = request_timeout

	async def run(
		self,
		bindings: Sequence[ProviderBinding],
		table: MergeTable,
		timeout: float | None = None,
	) -> list[SourceInfo]:
		loop = asyncio.get_running_loop()
		deadline = loop.time() + (self.request_timeout if timeout is None else timeout)

		reports: list[SourceInfo] = []
		reports_lock = asyncio.Lock()

		async def report(info: SourceInfo) -> None:
			async with reports_lock:
				reports.append(info)

		tasks = [self._run_one(binding, table, deadline, report) for binding in bindings]
		await asyncio.gather(*tasks)
		return reports

	async def _run_one(self, binding: ProviderBinding, table: MergeTable, deadline: float, report) -> None:
		started = time.perf_counter()
		try:
			async with asyncio.timeout_at(deadline):
				rates = await self._fetch_with_retry(binding, deadline)
		except Exception as e:
			if isinstance(e, TimeoutError) and (
				isinstance(e, DeadlineExceededError) or asyncio.get_running_loop().time() >= deadline
			):
				message = 'round deadline exceeded'
			else:
				message = str(e) or e.__class__.__name__
			logger.warning(f'Provider {binding.name} failed: {message}')
			await report(SourceInfo(name=binding.name, status=ProviderStatus.FAILED, error_message=message))
			return

		tagged = [replace(rate, priority=binding.priority) for rate in rates]
		await table.merge(tagged)
		await report(SourceInfo(name=binding.name, status=ProviderStatus.OK))

		elapsed = time.perf_counter() - started
		logger.info(f'Provider {binding.name} returned {len(tagged)} rates in {elapsed:.3f}s')

	async def _fetch_with_retry(self, binding: ProviderBinding, deadline: float) -> list[ExchangeRate]:
		loop = asyncio.get_running_loop()

		retrying = AsyncRetrying(
			stop=stop_after_attempt(self.retry_attempts + 1),
			wait=wait_fixed(self.retry_backoff),
			retry=retry_if_exception_type(Exception) & retry_if_not_exception_type(DeadlineExceededError),
			before_sleep=before_sleep_log(logger, logging.WARNING),
			reraise=True,
		)

		async for attempt in retrying:
			with attempt:
				if loop.time() >= deadline:
					raise DeadlineExceededError('round deadline exceeded')
				return await binding.source.fetch_latest()

		# unreachable: reraise=True surfaces the last error
		raise RuntimeError(f'no attempt made for {binding.name}')
