import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, replace

from infrastructure.providers.base import ExchangeRateSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderBinding:
    name: str
    priority: int
    source: ExchangeRateSource


class ProviderRegistry:
    """Ordered provider bindings (descending priority) plus the cached exchangeable universe.

    Mutations and the first computation of the universe run under an
    exclusive lock; readers get the current immutable snapshot without
    locking once it exists. Every mutation drops the cached universe.
    """

    def __init__(self, bindings: Iterable[ProviderBinding] = ()):
        self._lock = threading.Lock()
        self._bindings: list[ProviderBinding] = []
        self._exchangeable: tuple[str, ...] | None = None
        for binding in bindings:
            self._add(binding)
        self._sort()

    def register(self, name: str, source: ExchangeRateSource, priority: int = 0) -> None:
        with self._lock:
            self._add(ProviderBinding(name=name, priority=priority, source=source))
            self._sort()
            self._exchangeable = None
        logger.info(f'Registered provider {name} with priority {priority}')

    def remove(self, *names: str) -> list[ProviderBinding]:
        with self._lock:
            removed = [b for b in self._bindings if b.name in names]
            self._bindings = [b for b in self._bindings if b.name not in names]
            self._exchangeable = None
        if removed:
            logger.info(f'Removed providers: {", ".join(b.name for b in removed)}')
        return removed

    def set_priority(self, name: str, priority: int) -> bool:
        with self._lock:
            found = False
            for i, binding in enumerate(self._bindings):
                if binding.name == name:
                    self._bindings[i] = replace(binding, priority=priority)
                    found = True
            self._sort()
            self._exchangeable = None

        if not found:
            logger.warning(f'Cannot change priority: provider {name} is not registered')
        else:
            logger.info(f'Provider {name} priority set to {priority}')
        return found

    def snapshot(self) -> tuple[ProviderBinding, ...]:
        with self._lock:
            return tuple(self._bindings)

    def names(self) -> list[str]:
        return [binding.name for binding in self.snapshot()]

    def get_exchangeable(self) -> tuple[str, ...]:
        cached = self._exchangeable
        if cached is not None:
            return cached

        with self._lock:
            if self._exchangeable is None:
                self._exchangeable = self._collect_exchangeable()
            return self._exchangeable

    def _collect_exchangeable(self) -> tuple[str, ...]:
        symbols: set[str] = set()
        for binding in self._bindings:
            symbols.update(binding.source.get_exchangeable())
        return tuple(sorted(symbols))

    def _add(self, binding: ProviderBinding) -> None:
        if any(existing.name == binding.name for existing in self._bindings):
            raise ValueError(f'Provider {binding.name} is already registered')
        self._bindings.append(binding)

    def _sort(self) -> None:
        # Stable: equal priorities keep registration order
        self._bindings.sort(key=lambda b: b.priority, reverse=True)
