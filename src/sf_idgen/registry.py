"""Registry of snowflake generators keyed by (worker_id, data_center_id).

Guarantees at most one live generator per pair, including under concurrent
first access. A process-wide default registry is created lazily by
get_registry(); callers that want isolation construct their own.
"""

import logging
import threading

from config.settings import settings
from src.sf_common.clock import Clock
from src.sf_idgen.generator import SnowflakeGenerator

logger = logging.getLogger(__name__)


class SnowflakeRegistry:
    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock
        self._generators: dict[tuple[int, int], SnowflakeGenerator] = {}
        self._lock = threading.Lock()

    def get_or_create(self, worker_id: int, data_center_id: int) -> SnowflakeGenerator:
        key = (worker_id, data_center_id)
        generator = self._generators.get(key)
        if generator is not None:
            return generator
        with self._lock:
            generator = self._generators.get(key)
            if generator is None:
                generator = SnowflakeGenerator(worker_id, data_center_id, clock=self._clock)
                self._generators[key] = generator
                logger.info(
                    "Registered snowflake generator: worker=%d, data_center=%d",
                    worker_id,
                    data_center_id,
                )
        return generator

    def next_id(self, worker_id: int, data_center_id: int) -> int:
        return self.get_or_create(worker_id, data_center_id).next_id()

    def __contains__(self, key: object) -> bool:
        return key in self._generators

    def __len__(self) -> int:
        return len(self._generators)


_default_registry: SnowflakeRegistry | None = None
_default_registry_lock = threading.Lock()


def get_registry() -> SnowflakeRegistry:
    """Get or create the process-wide registry."""
    global _default_registry  # noqa: PLW0603
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = SnowflakeRegistry()
    return _default_registry


def reset_registry() -> None:
    """Drop the process-wide registry. Generators hold no resources to release."""
    global _default_registry  # noqa: PLW0603
    with _default_registry_lock:
        _default_registry = None


def generate_id(worker_id: int | None = None, data_center_id: int | None = None) -> int:
    """Generate an ID from the default registry, falling back to the configured pair."""
    if worker_id is None:
        worker_id = settings.SNOWFLAKE_WORKER_ID
    if data_center_id is None:
        data_center_id = settings.SNOWFLAKE_DATA_CENTER_ID
    return get_registry().next_id(worker_id, data_center_id)
