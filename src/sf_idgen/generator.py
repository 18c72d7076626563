"""Snowflake ID generator bound to one (worker_id, data_center_id) pair.

Generates strictly increasing, unique int IDs for a single instance.
Only one live generator may exist per pair; use SnowflakeRegistry when
several callers share pairs.
"""

import logging
import threading

from src.sf_common.clock import Clock, current_millis
from src.sf_common.errors import ClockMovedBackwardError, InvalidArgumentError
from src.sf_idgen.layout import (
    MAX_DATA_CENTER_ID,
    MAX_WORKER_ID,
    SEQUENCE_MASK,
    compose_id,
)

logger = logging.getLogger(__name__)


def _check_range(argument: str, value: int, maximum: int) -> None:
    if not (0 <= value <= maximum):
        raise InvalidArgumentError(argument, value, f"must be between 0 and {maximum}")


class SnowflakeGenerator:
    """Stateful snowflake ID producer.

    next_id() is one critical section: clock read, sequence update, the
    wait for the next millisecond and packing all happen under the lock.
    """

    def __init__(
        self,
        worker_id: int,
        data_center_id: int,
        sequence: int = 0,
        clock: Clock | None = None,
    ) -> None:
        _check_range("worker_id", worker_id, MAX_WORKER_ID)
        _check_range("data_center_id", data_center_id, MAX_DATA_CENTER_ID)
        _check_range("sequence", sequence, SEQUENCE_MASK)
        self._worker_id = worker_id
        self._data_center_id = data_center_id
        self._sequence = sequence
        self._last_timestamp_ms = -1
        self._clock: Clock = clock or current_millis
        self._lock = threading.Lock()
        logger.debug(
            "Snowflake generator created: worker=%d, data_center=%d", worker_id, data_center_id
        )

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def data_center_id(self) -> int:
        return self._data_center_id

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def last_timestamp_ms(self) -> int:
        """-1 until the first ID is generated."""
        return self._last_timestamp_ms

    def next_id(self) -> int:
        """Return the next ID. Raises ClockMovedBackwardError on clock regression."""
        with self._lock:
            ts = self._clock()
            if ts < self._last_timestamp_ms:
                raise ClockMovedBackwardError(self._last_timestamp_ms, ts)

            if ts == self._last_timestamp_ms:
                self._sequence = (self._sequence + 1) & SEQUENCE_MASK
                if self._sequence == 0:
                    ts = self._wait_next_ms(ts)
            else:
                self._sequence = 0

            self._last_timestamp_ms = ts
            return compose_id(ts, self._data_center_id, self._worker_id, self._sequence)

    def next_ids(self, count: int) -> list[int]:
        if count < 0:
            raise InvalidArgumentError("count", count, "must be non-negative")
        return [self.next_id() for _ in range(count)]

    def _wait_next_ms(self, last_ts: int) -> int:
        # Spins while holding the lock; other callers block until it returns.
        spins = 1
        ts = self._clock()
        while ts <= last_ts:
            spins += 1
            ts = self._clock()
        logger.debug(
            "Sequence exhausted at %d (worker=%d, data_center=%d), waited %d clock reads",
            last_ts,
            self._worker_id,
            self._data_center_id,
            spins,
        )
        return ts

    def __repr__(self) -> str:
        return (
            f"SnowflakeGenerator(worker_id={self._worker_id}, "
            f"data_center_id={self._data_center_id})"
        )
