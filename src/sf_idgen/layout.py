"""Snowflake bit layout — constants plus pure pack/unpack helpers.

Layout (64 bits, most significant first):
  - 1 bit:  sign (always 0)
  - 47 bits: millisecond timestamp since EPOCH_MS
  - 3 bits: data_center_id (0-7)
  - 5 bits: worker_id (0-31)
  - 8 bits: sequence (0-255 per millisecond)
"""

from dataclasses import dataclass
from datetime import datetime

from src.sf_common.clock import millis_to_datetime
from src.sf_common.errors import InvalidArgumentError

EPOCH_MS = 1_288_834_974_000  # 2010-11-04T01:42:54Z

WORKER_ID_BITS = 5
DATA_CENTER_ID_BITS = 3
SEQUENCE_BITS = 8

MAX_WORKER_ID = (1 << WORKER_ID_BITS) - 1
MAX_DATA_CENTER_ID = (1 << DATA_CENTER_ID_BITS) - 1
SEQUENCE_MASK = (1 << SEQUENCE_BITS) - 1

WORKER_ID_SHIFT = SEQUENCE_BITS
DATA_CENTER_ID_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS
TIMESTAMP_LEFT_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS + DATA_CENTER_ID_BITS


@dataclass(frozen=True)
class SnowflakeParts:
    timestamp_ms: int  # absolute Unix ms, epoch offset already added back
    data_center_id: int
    worker_id: int
    sequence: int

    @property
    def created_at(self) -> datetime:
        return millis_to_datetime(self.timestamp_ms)


def compose_id(timestamp_ms: int, data_center_id: int, worker_id: int, sequence: int) -> int:
    """Pack the four fields into one integer. No range checks."""
    return (
        ((timestamp_ms - EPOCH_MS) << TIMESTAMP_LEFT_SHIFT)
        | (data_center_id << DATA_CENTER_ID_SHIFT)
        | (worker_id << WORKER_ID_SHIFT)
        | sequence
    )


def parse_id(snowflake_id: int) -> SnowflakeParts:
    """Split an ID back into its fields."""
    if snowflake_id < 0:
        raise InvalidArgumentError("snowflake_id", snowflake_id, "must be non-negative")
    return SnowflakeParts(
        timestamp_ms=(snowflake_id >> TIMESTAMP_LEFT_SHIFT) + EPOCH_MS,
        data_center_id=(snowflake_id >> DATA_CENTER_ID_SHIFT) & MAX_DATA_CENTER_ID,
        worker_id=(snowflake_id >> WORKER_ID_SHIFT) & MAX_WORKER_ID,
        sequence=snowflake_id & SEQUENCE_MASK,
    )


def timestamp_of(snowflake_id: int) -> int:
    return parse_id(snowflake_id).timestamp_ms
