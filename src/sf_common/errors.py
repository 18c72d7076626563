"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Argument validation
  2xxx: Clock
"""


class IdGenError(Exception):
    """Base ID generation error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Argument validation ---

class InvalidArgumentError(IdGenError, ValueError):
    def __init__(self, argument: str, value: int, detail: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(1001, f"Invalid {argument}={value}: {detail}")


# --- 2xxx: Clock ---

class ClockMovedBackwardError(IdGenError):
    """System clock reported a time earlier than the last generated ID.

    Raised from next_id() without touching generator state. Not retried.
    """

    def __init__(self, last_timestamp_ms: int, current_timestamp_ms: int) -> None:
        self.last_timestamp_ms = last_timestamp_ms
        self.current_timestamp_ms = current_timestamp_ms
        self.drift_ms = last_timestamp_ms - current_timestamp_ms
        super().__init__(
            2001,
            f"Clock moved backward by {self.drift_ms}ms: "
            f"last={last_timestamp_ms}, now={current_timestamp_ms}",
        )
