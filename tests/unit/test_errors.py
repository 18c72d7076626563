"""Tests for sf_common.errors."""

from src.sf_common.errors import ClockMovedBackwardError, IdGenError, InvalidArgumentError


class TestIdGenError:
    def test_base_error(self) -> None:
        err = IdGenError(code=9001, message="boom")
        assert err.code == 9001
        assert err.message == "boom"
        assert str(err) == "boom"

    def test_is_exception(self) -> None:
        assert isinstance(IdGenError(code=1, message="test"), Exception)


class TestSpecificErrors:
    def test_invalid_argument(self) -> None:
        err = InvalidArgumentError("worker_id", 32, "must be between 0 and 31")
        assert err.code == 1001
        assert err.argument == "worker_id"
        assert err.value == 32
        assert "worker_id=32" in err.message
        assert isinstance(err, IdGenError)
        assert isinstance(err, ValueError)

    def test_clock_moved_backward(self) -> None:
        err = ClockMovedBackwardError(last_timestamp_ms=1500, current_timestamp_ms=1200)
        assert err.code == 2001
        assert err.drift_ms == 300
        assert "300ms" in err.message
        assert "1500" in err.message
        assert isinstance(err, IdGenError)
        assert not isinstance(err, ValueError)
