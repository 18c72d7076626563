"""Shared test fixtures."""

from collections.abc import Callable, Iterator

import pytest

from src.sf_idgen.registry import reset_registry


class FakeClock:
    """Scripted millisecond clock. Replays ``ticks`` then repeats the last one."""

    def __init__(self, ticks: list[int]) -> None:
        self._ticks = list(ticks)
        self._pos = 0
        self.reads = 0

    def __call__(self) -> int:
        self.reads += 1
        value = self._ticks[min(self._pos, len(self._ticks) - 1)]
        self._pos += 1
        return value

    def push(self, *ticks: int) -> None:
        """Replace the remaining script with ``ticks``."""
        self._pos = min(self._pos, len(self._ticks))
        self._ticks = self._ticks[: self._pos] + list(ticks)


@pytest.fixture
def make_clock() -> Callable[..., FakeClock]:
    def _make(*ticks: int) -> FakeClock:
        return FakeClock(list(ticks))

    return _make


@pytest.fixture(autouse=True)
def _fresh_default_registry() -> Iterator[None]:
    reset_registry()
    yield
    reset_registry()
