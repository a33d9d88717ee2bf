import typing as t

import pytest

from yala import logger


class RecordingAdapter(logger.Adapter):
    """Adapter keeping every (ctx, entry) pair it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[t.Any, logger.Entry]] = []

    def log(self, ctx: t.Any, entry: logger.Entry) -> None:
        self.calls.append((ctx, entry))

    @property
    def entries(self) -> list[logger.Entry]:
        return [entry for _, entry in self.calls]

    @property
    def last(self) -> logger.Entry:
        return self.calls[-1][1]


@pytest.fixture
def recording_adapter() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture(autouse=True)
def restore_global_adapter():
    """
    Restores the process-wide adapter after each test.
    Tests installing adapters globally would otherwise leak into each other.
    """
    previous = logger.get_adapter()
    yield
    logger.set_adapter(previous)
