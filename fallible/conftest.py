import os
from threading import Thread
from time import sleep

import pytest


def pytest_sessionstart(session):
    """Ensure the test suite always exits."""
    timeout = float(session.config.getini("timeout")) + 5
    Thread(target=lambda: sleep(timeout) or os._exit(1), daemon=True).start()


class Recorder:
    """A callable that remembers its calls and returns or raises on demand."""

    def __init__(self, *, returns=None, raises: BaseException | None = None):
        self.calls: list[tuple] = []
        self.returns = returns
        self.raises = raises

    def __call__(self, *args):
        self.calls.append(args)
        if self.raises is not None:
            raise self.raises
        return self.returns

    @property
    def called(self) -> bool:
        return bool(self.calls)


@pytest.fixture
def recorder():
    """Build call recorders; ``recorder()`` returns None when called."""
    return Recorder


@pytest.fixture
def never():
    """A function that fails the test if it is ever called."""

    def fn(*args):
        pytest.fail(f"Function should never have been called, got: {args!r}")

    return fn
