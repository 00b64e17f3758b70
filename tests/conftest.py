import itertools

import pytest


class FakeIndexSource:
    """Deterministyczne źródło: zwraca kolejne wartości z listy (w kółko)."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.calls = []

    def randbelow(self, n):
        self.calls.append(n)
        return next(self._values)


@pytest.fixture
def fake_source():
    return FakeIndexSource


@pytest.fixture
def digits_pool():
    from passgen.pool import Pool
    return Pool.parse("123456789")
