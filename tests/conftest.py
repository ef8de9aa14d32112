import matplotlib

matplotlib.use("Agg")

import pytest

from rng import RandomSource


SIX = ["a", "b", "c", "d", "e", "f"]


class ScriptedSource:
    """Random source that replays fixed draws and records every call."""

    def __init__(self, draws, permutation=None):
        self.draws = list(draws)
        self.fixed_permutation = permutation
        self.calls = []

    def permutation(self, n):
        self.calls.append(("permutation", n))
        if self.fixed_permutation is not None:
            return list(self.fixed_permutation)
        return list(range(n))

    def uniform_int(self, n):
        self.calls.append(("uniform_int", n))
        value = self.draws.pop(0)
        assert 0 <= value < n
        return value


@pytest.fixture
def six_vertices():
    return list(SIX)


@pytest.fixture
def seeded_source():
    return RandomSource(1234)


@pytest.fixture
def scripted():
    return ScriptedSource
