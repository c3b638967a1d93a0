"""
Shared fixtures for Passwright tests.
"""

from typing import Iterable, List

import pytest

from passwright.utils.random_source import RandomSource


class ScriptedRandomSource(RandomSource):
    """Random source that replays a fixed list of 32-bit words."""

    def __init__(self, words: Iterable[int]):
        self.words: List[int] = list(words)
        self.draws = 0

    def fill(self, buffer: bytearray) -> None:
        assert len(buffer) == 4, "sampler should draw 32-bit words"
        if not self.words:
            raise AssertionError("scripted random source exhausted")
        buffer[:] = self.words.pop(0).to_bytes(4, "little")
        self.draws += 1


class ExplodingRandomSource(RandomSource):
    """Random source that fails if anything draws from it."""

    def fill(self, buffer: bytearray) -> None:
        raise AssertionError("random source should not have been used")


@pytest.fixture
def scripted_source():
    """Factory for sources returning the given words in order."""
    return ScriptedRandomSource


@pytest.fixture
def exploding_source():
    return ExplodingRandomSource()
