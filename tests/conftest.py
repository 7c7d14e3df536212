"""Pytest fixtures for TET tests."""

import pytest

from tet import Distribution, Frequencies, ThroughputCalculator

PRESENTED = "my watch fell in the waterprevailing wind from the east"
TRANSCRIBED = "my wacch fell in waterpreviling wind on the east"

JAPANESE_CORPUS = "うまぴょいうまぴょいうまぽいぴょんぴょんうまうまぽかぽか"


@pytest.fixture
def english() -> ThroughputCalculator:
    """Calculator over the English letters+space preset."""
    return ThroughputCalculator.alphabet_letter_distribution()


@pytest.fixture
def skewed() -> Distribution:
    """'a' three times as likely as 'b'."""
    return Distribution(Frequencies({"a": 3, "b": 1}))


@pytest.fixture
def japanese() -> Distribution:
    """Distribution built from a small hiragana corpus."""
    return Distribution(Frequencies.from_sources(JAPANESE_CORPUS))
