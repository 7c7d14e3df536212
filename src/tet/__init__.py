"""TET - information-theoretic text entry throughput."""

from tet.alignment import AlignmentStats, WeightedAlignment
from tet.config import ThroughputConfig
from tet.distribution import Distribution, Frequencies
from tet.errors import (
    EmptyCorpusError,
    InvalidDurationError,
    InvalidSymbolError,
    TETError,
    UnknownSymbolError,
)
from tet.presets import ENGLISH_LETTERS, ENGLISH_LETTERS_AND_SPACE
from tet.throughput import TextEntryThroughput, ThroughputCalculator
from tet.trials import Trial, TrialResult, TrialSummary, evaluate_trials

__version__ = "0.1.0"

__all__ = [
    "AlignmentStats",
    "Distribution",
    "ENGLISH_LETTERS",
    "ENGLISH_LETTERS_AND_SPACE",
    "EmptyCorpusError",
    "Frequencies",
    "InvalidDurationError",
    "InvalidSymbolError",
    "TETError",
    "TextEntryThroughput",
    "ThroughputCalculator",
    "ThroughputConfig",
    "Trial",
    "TrialResult",
    "TrialSummary",
    "UnknownSymbolError",
    "WeightedAlignment",
    "evaluate_trials",
]
