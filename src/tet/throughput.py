"""Text entry throughput calculator.

Example usage:
    from tet import ThroughputCalculator

    tet = ThroughputCalculator.alphabet_letter_distribution()
    presented = "my watch fell in the waterprevailing wind from the east"
    transcribed = "my wacch fell in waterpreviling wind on the east"

    tet.calc(presented, transcribed, 12)      # information-weighted error rate
    tet.calc_tet(presented, transcribed, 12)  # ~12.955 bits/s (Minguri et al.)
"""

import logging
import math
from collections.abc import Iterable, Mapping
from datetime import timedelta

from tet.alignment import AlignmentStats, WeightedAlignment, alignment_stats, weighted_alignment
from tet.config import DEFAULT_CONFIG, ThroughputConfig
from tet.distribution import Distribution
from tet.errors import InvalidDurationError, UnknownSymbolError
from tet.information import mutual_information
from tet.presets import ENGLISH_LETTERS, ENGLISH_LETTERS_AND_SPACE
from tet.symbols import Symbol, as_symbols

logger = logging.getLogger(__name__)

Elapsed = float | int | timedelta
Text = str | Iterable[str]


def elapsed_seconds(elapsed: Elapsed) -> float:
    """Convert a duration to seconds, rejecting non-positive or non-finite values."""
    if isinstance(elapsed, timedelta):
        seconds = elapsed.total_seconds()
    elif isinstance(elapsed, (int, float)) and not isinstance(elapsed, bool):
        seconds = float(elapsed)
    else:
        raise InvalidDurationError(f"Elapsed time must be seconds or timedelta, got {type(elapsed).__name__}")

    if not math.isfinite(seconds) or seconds <= 0.0:
        raise InvalidDurationError(f"Elapsed time must be positive and finite, got {seconds}")
    return seconds


class ThroughputCalculator:
    """Computes throughput of text entry trials against one distribution.

    The distribution is shared read-only, so one calculator can serve many
    trials and threads.
    """

    def __init__(self, distribution: Distribution, config: ThroughputConfig | None = None):
        self.distribution = distribution
        self.config = config or DEFAULT_CONFIG

    @classmethod
    def with_map(
        cls,
        probabilities: Mapping[str, float],
        config: ThroughputConfig | None = None,
    ) -> "ThroughputCalculator":
        """Calculator over an explicit symbol -> probability map."""
        config = config or DEFAULT_CONFIG
        distribution = Distribution.from_probabilities(probabilities, tolerance=config.probability_tolerance)
        return cls(distribution, config)

    @classmethod
    def alphabet_letter_distribution(cls, config: ThroughputConfig | None = None) -> "ThroughputCalculator":
        """Calculator over English letters and space."""
        return cls(ENGLISH_LETTERS_AND_SPACE, config)

    @classmethod
    def alphabet_distribution(cls, config: ThroughputConfig | None = None) -> "ThroughputCalculator":
        """Calculator over English letters only."""
        return cls(ENGLISH_LETTERS, config)

    def _prepare(self, presented: Text, transcribed: Text) -> tuple[list[Symbol], list[Symbol]]:
        p_symbols = as_symbols(presented)
        t_symbols = as_symbols(transcribed)

        unknown = sorted({s for s in (*p_symbols, *t_symbols) if s not in self.distribution})
        if unknown:
            if self.config.unknown_symbols == "error":
                raise UnknownSymbolError(unknown)
            logger.debug(f"{len(unknown)} unobserved symbol(s) charged fallback information: {unknown!r}")

        return p_symbols, t_symbols

    def align(self, presented: Text, transcribed: Text) -> WeightedAlignment:
        """Information-weighted minimum-cost alignment of the two texts."""
        p_symbols, t_symbols = self._prepare(presented, transcribed)
        return weighted_alignment(p_symbols, t_symbols, self.distribution.information)

    def calc(self, presented: Text, transcribed: Text, elapsed: Elapsed) -> float:
        """Information-weighted alignment cost per second.

        Args:
            presented: Text the participant was asked to enter
            transcribed: Text actually entered
            elapsed: Entry time, seconds or timedelta (must be > 0)

        Returns:
            Bits per second; 0.0 for a perfect transcription
        """
        seconds = elapsed_seconds(elapsed)
        alignment = self.align(presented, transcribed)

        logger.debug(
            f"Alignment cost {alignment.cost:.4f} bits over {seconds:.3f}s "
            f"(S={alignment.substitutions}, I={alignment.insertions}, D={alignment.deletions})"
        )
        return alignment.cost / seconds

    def stats(self, presented: Text, transcribed: Text) -> AlignmentStats:
        """Error-event counts of the optimal unit-cost alignment."""
        p_symbols, t_symbols = self._prepare(presented, transcribed)
        return alignment_stats(p_symbols, t_symbols)

    def mutual_information(self, presented: Text, transcribed: Text) -> float:
        """I(X;Y) in bits per character for this trial's error profile."""
        return mutual_information(self.distribution, self.stats(presented, transcribed))

    def calc_tet(self, presented: Text, transcribed: Text, elapsed: Elapsed) -> float:
        """Text entry throughput as published by Minguri et al. (CHI 2019).

        TET = I(X;Y) * transcribed characters per second.

        Returns:
            Bits per second; 0.0 when either text is empty
        """
        seconds = elapsed_seconds(elapsed)
        p_symbols, t_symbols = self._prepare(presented, transcribed)
        if not p_symbols or not t_symbols:
            return 0.0

        stats = alignment_stats(p_symbols, t_symbols)
        ixy = mutual_information(self.distribution, stats)
        characters_per_second = len(t_symbols) / seconds

        logger.debug(
            f"I(X;Y)={ixy:.6f} bits/char at {characters_per_second:.3f} chars/s "
            f"(P(I)={stats.insertion_probability:.4f}, P(M)={stats.omission_probability:.4f}, "
            f"P(S)={stats.substitution_probability:.4f})"
        )
        return ixy * characters_per_second


TextEntryThroughput = ThroughputCalculator
