"""Symbol frequencies and the probability distribution derived from them.

Example usage:
    from tet.distribution import Distribution, Frequencies

    frequencies = Frequencies.from_sources("large and appropriate text is recommended")
    distribution = Distribution(frequencies)
    distribution.information("e")  # bits
"""

import math
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType

import numpy as np

from tet.errors import EmptyCorpusError
from tet.symbols import Symbol, as_symbols, validate_symbol


class Frequencies:
    """Occurrence counts of symbols collected from sample text.

    Every symbol present has a count of at least 1. Not safe to share across
    threads while recording.
    """

    def __init__(self, counts: Mapping[str, int] | None = None):
        self._counts: dict[Symbol, int] = {}
        for symbol, count in (counts or {}).items():
            validate_symbol(symbol)
            if isinstance(count, bool) or not isinstance(count, int) or count < 1:
                raise ValueError(f"Count for {symbol!r} must be a positive int, got {count!r}")
            self._counts[symbol] = count

    @classmethod
    def from_sources(cls, *sources: str | Iterable[str]) -> "Frequencies":
        """Build frequencies by recording every symbol of each source."""
        frequencies = cls()
        for source in sources:
            frequencies.update(source)
        return frequencies

    def record(self, symbol: Symbol) -> None:
        """Record one appearance of ``symbol``."""
        validate_symbol(symbol)
        self._counts[symbol] = self._counts.get(symbol, 0) + 1

    def update(self, source: str | Iterable[str]) -> None:
        """Record every symbol of a text or symbol sequence."""
        for symbol in as_symbols(source):
            self._counts[symbol] = self._counts.get(symbol, 0) + 1

    @property
    def n(self) -> int:
        """Total number of recorded observations."""
        return sum(self._counts.values())

    def retain(self, predicate: Callable[[Symbol], bool]) -> None:
        """Drop every symbol for which ``predicate`` is false."""
        self._counts = {s: c for s, c in self._counts.items() if predicate(s)}

    def get(self, symbol: Symbol, default: int = 0) -> int:
        return self._counts.get(symbol, default)

    def items(self):
        return self._counts.items()

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._counts

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frequencies):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"Frequencies(symbols={len(self._counts)}, n={self.n})"


class Distribution:
    """Probability mass function over observed symbols.

    Immutable after construction and safe to share between calculators and
    threads.

    Unobserved symbols get a fallback information value instead of
    ``-log2(0)``: ``log2(N)`` (a single observation out of N) when built from
    counts, or the information of the least likely observed symbol when built
    from explicit probabilities.
    """

    __slots__ = ("_probabilities", "_total", "_fallback_information")

    def __init__(self, frequencies: Frequencies):
        total = frequencies.n
        if total == 0:
            raise EmptyCorpusError("Cannot build a distribution from an empty corpus")

        probabilities = {symbol: count / total for symbol, count in frequencies.items()}
        self._init(probabilities, total, math.log2(total))

    @classmethod
    def from_probabilities(
        cls,
        probabilities: Mapping[str, float],
        tolerance: float = 1e-6,
    ) -> "Distribution":
        """Build a distribution from an explicit symbol -> probability map.

        Args:
            probabilities: Probability of each symbol, all in (0, 1]
            tolerance: Allowed deviation of the sum from 1.0

        Returns:
            Distribution without a known corpus size
        """
        if not probabilities:
            raise EmptyCorpusError("Cannot build a distribution from an empty probability map")

        checked: dict[Symbol, float] = {}
        for symbol, p in probabilities.items():
            validate_symbol(symbol)
            p = float(p)
            if not (0.0 < p <= 1.0):
                raise ValueError(f"Probability for {symbol!r} must be in (0, 1], got {p}")
            checked[symbol] = p

        total_p = math.fsum(checked.values())
        if abs(total_p - 1.0) > tolerance:
            raise ValueError(f"Probabilities must sum to 1 (got {total_p:.9f})")

        slf = cls.__new__(cls)
        slf._init(checked, None, math.log2(1.0 / min(checked.values())))
        return slf

    def _init(self, probabilities: dict[Symbol, float], total: int | None, fallback: float) -> None:
        self._probabilities = MappingProxyType(probabilities)
        self._total = total
        self._fallback_information = fallback

    @property
    def total(self) -> int | None:
        """Corpus size N, or None for distributions built from probabilities."""
        return self._total

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        return tuple(self._probabilities)

    @property
    def fallback_information(self) -> float:
        """Bits charged for a symbol that was never observed."""
        return self._fallback_information

    def probabilities(self) -> Mapping[Symbol, float]:
        """Read-only view of symbol probabilities."""
        return self._probabilities

    def probability(self, symbol: Symbol) -> float | None:
        """Probability of ``symbol``, or None if it was never observed."""
        return self._probabilities.get(symbol)

    def information(self, symbol: Symbol) -> float:
        """Self-information of ``symbol`` in bits.

        Unobserved symbols return ``fallback_information``; the result is
        always finite and non-negative.
        """
        p = self._probabilities.get(symbol)
        if p is None:
            return self._fallback_information
        return math.log2(1.0 / p)

    def entropy(self) -> float:
        """H(X): expected self-information in bits per symbol."""
        p = np.fromiter(self._probabilities.values(), dtype=np.float64)
        return float(-np.sum(p * np.log2(p)))

    def __len__(self) -> int:
        return len(self._probabilities)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._probabilities

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distribution):
            return NotImplemented
        return dict(self._probabilities) == dict(other._probabilities) and self._total == other._total

    def __hash__(self) -> int:
        return hash((frozenset(self._probabilities.items()), self._total))

    def __repr__(self) -> str:
        return f"Distribution(symbols={len(self)}, total={self._total})"
