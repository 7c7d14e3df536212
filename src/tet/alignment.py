"""Alignments between presented and transcribed text.

Two alignments are used:

- a weighted minimum-cost alignment whose edit costs are the
  self-information of the symbols involved (the core of ``calc``), and
- a unit-cost minimum string distance (MSD) alignment, following
  MacKenzie & Soukoreff (2002), from which the error-event probabilities of
  the published TET formula are counted.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from tet.symbols import Symbol

# An aligned position: a symbol, or None for a gap
Element = Symbol | None


@dataclass(frozen=True)
class WeightedAlignment:
    """Minimum-cost alignment result."""

    cost: float  # Total information in bits
    matches: int
    substitutions: int
    insertions: int
    deletions: int

    @property
    def errors(self) -> int:
        return self.substitutions + self.insertions + self.deletions


def weighted_alignment(
    presented: Sequence[Symbol],
    transcribed: Sequence[Symbol],
    information: Callable[[Symbol], float],
) -> WeightedAlignment:
    """Align two symbol sequences with information-weighted edit costs.

    Costs:
    - match: 0
    - substitution: information of the transcribed symbol
    - deletion: information of the presented symbol
    - insertion: information of the transcribed symbol

    Only two rows of the table are kept in memory.

    Args:
        presented: Intended symbols
        transcribed: Produced symbols
        information: Bits for a symbol, finite and non-negative

    Returns:
        WeightedAlignment with the final cell's cost and edit counts
    """
    p_bits = [information(s) for s in presented]
    t_bits = [information(s) for s in transcribed]

    # cell = (cost, matches, subs, ins, dels)
    prev = [(0.0, 0, 0, 0, 0)]
    for j in range(1, len(transcribed) + 1):
        c = prev[j - 1]
        prev.append((c[0] + t_bits[j - 1], c[1], c[2], c[3] + 1, c[4]))

    for i in range(1, len(presented) + 1):
        up = prev[0]
        row = [(up[0] + p_bits[i - 1], up[1], up[2], up[3], up[4] + 1)]
        for j in range(1, len(transcribed) + 1):
            diag = prev[j - 1]
            if presented[i - 1] == transcribed[j - 1]:
                best = (diag[0], diag[1] + 1, diag[2], diag[3], diag[4])
            else:
                best = (diag[0] + t_bits[j - 1], diag[1], diag[2] + 1, diag[3], diag[4])

            left = row[j - 1]
            ins_cost = left[0] + t_bits[j - 1]
            if ins_cost < best[0]:
                best = (ins_cost, left[1], left[2], left[3] + 1, left[4])

            up = prev[j]
            del_cost = up[0] + p_bits[i - 1]
            if del_cost < best[0]:
                best = (del_cost, up[1], up[2], up[3], up[4] + 1)

            row.append(best)
        prev = row

    cost, matches, subs, ins, dels = prev[-1]
    return WeightedAlignment(
        cost=cost,
        matches=matches,
        substitutions=subs,
        insertions=ins,
        deletions=dels,
    )


def msd_table(presented: Sequence[Symbol], transcribed: Sequence[Symbol]) -> list[list[int]]:
    """Unit-cost minimum string distance table.

    ``table[i][j]`` is the distance between the first ``i`` presented and
    first ``j`` transcribed symbols.
    """
    n = len(presented)
    m = len(transcribed)

    d = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        d[i][0] = i
    for j in range(m + 1):
        d[0][j] = j

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            r = 0 if presented[i - 1] == transcribed[j - 1] else 1
            d[i][j] = min(
                d[i - 1][j] + 1,
                d[i][j - 1] + 1,
                d[i - 1][j - 1] + r,
            )

    return d


def optimal_alignment(
    presented: Sequence[Symbol],
    transcribed: Sequence[Symbol],
) -> tuple[list[Element], list[Element]]:
    """Backtrace one optimal MSD alignment.

    Where several optimal alignments exist, the backtrace from the final
    cell prefers insertion, then omission, then substitution, then match.

    Returns:
        (aligned_presented, aligned_transcribed) of equal length, with None
        marking a gap
    """
    d = msd_table(presented, transcribed)
    p_aligned: list[Element] = []
    t_aligned: list[Element] = []

    x, y = len(presented), len(transcribed)
    while x > 0 or y > 0:
        if y > 0 and d[x][y] == d[x][y - 1] + 1:
            p_aligned.append(None)
            t_aligned.append(transcribed[y - 1])
            y -= 1
        elif x > 0 and d[x][y] == d[x - 1][y] + 1:
            p_aligned.append(presented[x - 1])
            t_aligned.append(None)
            x -= 1
        else:
            # substitution or match
            p_aligned.append(presented[x - 1])
            t_aligned.append(transcribed[y - 1])
            x -= 1
            y -= 1

    p_aligned.reverse()
    t_aligned.reverse()
    return p_aligned, t_aligned


@dataclass(frozen=True)
class AlignmentStats:
    """Error-event counts of an optimal alignment."""

    insertions: int
    omissions: int
    substitutions: int
    correct: int

    @property
    def length(self) -> int:
        """Number of aligned positions."""
        return self.insertions + self.omissions + self.substitutions + self.correct

    @property
    def presented_symbols(self) -> int:
        return self.omissions + self.substitutions + self.correct

    @property
    def insertion_probability(self) -> float:
        """P(I)."""
        if self.length == 0:
            return 0.0
        return self.insertions / self.length

    def _presented_share(self, count: int) -> float:
        if self.presented_symbols == 0:
            return 0.0
        return count / self.presented_symbols * (1.0 - self.insertion_probability)

    @property
    def omission_probability(self) -> float:
        """P(M)."""
        return self._presented_share(self.omissions)

    @property
    def substitution_probability(self) -> float:
        """P(S)."""
        return self._presented_share(self.substitutions)

    @property
    def correct_probability(self) -> float:
        """P(C)."""
        return self._presented_share(self.correct)


def alignment_stats(presented: Sequence[Symbol], transcribed: Sequence[Symbol]) -> AlignmentStats:
    """Count insertions, omissions, substitutions and correct entries."""
    p_aligned, t_aligned = optimal_alignment(presented, transcribed)

    insertions = omissions = substitutions = correct = 0
    for p, t in zip(p_aligned, t_aligned):
        if p is None:
            insertions += 1
        elif t is None:
            omissions += 1
        elif p != t:
            substitutions += 1
        else:
            correct += 1

    return AlignmentStats(
        insertions=insertions,
        omissions=omissions,
        substitutions=substitutions,
        correct=correct,
    )
