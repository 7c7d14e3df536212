"""Batch evaluation of text entry trials.

Scores a list of trials with one calculator and aggregates the results.
"""

from dataclasses import dataclass, field

from tet.alignment import AlignmentStats
from tet.throughput import ThroughputCalculator, elapsed_seconds


@dataclass(frozen=True)
class Trial:
    """One presented/transcribed pair and its entry time."""

    presented: str
    transcribed: str
    elapsed_seconds: float
    name: str | None = None


@dataclass
class TrialResult:
    """Scores for a single trial."""

    trial: Trial
    throughput: float  # Weighted alignment cost, bits/s
    alignment_cost: float  # bits
    tet: float  # Published TET, bits/s
    stats: AlignmentStats

    @property
    def error_rate(self) -> float:
        """Share of aligned positions that are not correct entries."""
        if self.stats.length == 0:
            return 0.0
        return 1.0 - self.stats.correct / self.stats.length

    def to_dict(self) -> dict:
        """Convert to a plain dictionary."""
        return {
            "name": self.trial.name,
            "presented": self.trial.presented,
            "transcribed": self.trial.transcribed,
            "elapsed_seconds": self.trial.elapsed_seconds,
            "throughput": self.throughput,
            "alignment_cost": self.alignment_cost,
            "tet": self.tet,
            "error_rate": self.error_rate,
            "insertions": self.stats.insertions,
            "omissions": self.stats.omissions,
            "substitutions": self.stats.substitutions,
            "correct": self.stats.correct,
        }


@dataclass
class TrialSummary:
    """Collection of trial results."""

    name: str
    results: list[TrialResult] = field(default_factory=list)

    @property
    def mean_throughput(self) -> float | None:
        """Average weighted alignment throughput."""
        values = [r.throughput for r in self.results]
        return sum(values) / len(values) if values else None

    @property
    def mean_tet(self) -> float | None:
        """Average published TET."""
        values = [r.tet for r in self.results]
        return sum(values) / len(values) if values else None

    @property
    def total_seconds(self) -> float:
        return sum(r.trial.elapsed_seconds for r in self.results)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "total_trials": len(self.results),
            "total_seconds": self.total_seconds,
            "mean_throughput": self.mean_throughput,
            "mean_tet": self.mean_tet,
            "results": [r.to_dict() for r in self.results],
        }

    def summary(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Trials: {self.name}",
            f"Count: {len(self.results)}",
            f"Total time: {self.total_seconds:.1f} s",
        ]

        if self.mean_throughput is not None:
            lines.append(f"Mean alignment throughput: {self.mean_throughput:.3f} bits/s")
        if self.mean_tet is not None:
            lines.append(f"Mean TET: {self.mean_tet:.3f} bits/s")

        return "\n".join(lines)


def evaluate_trial(calculator: ThroughputCalculator, trial: Trial) -> TrialResult:
    """Score one trial with both throughput measures."""
    seconds = elapsed_seconds(trial.elapsed_seconds)
    alignment = calculator.align(trial.presented, trial.transcribed)
    return TrialResult(
        trial=trial,
        throughput=alignment.cost / seconds,
        alignment_cost=alignment.cost,
        tet=calculator.calc_tet(trial.presented, trial.transcribed, trial.elapsed_seconds),
        stats=calculator.stats(trial.presented, trial.transcribed),
    )


def evaluate_trials(
    calculator: ThroughputCalculator,
    trials: list[Trial],
    name: str = "trials",
) -> TrialSummary:
    """Score every trial and collect the results.

    Args:
        calculator: Calculator holding the language distribution
        trials: Trials to score, in order
        name: Label for the summary

    Returns:
        TrialSummary with one result per trial
    """
    summary = TrialSummary(name=name)
    for trial in trials:
        summary.results.append(evaluate_trial(calculator, trial))
    return summary
