"""Tests for the throughput calculator."""

import math
from datetime import timedelta

import pytest

from tet import (
    Distribution,
    Frequencies,
    InvalidDurationError,
    TextEntryThroughput,
    ThroughputCalculator,
    ThroughputConfig,
    UnknownSymbolError,
)
from tet.information import conditional_entropy, joint_probabilities
from tet.alignment import alignment_stats

from conftest import PRESENTED, TRANSCRIBED


# ---------------------------------------------------------------------------
# calc


def test_identity_is_zero(english: ThroughputCalculator) -> None:
    assert english.calc("the quick brown fox", "the quick brown fox", 3) == 0.0


def test_identity_with_unknown_symbols(english: ThroughputCalculator) -> None:
    assert english.calc("Hello, World!", "Hello, World!", 1.5) == 0.0


def test_throughput_is_non_negative(english: ThroughputCalculator) -> None:
    pairs = [
        (PRESENTED, TRANSCRIBED),
        ("", "abc"),
        ("abc", ""),
        ("", ""),
        ("quickly", "qucehkly"),
        ("ABC", "xyz"),
    ]
    for presented, transcribed in pairs:
        assert english.calc(presented, transcribed, 2) >= 0.0


def test_doubling_duration_halves_throughput(english: ThroughputCalculator) -> None:
    one = english.calc(PRESENTED, TRANSCRIBED, 6)
    two = english.calc(PRESENTED, TRANSCRIBED, 12)
    assert one > 0.0
    assert two == pytest.approx(one / 2)


def test_swap_is_not_symmetric(skewed: Distribution) -> None:
    calculator = ThroughputCalculator(skewed)
    assert calculator.calc("a", "b", 1) == pytest.approx(2.0)
    assert calculator.calc("b", "a", 1) == pytest.approx(math.log2(4 / 3))
    assert calculator.calc("a", "b", 1) != calculator.calc("b", "a", 1)


def test_empty_inputs_degenerate_to_insertion_and_deletion(skewed: Distribution) -> None:
    calculator = ThroughputCalculator(skewed)
    assert calculator.calc("", "bb", 2) == pytest.approx(2.0)
    assert calculator.calc("bb", "", 4) == pytest.approx(1.0)
    assert calculator.calc("", "", 1) == 0.0


def test_calc_divides_cost_by_seconds(english: ThroughputCalculator) -> None:
    cost = english.align(PRESENTED, TRANSCRIBED).cost
    assert english.calc(PRESENTED, TRANSCRIBED, 12) == pytest.approx(cost / 12)


@pytest.mark.parametrize("elapsed", [0, 0.0, -1, -0.5, timedelta(0), timedelta(seconds=-1), float("nan"), float("inf")])
def test_invalid_duration_rejected(english: ThroughputCalculator, elapsed) -> None:
    with pytest.raises(InvalidDurationError):
        english.calc("abc", "abd", elapsed)
    with pytest.raises(InvalidDurationError):
        english.calc_tet("abc", "abd", elapsed)


def test_non_numeric_duration_rejected(english: ThroughputCalculator) -> None:
    with pytest.raises(InvalidDurationError):
        english.calc("abc", "abd", "12")  # type: ignore[arg-type]


def test_timedelta_matches_seconds(english: ThroughputCalculator) -> None:
    assert english.calc("abc", "abd", timedelta(seconds=2)) == pytest.approx(english.calc("abc", "abd", 2.0))


def test_unknown_symbols_use_fallback() -> None:
    calculator = ThroughputCalculator(Distribution(Frequencies.from_sources("aab")))
    assert calculator.calc("a", "az", 1) == pytest.approx(math.log2(3))


def test_unknown_symbols_can_be_rejected() -> None:
    calculator = ThroughputCalculator(
        Distribution(Frequencies.from_sources("aab")),
        ThroughputConfig(unknown_symbols="error"),
    )
    with pytest.raises(UnknownSymbolError) as exc_info:
        calculator.calc("ab", "azy", 1)
    assert exc_info.value.symbols == ["y", "z"]
    assert calculator.calc("ab", "aa", 1) == pytest.approx(calculator.distribution.information("a"))


def test_symbol_sequences_accepted(english: ThroughputCalculator) -> None:
    assert english.calc(list("abc"), ("a", "b", "d"), 1) == pytest.approx(english.calc("abc", "abd", 1))


def test_multibyte_scenario(japanese: Distribution) -> None:
    calculator = ThroughputCalculator(japanese)
    throughput = calculator.calc("うまぴょい", "うまぽい", 2)
    assert math.isfinite(throughput)
    assert throughput >= 0.0
    # one substitution (ぴ -> ぽ) and one deletion (ょ)
    alignment = calculator.align("うまぴょい", "うまぽい")
    assert alignment.errors == 2
    assert alignment.matches == 3


# ---------------------------------------------------------------------------
# Published TET


def test_worked_example(english: ThroughputCalculator) -> None:
    throughput = english.calc_tet(PRESENTED, TRANSCRIBED, 12)
    assert throughput == pytest.approx(12.954965333409255, abs=1e-4)


def test_worked_example_information(english: ThroughputCalculator) -> None:
    stats = alignment_stats(PRESENTED, TRANSCRIBED)
    hyx = conditional_entropy(english.distribution, stats)
    assert hyx == pytest.approx(0.8515677144377292, abs=1e-6)
    assert english.mutual_information(PRESENTED, TRANSCRIBED) == pytest.approx(3.238741333352314, abs=1e-6)


def test_alias_and_timedelta(english: ThroughputCalculator) -> None:
    tet = TextEntryThroughput.alphabet_letter_distribution()
    assert tet.calc_tet(PRESENTED, TRANSCRIBED, timedelta(seconds=12)) == pytest.approx(
        english.calc_tet(PRESENTED, TRANSCRIBED, 12)
    )


def test_perfect_transcription_transmits_entropy(english: ThroughputCalculator) -> None:
    text = "the quick brown fox"
    throughput = english.calc_tet(text, text, 4)
    expected = english.distribution.entropy() * len(text) / 4
    assert throughput == pytest.approx(expected)


def test_tet_of_empty_text_is_zero(english: ThroughputCalculator) -> None:
    assert english.calc_tet("", "abc", 1) == 0.0
    assert english.calc_tet("abc", "", 1) == 0.0


def test_joint_probabilities_sum_to_one_without_insertions(english: ThroughputCalculator) -> None:
    stats = alignment_stats(PRESENTED, TRANSCRIBED)
    joint = joint_probabilities(english.distribution, stats)
    assert joint.shape == (27, 28)
    assert joint.sum() == pytest.approx(1.0)


def test_with_map() -> None:
    calculator = ThroughputCalculator.with_map({"a": 0.5, "b": 0.5})
    assert calculator.calc("a", "b", 1) == pytest.approx(1.0)
    assert calculator.distribution.total is None


def test_letters_only_preset() -> None:
    calculator = ThroughputCalculator.alphabet_distribution()
    assert " " not in calculator.distribution
    assert calculator.calc("abc", "abc", 1) == 0.0
