"""Symbol handling shared by frequencies, distributions and alignments.

A symbol is one Unicode code point, held as a ``str`` of length 1. Text is
iterated by code point, so multi-byte scripts work without any special
handling and no normalization is applied.
"""

from collections.abc import Iterable

from tet.errors import InvalidSymbolError

Symbol = str


def validate_symbol(symbol: object) -> Symbol:
    """Return ``symbol`` if it is exactly one code point, else raise."""
    if not isinstance(symbol, str):
        raise InvalidSymbolError(f"Symbol must be a str, got {type(symbol).__name__}")
    if len(symbol) != 1:
        raise InvalidSymbolError(f"Symbol must be one code point, got {symbol!r}")
    return symbol


def as_symbols(text: str | Iterable[str]) -> list[Symbol]:
    """Coerce text or a sequence of single-code-point strings to a symbol list.

    Args:
        text: A string (split into code points) or an iterable of symbols

    Returns:
        List of symbols in order
    """
    if isinstance(text, str):
        return list(text)
    return [validate_symbol(s) for s in text]
