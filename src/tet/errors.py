"""Exceptions raised by the TET metric."""


class TETError(Exception):
    """Base class for all text entry throughput errors."""


class EmptyCorpusError(TETError, ValueError):
    """A distribution was requested from zero observations."""


class InvalidDurationError(TETError, ValueError):
    """Elapsed time was zero, negative or not finite."""


class InvalidSymbolError(TETError, ValueError):
    """A sequence element is not a single Unicode code point."""


class UnknownSymbolError(TETError, KeyError):
    """Text contains symbols the distribution has never observed.

    Only raised when the calculator is configured with
    ``unknown_symbols="error"``.
    """

    def __init__(self, symbols: list[str]):
        self.symbols = symbols
        super().__init__(f"Symbols not in distribution: {symbols!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]
