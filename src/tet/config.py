"""Configuration for the throughput calculator."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UnknownSymbolPolicy = Literal["fallback", "error"]


class ThroughputConfig(BaseModel):
    """Calculator settings.

    unknown_symbols:
        "fallback" charges symbols missing from the distribution the
        distribution's fallback information (the least likely observation).
        "error" rejects such input with UnknownSymbolError.
    probability_tolerance:
        Allowed deviation from 1.0 when summing explicit probability maps.
    """

    model_config = ConfigDict(frozen=True)

    unknown_symbols: UnknownSymbolPolicy = "fallback"
    probability_tolerance: float = Field(default=1e-6, gt=0.0, lt=1.0)


DEFAULT_CONFIG = ThroughputConfig()
