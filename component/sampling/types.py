"""Type definitions for the stratified sample size calculation.

Contains data classes that define the inputs and outputs of the calculator.
This provides a clear contract between the UI layer and the calculation logic.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Stratum:
    """One row of the strata table."""

    id: int
    name: str
    population: int = 0  # N_h
    variance: float = 0.0  # S_h²


@dataclass
class SamplingInputs:
    """Input parameters for the sample size calculation.

    A snapshot of the UI state, passed by value to the calculation.
    """

    strata: Tuple[Stratum, ...]
    confidence_level: float  # As percentage (90, 95 or 99)
    max_error_squared: float  # e²

    @property
    def max_error(self) -> float:
        """Maximum error e."""
        if not self.max_error_squared > 0:
            return 0.0
        return math.sqrt(self.max_error_squared)

    @property
    def total_population(self) -> int:
        return sum(stratum.population for stratum in self.strata)


@dataclass
class StratumAllocation:
    """Sample allocation for a single stratum."""

    stratum_id: int
    name: str
    population: int
    samples: int
    proportion: float = 0.0  # Share of total samples, in percent


@dataclass
class SamplingResults:
    """Results from the sample size calculation.

    When success is False the numeric fields keep their defaults and
    error_message explains why no sample size could be derived.
    """

    # Metadata
    success: bool = True
    error_message: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    # Parameters in use
    confidence_level: float = 0.0
    z_score: float = 0.0
    max_error: float = 0.0
    max_error_squared: float = 0.0

    # Core results
    total_samples: Optional[int] = None
    total_population: int = 0
    samples_per_stratum: List[StratumAllocation] = field(default_factory=list)

    @property
    def allocated_total(self) -> int:
        """Sum of the rounded per-stratum allocations."""
        return sum(alloc.samples for alloc in self.samples_per_stratum)

    @property
    def rounding_drift(self) -> int:
        """Difference between the allocated total and the total sample size."""
        if self.total_samples is None:
            return 0
        return self.allocated_total - self.total_samples

    @classmethod
    def error(
        cls, message: str, inputs: Optional[SamplingInputs] = None, **kwargs
    ) -> "SamplingResults":
        """Create an error result, keeping the parameters that were requested."""
        if inputs is not None:
            kwargs.setdefault("confidence_level", inputs.confidence_level)
            kwargs.setdefault("max_error", inputs.max_error)
            kwargs.setdefault("max_error_squared", inputs.max_error_squared)
            kwargs.setdefault("total_population", inputs.total_population)
        return cls(success=False, error_message=message, **kwargs)
