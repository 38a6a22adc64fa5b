"""Sampling calculation module.

This module provides the stratified sample size calculation behind the UI:
- Input validation
- Total sample size
- Proportional allocation per stratum
- Results formatting

Usage:
    from component.sampling import SamplingInputs, SamplingService

    results = SamplingService.calculate(inputs)
    if results.success:
        print(results.total_samples)
"""

from component.sampling.service import SamplingService, get_sampling_strategy
from component.sampling.stratified import StratifiedSamplingStrategy
from component.sampling.types import (
    SamplingInputs,
    SamplingResults,
    Stratum,
    StratumAllocation,
)

__all__ = [
    "StratifiedSamplingStrategy",
    "SamplingInputs",
    "SamplingResults",
    "SamplingService",
    "Stratum",
    "StratumAllocation",
    "get_sampling_strategy",
]
