"""Stratified sampling strategy implementation.

Stratified sampling divides the population into non-overlapping subgroups (strata)
and samples from each stratum. The total sample size follows from the strata
populations and variances, and is then allocated proportionally to population.
"""

import logging
from typing import List

from component.sampling.types import (
    SamplingInputs,
    SamplingResults,
    StratumAllocation,
)
from component.scripts.calc_utils import get_z_score
from component.scripts.parameter import CONFIDENCE_LEVELS
from component.scripts.stratified import (
    allocate_samples_proportional,
    calculate_stratified_sample_size,
    strata_to_frame,
)

logger = logging.getLogger("strata.sampling.stratified")


class StratifiedSamplingStrategy:
    """Strategy for stratified random sampling with proportional allocation."""

    def validate_inputs(self, inputs: SamplingInputs) -> List[str]:
        """Validate inputs for stratified sampling.

        Args:
            inputs: Sampling inputs to validate

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not inputs.strata:
            errors.append("At least one stratum is required")
        elif inputs.total_population <= 0:
            errors.append("Total population must be greater than 0")

        if not inputs.max_error_squared > 0:
            errors.append("Maximum error (e²) must be greater than 0")

        return errors

    def get_warnings(self, inputs: SamplingInputs) -> List[str]:
        """Non-blocking remarks about the inputs."""
        warnings = []

        if inputs.confidence_level not in CONFIDENCE_LEVELS:
            warnings.append(
                f"Unsupported confidence level {inputs.confidence_level}, "
                f"using Z = {get_z_score(inputs.confidence_level)}"
            )

        return warnings

    def calculate(self, inputs: SamplingInputs) -> SamplingResults:
        """Calculate the total sample size and its proportional allocation."""
        z_score = get_z_score(inputs.confidence_level)
        warnings = self.get_warnings(inputs)

        errors = self.validate_inputs(inputs)
        if errors:
            return SamplingResults.error(
                "; ".join(errors), inputs, z_score=z_score, warnings=warnings
            )

        try:
            strata_df = strata_to_frame(inputs.strata)

            total_samples = calculate_stratified_sample_size(
                strata_df=strata_df,
                z_score=z_score,
                max_error=inputs.max_error,
            )

            if total_samples is None:
                logger.debug("Sample size is undefined for %s", inputs)
                return SamplingResults.error(
                    "Sample size is undefined for the current inputs",
                    inputs,
                    z_score=z_score,
                    warnings=warnings,
                )

            allocation_df = allocate_samples_proportional(strata_df, total_samples)

            samples_per_stratum = [
                StratumAllocation(
                    stratum_id=stratum.id,
                    name=stratum.name,
                    population=stratum.population,
                    samples=int(row["samples"]),
                    proportion=float(row["proportion"]),
                )
                for stratum, (_, row) in zip(inputs.strata, allocation_df.iterrows())
            ]

            results = SamplingResults(
                success=True,
                warnings=warnings,
                confidence_level=inputs.confidence_level,
                z_score=z_score,
                max_error=inputs.max_error,
                max_error_squared=inputs.max_error_squared,
                total_samples=total_samples,
                total_population=inputs.total_population,
                samples_per_stratum=samples_per_stratum,
            )

            if results.rounding_drift:
                logger.debug(
                    "Allocation sums to %s for n=%s (drift %+d)",
                    results.allocated_total,
                    total_samples,
                    results.rounding_drift,
                )

            return results

        except Exception as e:
            logger.error(f"Error in stratified sampling calculation: {e}")
            return SamplingResults.error(
                str(e), inputs, z_score=z_score, warnings=warnings
            )
