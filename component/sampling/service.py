"""Sampling service for orchestrating sampling calculations.

This module provides the main entry points for the UI layer to interact
with the stratified sampling strategy. The calculations are plain function
calls: the UI builds a snapshot of its state and asks for results on each
render.
"""

from component.sampling.stratified import StratifiedSamplingStrategy
from component.sampling.types import SamplingInputs, SamplingResults

_strategy = StratifiedSamplingStrategy()


def get_sampling_strategy() -> StratifiedSamplingStrategy:
    """Get the shared stratified sampling strategy."""
    return _strategy


class SamplingService:
    """High-level service for sampling calculations.

    This service provides a simplified interface for the UI layer,
    handling the conversion between app state and strategy inputs.
    """

    @staticmethod
    def create_inputs_from_state(app_state) -> SamplingInputs:
        """Create SamplingInputs from app state.

        Args:
            app_state: The application state object

        Returns:
            SamplingInputs holding a copy of the current values
        """
        return SamplingInputs(
            strata=tuple(app_state.strata.value),
            confidence_level=app_state.confidence_level.value,
            max_error_squared=app_state.max_error_squared.value,
        )

    @staticmethod
    def calculate(inputs: SamplingInputs) -> SamplingResults:
        """Calculate the sample design for the given inputs."""
        return get_sampling_strategy().calculate(inputs)

    @staticmethod
    def calculate_from_state(app_state) -> SamplingResults:
        """Calculate sample design directly from app state.

        This is a convenience method that combines create_inputs_from_state
        and calculate into a single call.
        """
        inputs = SamplingService.create_inputs_from_state(app_state)
        return SamplingService.calculate(inputs)
