"""StrataSize Scripts Package.

Contains calculation and helper functions for the calculator.
"""

from .calc_utils import (
    coerce_max_error_squared,
    coerce_population,
    coerce_variance,
    get_z_score,
)
from .density import confidence_region, density_series, generate_normal_curve
from .stratified import (
    allocate_samples_proportional,
    calculate_allocation_summary,
    calculate_stratified_sample_size,
    strata_to_frame,
)
from .variance import calculate_variance, parse_values, summarize_values

__all__ = [
    # Calculations
    "get_z_score",
    "calculate_stratified_sample_size",
    "allocate_samples_proportional",
    "calculate_allocation_summary",
    "strata_to_frame",
    # Input coercion
    "coerce_population",
    "coerce_variance",
    "coerce_max_error_squared",
    # Variance helper
    "parse_values",
    "summarize_values",
    "calculate_variance",
    # Density curve
    "generate_normal_curve",
    "confidence_region",
    "density_series",
]
