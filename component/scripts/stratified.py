import math
from typing import Iterable, Optional

import numpy as np
import pandas as pd

STRATA_COLUMNS = ["id", "name", "population", "variance"]


def strata_to_frame(strata: Iterable) -> pd.DataFrame:
    """Build the calculation DataFrame from a sequence of strata.

    Args:
        strata: Iterable of objects with id, name, population and variance attributes

    Returns:
        DataFrame with id, name, population and variance columns, in input order
    """
    rows = [
        {
            "id": stratum.id,
            "name": stratum.name,
            "population": float(stratum.population),
            "variance": stratum.variance,
        }
        for stratum in strata
    ]

    # Populations are kept as floats: counts above 2**63 do not fit in int64
    strata_df = pd.DataFrame(rows, columns=STRATA_COLUMNS)
    return strata_df.astype({"population": "float64", "variance": "float64"})


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def calculate_stratified_sample_size(
    strata_df: pd.DataFrame, z_score: float, max_error: float
) -> Optional[int]:
    """Calculate total sample size for stratified sampling.

    Formula:
    n = ceil((Z x Σ(N_h x S_h) / (e x Σ N_h))²)

    Where:
    - N_h = stratum population
    - S_h = √(S_h²), stratum standard deviation
    - e = maximum acceptable error

    Args:
        strata_df: DataFrame with population and variance columns
        z_score: Critical value for the confidence level
        max_error: Maximum error e (not squared)

    Returns:
        Required total sample size, or None when the result is undefined
        (no strata, zero total population or zero error)
    """
    population = strata_df["population"].to_numpy(dtype=float)
    std_devs = np.sqrt(strata_df["variance"].to_numpy(dtype=float))

    # Plain left to right sums, numpy uses pairwise summation
    numerator = np.float64(sum((population * std_devs).tolist(), 0.0))
    denominator = np.float64(sum(population.tolist(), 0.0))

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        ratio = np.float64(z_score) * numerator / (np.float64(max_error) * denominator)
        n = ratio**2

    if not np.isfinite(n):
        return None

    return math.ceil(n)


def allocate_samples_proportional(
    strata_df: pd.DataFrame, total_samples: int
) -> pd.DataFrame:
    """Allocate samples proportionally to stratum populations.

    Formula: n_h = round(n x (N_h / N))

    Each stratum is rounded on its own, so the allocations may not add up
    to total_samples.

    Args:
        strata_df: DataFrame with id, name and population columns
        total_samples: Total number of samples to allocate

    Returns:
        DataFrame with id, name, population, samples and proportion columns.
        proportion is the share of total_samples in percent (NaN when
        total_samples is 0).

    Raises:
        ValueError: If the total population is zero
    """
    total_population = sum(strata_df["population"].astype(float).tolist(), 0.0)
    if total_population == 0:
        raise ValueError("Total population is zero")

    allocation_df = strata_df[["id", "name", "population"]].copy()
    allocation_df["samples"] = [
        round_half_up(total_samples * population / total_population)
        for population in strata_df["population"]
    ]

    if total_samples > 0:
        allocation_df["proportion"] = allocation_df["samples"] / total_samples * 100
    else:
        allocation_df["proportion"] = np.nan

    return allocation_df.reset_index(drop=True)


def format_proportion(proportion: float) -> str:
    """Format an allocation share with one decimal place."""
    if proportion is None or not math.isfinite(proportion):
        return "N/A"
    return f"{proportion:.1f}%"


def format_e_squared(value: float) -> str:
    """Format e² at full precision, without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{float(value):,}"


def calculate_allocation_summary(allocation_df: pd.DataFrame) -> pd.DataFrame:
    """Create a display DataFrame of the sample allocation results.

    Args:
        allocation_df: Output of allocate_samples_proportional

    Returns:
        DataFrame with Stratum, Population, Sample and Share columns
    """
    results_data = []

    for _, row in allocation_df.iterrows():
        results_data.append(
            {
                "Stratum": row["name"],
                "Population": int(row["population"]),
                "Sample": int(row["samples"]),
                "Share": format_proportion(row["proportion"]),
            }
        )

    return pd.DataFrame(
        results_data, columns=["Stratum", "Population", "Sample", "Share"]
    )
