from typing import Tuple

import numpy as np
import pandas as pd
from scipy import stats

from component.scripts.calc_utils import get_z_score
from component.scripts.parameter import CURVE_POINT_COUNT, CURVE_X_RANGE


def generate_normal_curve(
    point_count: int = CURVE_POINT_COUNT,
    x_min: float = CURVE_X_RANGE[0],
    x_max: float = CURVE_X_RANGE[1],
) -> pd.DataFrame:
    """Sample the standard normal density on a regular grid.

    y = (1 / √(2π)) x exp(-x² / 2)

    x is stepped by (x_max - x_min) / point_count and both ends are
    included, so the curve always has point_count + 1 points.

    Args:
        point_count: Number of steps between x_min and x_max
        x_min: First x value
        x_max: Last x value

    Returns:
        DataFrame with columns: x, y
    """
    if point_count < 1:
        raise ValueError("point_count must be at least 1")

    step = (x_max - x_min) / point_count
    x_values = x_min + step * np.arange(point_count + 1)
    x_values[-1] = x_max

    y_values = stats.norm.pdf(x_values, loc=0.0, scale=1.0)

    return pd.DataFrame({"x": x_values, "y": y_values})


def confidence_region(curve: pd.DataFrame, z_score: float) -> pd.DataFrame:
    """Keep the curve points with |x| <= z_score.

    Args:
        curve: Output of generate_normal_curve
        z_score: Half width of the region

    Returns:
        Filtered copy of curve, index reset
    """
    mask = curve["x"].abs() <= z_score
    return curve.loc[mask].reset_index(drop=True)


def density_series(
    confidence_level, point_count: int = CURVE_POINT_COUNT
) -> Tuple[pd.DataFrame, pd.DataFrame, float]:
    """Return the full curve, its confidence region and the Z-score in use."""
    z_score = get_z_score(confidence_level)
    curve = generate_normal_curve(point_count=point_count)
    return curve, confidence_region(curve, z_score), z_score
