import math

from component.scripts.parameter import DEFAULT_Z_SCORE, Z_SCORES


def get_z_score(confidence_level) -> float:
    """Return the critical value for a confidence level.

    Args:
        confidence_level: Confidence level as a percentage (90, 95 or 99)

    Returns:
        Z-score value, 1.96 for any unsupported level
    """
    return Z_SCORES.get(confidence_level, DEFAULT_Z_SCORE)


def _parse_float(value) -> float:
    """Parse a user supplied value, returning 0.0 when it is not usable."""
    if value is None:
        return 0.0

    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(number) or number < 0:
        return 0.0

    return number


def coerce_population(value) -> int:
    """Coerce a population entry to a non-negative integer.

    Decimal text is truncated ("12.7" gives 12). Invalid input gives 0.
    """
    return int(_parse_float(value))


def coerce_variance(value) -> float:
    """Coerce a variance entry to a non-negative float, 0.0 when invalid."""
    return _parse_float(value)


def coerce_max_error_squared(value) -> float:
    """Coerce the e² entry to a non-negative float, 0.0 when invalid."""
    return _parse_float(value)
