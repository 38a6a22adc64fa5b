"""Variance helper for deriving a stratum variance from raw observations.

The values are typed by the user as comma separated text. Population
statistics are used (divide by the count, not count - 1).
"""

import math
import re
from dataclasses import dataclass
from typing import List

import numpy as np

# Leading number of a token: "2abc" reads as 2, "3 4" as 3
LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class ValueSummary:
    """Population statistics of a list of observations."""

    count: int = 0
    mean: float = 0.0
    variance: float = 0.0


def parse_values(data: str) -> List[float]:
    """Parse comma separated numbers.

    Each token is read up to the end of its leading number, the rest of the
    token is ignored. Tokens that do not start with a number are dropped.

    Args:
        data: Text such as "1, 2.5, 3"

    Returns:
        List of parsed values in input order
    """
    if not data:
        return []

    values = []
    for token in data.split(","):
        match = LEADING_NUMBER.match(token)
        if match is None:
            continue
        value = float(match.group(1))
        if math.isfinite(value):
            values.append(value)

    return values


def summarize_values(data: str) -> ValueSummary:
    """Compute count, population mean and population variance of the parsed values.

    Returns an all-zero summary when no value parses.
    """
    values = parse_values(data)
    if not values:
        return ValueSummary()

    array = np.asarray(values, dtype=float)
    return ValueSummary(
        count=len(values),
        mean=float(np.mean(array)),
        variance=float(np.var(array, ddof=0)),
    )


def calculate_variance(data: str) -> float:
    """Population variance of comma separated values, 0.0 when nothing parses."""
    return summarize_values(data).variance
