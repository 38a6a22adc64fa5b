import math

import numpy as np
import pytest

from component.sampling.types import Stratum
from component.scripts.stratified import (
    allocate_samples_proportional,
    calculate_allocation_summary,
    calculate_stratified_sample_size,
    format_e_squared,
    format_proportion,
    round_half_up,
    strata_to_frame,
)


@pytest.fixture
def example_strata():
    return [
        Stratum(id=1, name="Stratum 1", population=60, variance=12.0),
        Stratum(id=2, name="Stratum 2", population=58, variance=15.0),
        Stratum(id=3, name="Stratum 3", population=70, variance=20.0),
        Stratum(id=4, name="Stratum 4", population=45, variance=40.0),
    ]


def closed_form(strata, z_score, max_error):
    numerator = sum(s.population * math.sqrt(s.variance) for s in strata)
    denominator = sum(s.population for s in strata)
    return math.ceil((z_score * numerator / (max_error * denominator)) ** 2)


def test_strata_to_frame_keeps_order(example_strata):
    strata_df = strata_to_frame(example_strata)

    assert list(strata_df.columns) == ["id", "name", "population", "variance"]
    assert strata_df["id"].tolist() == [1, 2, 3, 4]
    assert strata_df["population"].sum() == 233


def test_sample_size_matches_closed_form(example_strata):
    strata_df = strata_to_frame(example_strata)
    max_error = math.sqrt(25000)

    n = calculate_stratified_sample_size(strata_df, 1.96, max_error)

    assert n == closed_form(example_strata, 1.96, max_error)
    assert isinstance(n, int)


def test_sample_size_larger_design():
    strata = [
        Stratum(id=1, name="A", population=1000, variance=400.0),
        Stratum(id=2, name="B", population=2000, variance=900.0),
    ]

    n = calculate_stratified_sample_size(strata_to_frame(strata), 1.96, 2.0)

    # (1.96 * 80000 / (2 * 3000))² = 682.95...
    assert n == 683
    assert n == closed_form(strata, 1.96, 2.0)


def test_sample_size_many_strata_matches_closed_form():
    populations = [137, 2048, 55, 9001, 730, 12, 4096, 333, 871, 6500]
    variances = [2.5, 17.0, 0.3, 44.1, 9.9, 123.4, 7.7, 3.14, 61.0, 0.05]
    strata = [
        Stratum(id=i, name=f"S{i}", population=population, variance=variance)
        for i, (population, variance) in enumerate(zip(populations, variances), 1)
    ]

    for z_score, max_error in [(1.645, 0.5), (1.96, 0.25), (2.576, 0.1)]:
        strata_df = strata_to_frame(strata)
        n = calculate_stratified_sample_size(strata_df, z_score, max_error)
        assert n == closed_form(strata, z_score, max_error)


def test_populations_too_large_for_int64():
    strata = [
        Stratum(id=1, name="A", population=10**20, variance=16.0),
        Stratum(id=2, name="B", population=10**20, variance=16.0),
    ]
    strata_df = strata_to_frame(strata)

    n = calculate_stratified_sample_size(strata_df, 1.96, 1.0)
    allocation_df = allocate_samples_proportional(strata_df, n)

    assert strata_df["population"].tolist() == [1e20, 1e20]
    # (1.96 * 4 / 1)² = 61.47 -> n = 62, half each
    assert n == 62
    assert n == closed_form(strata, 1.96, 1.0)
    assert allocation_df["samples"].tolist() == [31, 31]


def test_sample_size_is_zero_without_variance():
    strata = [Stratum(id=1, name="A", population=10, variance=0.0)]

    assert calculate_stratified_sample_size(strata_to_frame(strata), 1.96, 5.0) == 0


def test_sample_size_undefined_without_strata():
    assert calculate_stratified_sample_size(strata_to_frame([]), 1.96, 5.0) is None


def test_sample_size_undefined_with_zero_population():
    strata = [
        Stratum(id=1, name="A", population=0, variance=10.0),
        Stratum(id=2, name="B", population=0, variance=20.0),
    ]

    assert calculate_stratified_sample_size(strata_to_frame(strata), 1.96, 5.0) is None


def test_sample_size_undefined_with_zero_error(example_strata):
    strata_df = strata_to_frame(example_strata)

    assert calculate_stratified_sample_size(strata_df, 1.96, 0.0) is None


@pytest.mark.parametrize(
    "value, expected", [(0.5, 1), (1.49, 1), (2.5, 3), (3.5, 4), (0.2575, 0)]
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_proportional_allocation_follows_rounding_formula():
    strata = [
        Stratum(id=1, name="A", population=1000, variance=400.0),
        Stratum(id=2, name="B", population=2000, variance=900.0),
        Stratum(id=3, name="C", population=1234, variance=100.0),
    ]
    strata_df = strata_to_frame(strata)
    total_population = strata_df["population"].sum()

    allocation_df = allocate_samples_proportional(strata_df, 517)

    for stratum, samples in zip(strata, allocation_df["samples"]):
        assert samples == round_half_up(517 * stratum.population / total_population)
    assert allocation_df["id"].tolist() == [1, 2, 3]


def test_proportional_allocation_can_drift():
    strata = [
        Stratum(id=1, name="A", population=100, variance=1.0),
        Stratum(id=2, name="B", population=100, variance=1.0),
    ]

    allocation_df = allocate_samples_proportional(strata_to_frame(strata), 5)

    assert allocation_df["samples"].tolist() == [3, 3]
    assert allocation_df["samples"].sum() == 6
    assert allocation_df["proportion"].tolist() == pytest.approx([60.0, 60.0])


def test_proportional_allocation_with_zero_total_samples():
    strata = [Stratum(id=1, name="A", population=10, variance=0.0)]

    allocation_df = allocate_samples_proportional(strata_to_frame(strata), 0)

    assert allocation_df["samples"].tolist() == [0]
    assert np.isnan(allocation_df["proportion"].iloc[0])


def test_proportional_allocation_rejects_zero_population():
    strata = [Stratum(id=1, name="A", population=0, variance=1.0)]

    with pytest.raises(ValueError):
        allocate_samples_proportional(strata_to_frame(strata), 10)


def test_format_proportion():
    assert format_proportion(33.333) == "33.3%"
    assert format_proportion(0.0) == "0.0%"
    assert format_proportion(float("nan")) == "N/A"
    assert format_proportion(None) == "N/A"


@pytest.mark.parametrize(
    "value, expected",
    [
        (25000.0, "25,000"),
        (4, "4"),
        (12345.678, "12,345.678"),
        (0.123456789, "0.123456789"),
        (1234567.5, "1,234,567.5"),
    ],
)
def test_format_e_squared_keeps_precision(value, expected):
    assert format_e_squared(value) == expected


def test_allocation_summary():
    strata = [
        Stratum(id=1, name="A", population=1000, variance=400.0),
        Stratum(id=2, name="B", population=2000, variance=900.0),
    ]
    allocation_df = allocate_samples_proportional(strata_to_frame(strata), 683)

    summary_df = calculate_allocation_summary(allocation_df)

    assert summary_df.to_dict("records") == [
        {"Stratum": "A", "Population": 1000, "Sample": 228, "Share": "33.4%"},
        {"Stratum": "B", "Population": 2000, "Sample": 455, "Share": "66.6%"},
    ]
