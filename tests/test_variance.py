import pytest

from component.scripts.variance import (
    ValueSummary,
    calculate_variance,
    parse_values,
    summarize_values,
)


def test_parse_values_skips_invalid_tokens():
    assert parse_values("1, x, 3,,  4.5 ") == [1.0, 3.0, 4.5]
    assert parse_values("nan, inf, 2") == [2.0]


def test_parse_values_reads_leading_numbers():
    assert parse_values("1, 2abc, 3 4") == [1.0, 2.0, 3.0]
    assert parse_values("-1.5kg, .5, 2e1x, 1e999, abc2") == [-1.5, 0.5, 20.0]

    summary = summarize_values("1, 2abc, 3 4")
    assert summary.count == 3
    assert summary.mean == pytest.approx(2.0)


def test_population_variance():
    summary = summarize_values("1,2,3")

    assert summary.count == 3
    assert summary.mean == pytest.approx(2.0)
    assert summary.variance == pytest.approx(2 / 3)
    assert calculate_variance("1,2,3") == pytest.approx(0.6667, abs=1e-4)


def test_bad_tokens_are_ignored():
    summary = summarize_values("1,x,3")

    assert summary.count == 2
    assert summary.mean == pytest.approx(2.0)
    assert summary.variance == pytest.approx(1.0)


@pytest.mark.parametrize("data", ["", None, "a,b", " , ,"])
def test_nothing_to_parse(data):
    assert summarize_values(data) == ValueSummary()
    assert calculate_variance(data) == 0


def test_single_value_has_zero_variance():
    assert calculate_variance("42") == 0.0
