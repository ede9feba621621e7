import pytest

from gasreport.utils import mean, median_sorted


@pytest.mark.parametrize(
    "values,expected",
    (
        ([], 0),
        ([7], 7),
        ([1, 2], 1),
        ([1, 2, 4], 2),
        ([21000, 23000], 22000),
    ),
)
def test_mean(values, expected):
    assert mean(values) == expected


@pytest.mark.parametrize(
    "values,expected",
    (
        ([], 0),
        ([7], 7),
        ([1, 9], 1),
        ([1, 2, 9], 2),
        ([1, 2, 3, 9], 2),
    ),
)
def test_median_sorted(values, expected):
    assert median_sorted(values) == expected
