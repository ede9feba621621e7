from typing import Sequence


def mean(values: Sequence[int]) -> int:
    """
    The arithmetic mean of ``values``, truncated to an integer.
    Returns ``0`` when there are no values.
    """
    if not values:
        return 0

    return sum(values) // len(values)


def median_sorted(values: Sequence[int]) -> int:
    """
    The median of an already sorted sequence. With an even number of
    values, the lower of the two middle values is used.
    Returns ``0`` when there are no values.
    """
    if not values:
        return 0

    return values[(len(values) - 1) // 2]
