from collections.abc import Callable, Sequence
from random import Random
from typing import NamedTuple

from ..input_data import generate_data


def is_non_decreasing(arr: Sequence) -> bool:
    return all(arr[i] <= arr[i + 1] for i in range(len(arr) - 1))


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[list], None]
    max_N: int
    sampler: Callable[[int, Random], list[int]] = generate_data
    validator: Callable[[Sequence], bool] = is_non_decreasing
