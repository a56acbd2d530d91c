from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from time import perf_counter
from typing import Optional

from .Config import *
from .input_data import read_data_from_file
from .sorting_algorithms.sorting_algorithms import get_sorting_algorithm
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, msg: str) -> None:
        super().__init__(f"Invalid sorting algorithm `{name}`: {msg}")


@dataclass
class TimingResult:
    name: str
    elapsed_ms: float
    sorted_data: list[int] = field(repr=False)


def trimmed_preview(arr: Sequence[int], limit: int = 10) -> str:
    preview = ", ".join(str(x) for x in arr[:limit])
    return preview + (", ..." if len(arr) > limit else "")


def time_sort(sorting_algorithm: SortingAlgorithm, data: Sequence[int]) -> TimingResult:
    arr = list(data)
    start = perf_counter()
    sorting_algorithm.func(arr)
    elapsed_ms = (perf_counter() - start) * 1000
    if not sorting_algorithm.validator(arr):
        raise InvalidSortingAlgorithmError(sorting_algorithm.name, "result is not in non-decreasing order")
    if Counter(arr) != Counter(data):
        raise InvalidSortingAlgorithmError(sorting_algorithm.name, "result is not a permutation of the input")
    return TimingResult(sorting_algorithm.name, elapsed_ms, arr)


def compare(data: Sequence[int], sorting_algorithms: Sequence[SortingAlgorithm]) -> list[TimingResult]:
    return [time_sort(sorting_algorithm, data) for sorting_algorithm in sorting_algorithms]


def fastest(results: Sequence[TimingResult]) -> TimingResult:
    return min(reversed(results), key=lambda result: result.elapsed_ms)


def driver_program(path: str | Path, sorting_algorithms: Optional[Sequence[SortingAlgorithm]] = None) -> list[TimingResult]:
    if sorting_algorithms is None:
        sorting_algorithms = [get_sorting_algorithm(name) for name in DEFAULT_ALGORITHMS]

    data = read_data_from_file(path)
    if not data:
        print("Original array is empty!")
        return []

    results = []
    for sorting_algorithm in sorting_algorithms:
        print("\nOriginal Array:")
        print(trimmed_preview(data, ORIGINAL_PREVIEW_LENGTH))
        result = time_sort(sorting_algorithm, data)
        print(f"\n{sorting_algorithm.name.title()} Sorted Array:")
        print(trimmed_preview(result.sorted_data, SORTED_PREVIEW_LENGTH))
        results.append(result)

    print()
    for result in results:
        print(f"{result.name.title()} Time: {result.elapsed_ms:.6f} ms")
    print(f"{fastest(results).name.title()} was faster.")
    return results
