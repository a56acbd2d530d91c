from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm


class UnknownSortingAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown sorting algorithm: `{name}` (available: {', '.join(algo.name for algo in sorting_algorithms)})")
        self.name = name


sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".{file.stem}", package=f"{__package__}.impl")
    sorting_algorithms.append(module.algorithm)


def get_sorting_algorithm(name: str) -> SortingAlgorithm:
    for sorting_algorithm in sorting_algorithms:
        if sorting_algorithm.name == name:
            return sorting_algorithm
    raise UnknownSortingAlgorithmError(name)
