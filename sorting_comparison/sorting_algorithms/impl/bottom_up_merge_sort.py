from ..SortingAlgorithm import SortingAlgorithm
from .merge_sort import merge


def bottom_up_merge_sort(arr: list) -> None:
    n = len(arr)
    width = 1
    while width < n:
        for left in range(0, n - width, width * 2):
            mid = left + width - 1
            right = min(left + width * 2 - 1, n - 1)
            merge(arr, left, mid, right)
        width *= 2


algorithm = SortingAlgorithm("bottom-up merge sort", bottom_up_merge_sort, 1_000_000)
