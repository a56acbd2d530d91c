from ..SortingAlgorithm import SortingAlgorithm


def merge(arr: list, left: int, mid: int, right: int) -> None:
    n1 = mid - left + 1
    n2 = right - mid
    L = arr[left : mid + 1]
    R = arr[mid + 1 : right + 1]

    i = j = 0
    k = left
    while i < n1 and j < n2:
        if L[i] <= R[j]:
            arr[k] = L[i]
            i += 1
        else:
            arr[k] = R[j]
            j += 1
        k += 1

    arr[k : k + n1 - i] = L[i:]
    k += n1 - i
    arr[k : k + n2 - j] = R[j:]


def merge_sort(arr: list, left: int, right: int) -> None:
    if left < right:
        mid = left + (right - left) // 2
        merge_sort(arr, left, mid)
        merge_sort(arr, mid + 1, right)
        merge(arr, left, mid, right)


def merge_sort_all(arr: list) -> None:
    merge_sort(arr, 0, len(arr) - 1)


algorithm = SortingAlgorithm("merge sort", merge_sort_all, 1_000_000)
