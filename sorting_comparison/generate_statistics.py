from functools import cmp_to_key
from itertools import product
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import perf_counter
from typing import NamedTuple, Optional

import numpy as np
import pandas as pd
import plotly.express as px
from tqdm import tqdm

from .Config import *
from .sorting_algorithms.sorting_algorithms import sorting_algorithms
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm

RESULT_PATH = RESULT_DIR / "statistics.csv"
PLOT_PATH = RESULT_DIR / "statistics.html"
COLUMNS = ["name", "N", "best", "worst", "avg", "avg_ms"]


class OperationStats(NamedTuple):
    best: int
    worst: int
    avg: float
    avg_ms: float


def get_operation_stats(sorting_algorithm: SortingAlgorithm, N: int, rounds: int = STATISTICS_ROUNDS, seed: int = SAMPLE_SEED) -> OperationStats:
    def cmp(x: int, y: int) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return 1 if x > y else -1 if x < y else 0

    key = cmp_to_key(cmp)

    r = Random(seed)
    operation_cnts = []
    elapsed_ms = []
    for _ in range(rounds):
        val_array = sorting_algorithm.sampler(N, r)

        arr = list(val_array)
        start = perf_counter()
        sorting_algorithm.func(arr)
        elapsed_ms.append((perf_counter() - start) * 1000)

        # comparisons are counted on an untimed copy
        operation_cnt = 0
        sorting_algorithm.func(list(map(key, val_array)))
        operation_cnts.append(operation_cnt)

    operation_cnts = np.array(operation_cnts, dtype=np.int64)
    return OperationStats(int(operation_cnts.min()), int(operation_cnts.max()), float(operation_cnts.mean()), float(np.mean(elapsed_ms)))


def _work(args: tuple[int, int]) -> str:
    sorting_algorithm_idx, N = args
    sorting_algorithm = sorting_algorithms[sorting_algorithm_idx]
    stats = get_operation_stats(sorting_algorithm, N)
    return ",".join(map(str, (sorting_algorithm.name, N, *stats)))


def generate_statistics(Ns: Optional[list[int]] = None, result_path: Path = RESULT_PATH) -> None:
    Ns = STATISTICS_NS if Ns is None else Ns
    tasks = [(i, N) for i, N in product(range(len(sorting_algorithms)), Ns) if N <= sorting_algorithms[i].max_N]
    result_path.parent.mkdir(parents=True, exist_ok=True)
    with Pool() as pool, open(result_path, "w") as f:
        f.write(",".join(COLUMNS) + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()


def sort_result(result_path: Path = RESULT_PATH) -> pd.DataFrame:
    df = pd.read_csv(result_path)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_path, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_path.parent / f"{name}.csv", index=False)
    return df


def plot_result(result_path: Path = RESULT_PATH, html_path: Path = PLOT_PATH) -> None:
    df = pd.read_csv(result_path).sort_values(["name", "N"])
    fig = px.line(df, x="N", y="avg_ms", color="name", markers=True, log_x=True, log_y=True, title="Average Sort Time", labels={"avg_ms": "Time (ms)"})
    fig.write_html(html_path)


if __name__ == "__main__":
    generate_statistics()
    sort_result()
    plot_result()
