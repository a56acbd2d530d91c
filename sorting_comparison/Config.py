from pathlib import Path

INPUT_PATHS = ["a2_task1_input1.txt", "a2_task1_input2.txt"]
DEFAULT_ALGORITHMS = ["insertion sort", "merge sort"]

ORIGINAL_PREVIEW_LENGTH = 15
SORTED_PREVIEW_LENGTH = 20

VALUE_RANGE = (-1_000_000, 1_000_000)
SAMPLE_SEED = 42

STATISTICS_NS = [10, 50, 100, 500, 1_000, 5_000, 10_000, 50_000, 100_000]
STATISTICS_ROUNDS = 5
RESULT_DIR = Path("logs")
