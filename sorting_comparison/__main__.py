import argparse
import sys
from random import Random
from typing import Optional

from .Config import *
from .driver import driver_program
from .generate_statistics import generate_statistics, plot_result, sort_result
from .input_data import MalformedInputError, generate_data, write_data_file
from .sorting_algorithms.sorting_algorithms import UnknownSortingAlgorithmError, get_sorting_algorithm, sorting_algorithms

ORDINALS = ["first", "second", "third", "fourth", "fifth", "sixth", "seventh", "eighth", "ninth", "tenth"]


def ordinal(i: int) -> str:
    return ORDINALS[i] if i < len(ORDINALS) else f"#{i + 1}"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sorting_comparison", description="Compare the running time of sorting algorithms on integer files.")
    parser.add_argument("paths", nargs="*", default=INPUT_PATHS, help="input files: a count line followed by a line of space separated integers")
    parser.add_argument(
        "-a",
        "--algorithm",
        action="append",
        dest="algorithms",
        metavar="NAME",
        help=f"algorithm to compare, may be repeated (choices: {', '.join(algo.name for algo in sorting_algorithms)})",
    )
    parser.add_argument("--generate", nargs=2, metavar=("N", "PATH"), help="write N random integers to PATH and exit")
    parser.add_argument("--statistics", action="store_true", help="run the statistics sweep and write the results to the log directory")
    args = parser.parse_args(argv)
    try:
        args.algorithms = [get_sorting_algorithm(name) for name in args.algorithms or DEFAULT_ALGORITHMS]
    except UnknownSortingAlgorithmError as e:
        parser.error(str(e))
    if args.generate is not None:
        N, path = args.generate
        if not N.isdecimal():
            parser.error(f"--generate: N must be a non-negative integer, got `{N}`")
        args.generate = (int(N), path)
    return args


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    if args.generate is not None:
        N, path = args.generate
        write_data_file(path, generate_data(N, Random(SAMPLE_SEED)))
        print(f"Wrote {N} numbers to {path}")
        return 0
    if args.statistics:
        generate_statistics()
        sort_result()
        plot_result()
        return 0

    for i, path in enumerate(args.paths):
        if i:
            print()
        print(f"Sorting {ordinal(i)} file...")
        try:
            driver_program(path, args.algorithms)
        except MalformedInputError as e:
            print(e, file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
