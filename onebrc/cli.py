import argparse
import sys
import time

from onebrc.engine import process_file
from onebrc.errors import OneBrcError
from onebrc.formatter import format_results
from onebrc.ground_truth import verify


def positive_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="onebrc",
        description="Per-station min/mean/max of a '<station>;<value>' measurements file.",
    )
    parser.add_argument("filename", type=str, help="measurements.txt file")
    parser.add_argument("-w", "--workers", type=positive_int, default=1, help="number of worker processes")
    parser.add_argument("--stats", action="store_true", help="print line and station totals to stderr")
    parser.add_argument("--verify", action="store_true", help="cross-check the result against polars")
    parser.add_argument("--timing", action="store_true", help="print the elapsed time to stderr")
    return parser


def print_stats(result):
    print(f"Total locations: {result.stations}", file=sys.stderr)
    print(f"Lines read: {result.lines}", file=sys.stderr)
    print(f"Lines accepted: {result.accepted}", file=sys.stderr)
    for reason, count in sorted(result.rejected.items(), key=lambda item: item[0].value):
        print(f"Lines rejected ({reason.value}): {count}", file=sys.stderr)


def main(argv=None):
    args = build_parser().parse_args(argv)

    t0 = time.time()
    try:
        result = process_file(args.filename, args.workers)
        if args.verify:
            verify(args.filename, result.table)
    except (OneBrcError, OSError) as e:
        print(f"onebrc: {e}", file=sys.stderr)
        return 1
    t1 = time.time()

    print(format_results(result.table))
    if args.stats:
        print_stats(result)
    if args.timing:
        print(f"\nProcessing took {t1 - t0:.2f} seconds", file=sys.stderr)
    return 0
