import argparse
import cProfile
import pstats
import time

from onebrc.engine import process_file

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profile one run and time a sweep of worker counts.")
    parser.add_argument("filename", type=str, help="measurements file")
    parser.add_argument("--report", type=str, default="cprofile_report.txt", help="cProfile output file")
    parser.add_argument("--sweep", type=int, nargs="*", default=[1, 2, 4, 8], help="worker counts to time")
    args = parser.parse_args()

    # Single worker so the scanner shows up in the profile
    cProfile.run(f"process_file({args.filename!r}, 1)", filename=args.report)

    p = pstats.Stats(args.report)
    p.strip_dirs().sort_stats("tottime").print_stats(20)

    for workers in args.sweep:
        t0 = time.time()
        process_file(args.filename, workers)
        t1 = time.time()
        print(f"{workers} workers: {t1 - t0:.2f} seconds")
