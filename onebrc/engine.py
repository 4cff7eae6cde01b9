"""
Coordinator: plan the ranges, fan out one scanner per range, wait for all
of them and fold the partial results.
"""
import mmap
import multiprocessing as mp
import os
from typing import List, Tuple

from onebrc.config import RunConfig
from onebrc.formatter import format_results
from onebrc.partition import find_line_start, plan
from onebrc.reducer import reduce_results
from onebrc.scanner import scan_range
from onebrc.table import ScanResult


def process_file(file_name: str, workers: int = 1) -> ScanResult:
    """
    Main entry point to process a file given by path.
    - Validates the configuration
    - Splits the file into one byte range per worker
    - Spawns the workers and waits for every partial result
    - Merges them into the final result

    A failing worker raises out of here; nothing is merged in that case.
    """
    config = RunConfig(file_name, workers).validate()
    ranges = plan(os.path.getsize(config.path), config.workers)
    tasks = [(config.path, r.start, r.length) for r in ranges]

    if config.workers == 1:
        partials = [scan_range(*tasks[0])]
    else:
        with mp.Pool(config.workers) as pool:
            partials = pool.starmap(scan_range, tasks)

    return reduce_results(partials)


def calculate(file_name: str, workers: int = 1) -> str:
    return format_results(process_file(file_name, workers).table)


def aligned_plan(file_name: str, workers: int) -> List[Tuple[int, int]]:
    """
    The (start, end) span of lines each worker scans, with starts aligned.

    A range owning no line start is reported as an empty span placed at the
    next line start owned by a later range.
    """
    config = RunConfig(file_name, workers).validate()
    size = os.path.getsize(config.path)
    ranges = plan(size, config.workers)
    if size == 0:
        return [(0, 0) for _ in ranges]

    with open(config.path, "rb") as f, mmap.mmap(f.fileno(), length=0, access=mmap.ACCESS_READ) as mm:
        starts = [find_line_start(mm, r.start, r.length) for r in ranges]

    following = size
    for i in reversed(range(len(starts))):
        if starts[i] is None:
            starts[i] = following
        following = starts[i]

    # Each span runs up to the next worker's aligned start
    spans = []
    for i, start in enumerate(starts):
        end = starts[i + 1] if i + 1 < len(starts) else size
        spans.append((start, end))
    return spans
