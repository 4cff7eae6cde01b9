from collections import Counter
from typing import Iterable

from onebrc.table import ScanResult, Table


def merge_tables(tables: Iterable[Table]) -> Table:
    """
    Merges multiple partial tables into a final one.

    Inputs are left untouched: stations seen once are copied, shared ones
    are combined into fresh aggregates.
    """
    final: Table = {}
    for table in tables:
        for name, agg in table.items():
            existing = final.get(name)
            if existing is None:
                final[name] = agg.copy()
            else:
                final[name] = existing.combine(agg)
    return final


def reduce_results(results) -> ScanResult:
    """
    Fold every worker's ScanResult into one.

    Runs in the main process after all workers have completed, so it only
    ever sees a complete set of partial results.
    """
    results = list(results)
    rejected = Counter()
    lines = 0
    for result in results:
        rejected.update(result.rejected)
        lines += result.lines
    return ScanResult(merge_tables(r.table for r in results), lines, rejected)
