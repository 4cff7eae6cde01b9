"""
Independent reference aggregation with polars.

Measurements are turned into exact tenths by dropping the decimal point
from the text, so the reference never touches floating point either and
min/max/sum/count can be compared for equality with the engine's table.
The same validation policy is applied. Files the reference reader cannot
parse (a second ``;`` on a line, names that are not valid UTF-8) fail
verification.
"""
import itertools as it
import os

import polars as pl

from onebrc.errors import VerificationError
from onebrc.formatter import format_station
from onebrc.table import Aggregate, Table

VALUE_PATTERN = r"^-?\d+\.\d$"
NAME_PATTERN = r"^\p{Lu}"


def reference_table(file_name: str) -> Table:
    if os.path.getsize(file_name) == 0:
        return {}

    try:
        df = pl.scan_csv(
            file_name,
            separator=";",
            has_header=False,
            quote_char=None,
            schema={"station_name": pl.Utf8, "measurement": pl.Utf8},
        )

        grouped = (
            df.filter(
                pl.col("station_name").str.contains(NAME_PATTERN)
                & pl.col("measurement").str.contains(VALUE_PATTERN)
            )
            .with_columns(
                pl.col("measurement").str.replace(".", "", literal=True).cast(pl.Int64).alias("tenths")
            )
            .group_by("station_name")
            .agg(
                pl.col("tenths").min().alias("min_measurement"),
                pl.col("tenths").max().alias("max_measurement"),
                pl.col("tenths").sum().alias("sum_measurement"),
                pl.col("tenths").count().alias("count"),
            )
            .collect()
        )
    except pl.exceptions.PolarsError as e:
        raise VerificationError(f"reference reader cannot read {file_name}: {e}") from e

    result = {}
    for name, min_val, max_val, total, count in grouped.iter_rows():
        result[name.encode("utf-8")] = Aggregate(min_val, max_val, total, count)
    return result


def compare(ground_truth: Table, result: Table):
    """Yield one line per station whose aggregate differs."""
    for name in sorted(set(ground_truth) | set(result)):
        l, r = ground_truth.get(name), result.get(name)
        if l != r:
            left = format_station(name, l) if l else "<missing>"
            right = format_station(name, r) if r else "<missing>"
            yield f"{left}  !=  {right}"


def verify(file_name: str, result: Table):
    diff = list(compare(reference_table(file_name), result))
    if diff:
        shown = "\n".join(it.islice(diff, 10))
        raise VerificationError(f"{len(diff)} stations differ from the reference:\n{shown}")
