from onebrc.measurement import format_mean, format_tenths
from onebrc.table import Aggregate, Table


def format_station(name: bytes, agg: Aggregate) -> str:
    return (
        f"{name.decode('utf-8', errors='replace')}="
        f"{format_tenths(agg.min)}/{format_mean(agg.sum, agg.count)}/{format_tenths(agg.max)}"
    )


def format_results(table: Table) -> str:
    """Render `{name=min/mean/max, ...}` with names in byte order."""
    return "{" + ", ".join(format_station(name, table[name]) for name in sorted(table)) + "}"
