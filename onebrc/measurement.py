"""
Fixed-point measurements.

A measurement is kept as an integer number of tenths: b"-3.2" -> -32.
Accumulation only ever adds and compares integers, the division by ten
happens when the value is displayed.
"""
from onebrc.errors import MalformedMeasurement

# integer tenths
Measurement = int

MINUS = 45  # b"-"
DOT = 46  # b"."
ZERO = 48
NINE = 57


def parse_measurement(val_bytes: bytes) -> Measurement:
    """Parse b"-?\\d+\\.\\d" into tenths, raising MalformedMeasurement otherwise."""
    n = len(val_bytes)
    i = 1 if n and val_bytes[0] == MINUS else 0
    if n - i < 3 or val_bytes[n - 2] != DOT:
        raise MalformedMeasurement(f"not a one-decimal number: {val_bytes!r}")

    num = 0
    for c in val_bytes[i:n - 2]:
        if c < ZERO or c > NINE:
            raise MalformedMeasurement(f"not a one-decimal number: {val_bytes!r}")
        num = num * 10 + (c - ZERO)

    c = val_bytes[n - 1]
    if c < ZERO or c > NINE:
        raise MalformedMeasurement(f"not a one-decimal number: {val_bytes!r}")
    num = num * 10 + (c - ZERO)

    return -num if i else num


def to_display(tenths) -> float:
    return tenths / 10.0


def format_tenths(tenths: Measurement) -> str:
    """Exact one-decimal rendering of an integer number of tenths."""
    whole, frac = divmod(abs(tenths), 10)
    sign = "-" if tenths < 0 else ""
    return f"{sign}{whole}.{frac}"


def format_mean(total: int, count: int) -> str:
    mean = to_display(total) / count
    # Normalize -0.0 to 0.0
    return f"{abs(mean) if round(mean, 1) == 0 else mean:.1f}"
