from onebrc.engine import aligned_plan, calculate, process_file
from onebrc.errors import (
    AlignmentError,
    ConfigError,
    MalformedMeasurement,
    OneBrcError,
    VerificationError,
)
from onebrc.table import Aggregate, ScanResult

__all__ = [
    "Aggregate",
    "AlignmentError",
    "ConfigError",
    "MalformedMeasurement",
    "OneBrcError",
    "ScanResult",
    "VerificationError",
    "aligned_plan",
    "calculate",
    "process_file",
]
