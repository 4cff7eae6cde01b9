"""
Splitting a file into byte ranges for the workers.

plan() only computes the nominal equal-width ranges. Each range owns the
lines whose first byte lies inside it; find_line_start() moves a nominal
start forward to the first such line and is what the scanner calls when it
opens its range.
"""
from typing import List, NamedTuple

from onebrc.errors import AlignmentError, ConfigError

# How far past a nominal start we look for a line terminator
LOOKAHEAD = 1024


class ByteRange(NamedTuple):
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


def plan(file_size: int, worker_count: int) -> List[ByteRange]:
    """N contiguous ranges over [0, file_size); the last absorbs the remainder."""
    if worker_count < 1:
        raise ConfigError(f"worker count must be positive, got {worker_count}")
    if file_size < 0:
        raise ConfigError(f"file size must not be negative, got {file_size}")

    chunk_size = file_size // worker_count
    ranges = []
    for i in range(worker_count):
        start = i * chunk_size
        length = file_size - start if i == worker_count - 1 else chunk_size
        ranges.append(ByteRange(start, length))
    return ranges


def find_line_start(mm, start: int, length: int, lookahead: int = LOOKAHEAD):
    """
    Offset of the first line starting in [start, start + length), or None.

    `mm` is anything supporting len() and find() over bytes (mmap, bytes).
    Offset 0 always starts a line. Otherwise a line starts right after a
    b"\\n", so the search covers [start - 1, start - 1 + window) where the
    window is the range length capped at `lookahead`. A range shorter than
    the lookahead with no terminator simply owns no line; a longer one
    raises AlignmentError.
    """
    size = len(mm)
    if start == 0:
        return 0 if length > 0 and size > 0 else None
    if start >= size:
        return None

    window = min(length, lookahead)
    limit = min(start - 1 + window, size)
    nl = mm.find(b"\n", start - 1, limit)
    if nl == -1:
        if window == length or limit == size:
            return None
        raise AlignmentError(
            f"no line terminator within {lookahead} bytes of offset {start}"
        )
    first = nl + 1
    if first >= min(start + length, size):
        return None
    return first
