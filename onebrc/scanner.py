import mmap
import os

from onebrc.decoder import Rejection, decode_line
from onebrc.partition import find_line_start
from onebrc.table import Aggregate, ScanResult

# Bytes handed to the decoder per step; each block is extended to a line end
BLOCK_SIZE = 1 << 20


def scan_range(file_name: str, start: int, length: int, block_size: int = BLOCK_SIZE) -> ScanResult:
    """
    Aggregate every line that starts inside [start, start + length).

    The last line that starts in the range is read to its end even when it
    crosses the range end; the next range skips it while aligning. Errors
    opening or reading the file propagate to the caller.

    With more than one worker this runs in its own process.
    """
    result = ScanResult()
    with open(file_name, "rb") as f:
        if os.fstat(f.fileno()).st_size == 0 or length <= 0:
            return result
        with mmap.mmap(f.fileno(), length=0, access=mmap.ACCESS_READ) as mm:
            first = find_line_start(mm, start, length)
            if first is not None:
                _scan_lines(mm, first, min(start + length, len(mm)), block_size, result)
    return result


def _scan_lines(mm, pos: int, stop: int, block_size: int, result: ScanResult):
    size = len(mm)
    table = result.table
    get = table.get
    rejected = result.rejected
    lines = 0

    while pos < stop:
        block_end = min(pos + block_size, stop)
        # Extend to the terminator of the line holding the block's last byte
        nl = mm.find(b"\n", block_end - 1)
        end = size if nl == -1 else nl + 1

        for line in mm[pos:end].split(b"\n"):
            if not line:
                continue
            lines += 1
            decoded = decode_line(line)
            if isinstance(decoded, Rejection):
                rejected[decoded] += 1
                continue
            name, value = decoded
            # table.observe, inlined for speed
            agg = get(name)
            if agg is None:
                table[name] = Aggregate.first(value)
            else:
                agg.observe(value)
        pos = end

    result.lines += lines
