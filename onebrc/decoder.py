"""
Line decoding and the validation policy.

Every line, in every range and for every worker count, goes through the
same three checks: a ``;`` separator, a station name starting with an
uppercase letter, and a one-decimal value. A line failing a check is
rejected with a reason; the scanner counts rejections and moves on.
"""
import enum

from onebrc.errors import MalformedMeasurement
from onebrc.measurement import parse_measurement


class Rejection(enum.Enum):
    MISSING_SEPARATOR = "missing-separator"
    INVALID_NAME = "invalid-name"
    MALFORMED_VALUE = "malformed-value"


def starts_uppercase(name: bytes) -> bool:
    if not name:
        return False
    first = name[0]
    if 65 <= first <= 90:  # A-Z
        return True
    if first < 128:
        return False
    # multi-byte UTF-8 lead, e.g. "Ürümqi" or "İzmir"
    if 0xC2 <= first <= 0xDF:
        width = 2
    elif 0xE0 <= first <= 0xEF:
        width = 3
    elif 0xF0 <= first <= 0xF4:
        width = 4
    else:
        return False
    try:
        head = name[:width].decode("utf-8")
    except UnicodeDecodeError:
        return False
    return head.isupper()


def decode_line(line: bytes):
    """
    Split one record into (name, tenths).

    Returns a Rejection member instead of a tuple when the line is not a
    valid record.
    """
    sep = line.find(b";")
    if sep == -1:
        return Rejection.MISSING_SEPARATOR

    name = line[:sep]
    if not starts_uppercase(name):
        return Rejection.INVALID_NAME

    try:
        value = parse_measurement(line[sep + 1:])
    except MalformedMeasurement:
        return Rejection.MALFORMED_VALUE
    return name, value
