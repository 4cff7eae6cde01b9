import pytest

from onebrc.engine import process_file
from onebrc.errors import VerificationError
from onebrc.ground_truth import reference_table, verify
from onebrc.table import Aggregate


def test_reference_matches_engine(measurements):
    content = "".join(f"Station{i % 7};{(i * 13) % 120 - 60}.{i % 10}\n" for i in range(300))
    path = measurements(content)
    reference = reference_table(path)
    assert reference == process_file(path, 3).table
    verify(path, reference)


def test_reference_uses_exact_tenths(measurements):
    path = measurements("Tokyo;10.0\nParis;-2.5\nTokyo;20.0\n")
    assert reference_table(path) == {
        b"Tokyo": Aggregate(100, 200, 300, 2),
        b"Paris": Aggregate(-25, -25, -25, 1),
    }


def test_verify_reports_differences(measurements):
    path = measurements("Tokyo;10.0\nParis;-2.5\n")
    wrong = {b"Tokyo": Aggregate(100, 100, 100, 1)}
    with pytest.raises(VerificationError, match="Paris"):
        verify(path, wrong)


def test_reference_empty_file(measurements):
    assert reference_table(measurements(b"")) == {}


def test_reference_extra_separator_fails_verification(measurements):
    path = measurements("Tokyo;10.0\nTokyo;1.0;2.0\n")
    with pytest.raises(VerificationError):
        reference_table(path)
