import pytest

from onebrc.cli import main

DATA = "Tokyo;10.0\nParis;-2.5\nbroken\nTokyo;20.0\n"


def test_prints_result(measurements, capsys):
    assert main([measurements(DATA), "--workers", "2"]) == 0
    out, err = capsys.readouterr()
    assert out == "{Paris=-2.5/-2.5/-2.5, Tokyo=10.0/15.0/20.0}\n"
    assert err == ""


def test_stats(measurements, capsys):
    assert main([measurements(DATA), "--stats"]) == 0
    _, err = capsys.readouterr()
    assert "Total locations: 2" in err
    assert "Lines read: 4" in err
    assert "Lines rejected (missing-separator): 1" in err


def test_timing(measurements, capsys):
    assert main([measurements(DATA), "--timing"]) == 0
    _, err = capsys.readouterr()
    assert "Processing took" in err


def test_missing_file_exits_nonzero(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("onebrc:")


def test_rejects_non_positive_workers(measurements):
    with pytest.raises(SystemExit):
        main([measurements(DATA), "--workers", "0"])


def test_worker_failure_prints_nothing(measurements, capsys):
    path = measurements("A;1.0\n" + "B" * 4000 + ";2.0\nC;3.0\n")
    assert main([path, "--workers", "2"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "no line terminator" in err


@pytest.mark.parametrize("content", [
    b"Tokyo;10.0\nTokyo;1.0;2.0\nParis;-2.5\n",
    b"Tokyo;10.0\nPar\xffis;-2.5\n",
])
def test_verify_unreadable_by_reference(measurements, capsys, content):
    path = measurements(content)
    assert main([path]) == 0
    capsys.readouterr()
    assert main([path, "--verify"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("onebrc:")
