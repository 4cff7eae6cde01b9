import pytest


@pytest.fixture
def measurements(tmp_path):
    """Write bytes or text to a measurements file and return its path."""

    def write(content, name="measurements.txt"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return str(path)

    return write
