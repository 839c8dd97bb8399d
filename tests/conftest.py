import pytest

from text_compare.logger_helper import close_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    close_logger("text_compare")


@pytest.fixture
def write_lines():
    """Write lines joined by "\n" (with a trailing newline) and return the path."""
    def _write(path, lines, eol="\n"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes("".join(line + eol for line in lines).encode("utf-8"))
        return path
    return _write
