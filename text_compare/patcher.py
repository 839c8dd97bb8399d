import logging
import os
import shutil
import tempfile

from text_compare.errors import FileAccessError

logger = logging.getLogger(__name__)


def _split_eol(line):
    """Split a line read with newline="" into (content, terminator)."""
    for eol in ("\r\n", "\n", "\r"):
        if line.endswith(eol):
            return line[:-len(eol)], eol
    return line, ""


def patch_line(file_path, search_substring, replacement_line, encoding="utf-8"):
    """
    Replace the whole of the first line containing search_substring with
    replacement_line and write the file back in place.

    The line keeps its original terminator and every other line is written
    back untouched. When nothing matches the file is not rewritten at all.
    Returns True if a line was replaced.
    """
    try:
        # newline="" keeps "\r\n" / "\r" endings as they are on disk
        with open(file_path, "r", encoding=encoding, newline="") as f:
            lines = f.readlines()
    except OSError as e:
        raise FileAccessError(file_path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FileAccessError(file_path, f"not valid {encoding} text ({e.reason})") from e

    for index, line in enumerate(lines):
        content, eol = _split_eol(line)
        if search_substring in content:
            lines[index] = replacement_line + eol
            break
    else:
        logger.info(f"No line containing {search_substring!r} in {file_path}; file left unchanged")
        return False

    if not os.access(file_path, os.W_OK):
        raise FileAccessError(file_path, "file is not writable")

    try:
        data = "".join(lines).encode(encoding)
    except UnicodeEncodeError as e:
        raise FileAccessError(file_path, f"replacement not encodable as {encoding} ({e.reason})") from e

    # write beside the target and swap, so a failed write never truncates it
    folder = os.path.dirname(os.path.abspath(file_path))
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile("wb", dir=folder, prefix=".patch_", delete=False) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
        shutil.copymode(file_path, tmp_path)
        os.replace(tmp_path, file_path)
    except OSError as e:
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise FileAccessError(file_path, e.strerror or str(e)) from e

    logger.info(f"Patched line {index + 1} of {file_path}")
    return True
