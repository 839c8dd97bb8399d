import logging

from text_compare.errors import FileAccessError
from text_compare.models import ComparisonResult

logger = logging.getLogger(__name__)


def _strip_eol(line):
    # universal-newline reads hand back "\n" only
    return line[:-1] if line.endswith("\n") else line


def compare_streams(source_stream, dest_stream):
    """
    Walk both line streams in lockstep and record every source line whose
    destination counterpart differs or is missing. Lines are compared exactly
    once the terminator is dropped.
    """
    result = ComparisonResult()
    dest_iter = iter(dest_stream)

    for line_number, source_line in enumerate(source_stream, start=1):
        source_line = _strip_eol(source_line)
        dest_line = next(dest_iter, None)
        if dest_line is not None:
            dest_line = _strip_eol(dest_line)
        if dest_line is None or source_line != dest_line:
            result.add(line_number, source_line, dest_line)
        result.lines_compared = line_number

    # source exhausted: anything left on the destination side?
    if next(dest_iter, None) is not None:
        result.dest_longer = True

    return result


def compare_files(source_path, dest_path, encoding="utf-8"):
    """Open both files for the duration of the comparison and compare them."""
    try:
        with open(source_path, "r", encoding=encoding) as src, open(dest_path, "r", encoding=encoding) as dest:
            result = compare_streams(src, dest)
    except OSError as e:
        raise FileAccessError(e.filename or source_path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise FileAccessError(f"{source_path} / {dest_path}", f"not valid {encoding} text ({e.reason})") from e

    if result.dest_longer:
        logger.warning(f"{dest_path} has more lines than {source_path} "
                       f"(source ended after line {result.lines_compared})")
    logger.info(f"Compared {source_path} | mismatches={len(result.records)}")
    return result
