import logging
import os

from text_compare.comparator import compare_files
from text_compare.errors import FileAccessError
from text_compare.export import build_summary_frame, export_summary, write_html_diff
from text_compare.matcher import find_unmatched, match_files
from text_compare.patcher import patch_line
from text_compare.report import write_report, write_unmatched

logger = logging.getLogger(__name__)


def compare_folders(src_dir, dest_dir, report_file, encoding="utf-8",
                    report_unmatched=False, continue_on_error=False,
                    summary_file=None, html_dir=None):
    """
    Compare every file of src_dir with its same-named file in dest_dir and
    append one block per pair to report_file.

    The first unreadable pair stops the run unless continue_on_error is set.
    Returns [(file_name, ComparisonResult), ...] in comparison order.
    """
    pairs = match_files(src_dir, dest_dir)
    results = []

    try:
        os.makedirs(os.path.dirname(report_file) or ".", exist_ok=True)
        sink = open(report_file, "w", encoding="utf-8")
    except OSError as e:
        raise FileAccessError(report_file, e.strerror or str(e)) from e

    with sink:
        for pair in pairs:
            file_name = os.path.basename(pair.source_path)
            logger.info(f"Comparing the file : {file_name}")
            try:
                result = compare_files(pair.source_path, pair.dest_path, encoding=encoding)
            except FileAccessError as e:
                logger.error(f"Failed on {file_name}: {e}")
                if not continue_on_error:
                    raise
                continue

            write_report(sink, file_name, result)
            results.append((file_name, result))

            if html_dir:
                try:
                    write_html_diff(pair, html_dir, encoding=encoding)
                except FileAccessError as e:
                    logger.error(f"HTML report failed for {file_name}: {e}")
                    if not continue_on_error:
                        raise

        if report_unmatched:
            source_only, dest_only = find_unmatched(src_dir, dest_dir)
            for name in source_only:
                logger.warning(f"Only in source: {name}")
            for name in dest_only:
                logger.warning(f"Only in destination: {name}")
            write_unmatched(sink, source_only, dest_only)

    logger.info(f"Report saved to {report_file}")

    if summary_file:
        export_summary(build_summary_frame(results), summary_file)

    return results


def patch_file(file_path, search, replacement, encoding="utf-8"):
    try:
        return patch_line(file_path, search, replacement, encoding=encoding)
    except FileAccessError:
        logger.exception(f"Patch failed for {file_path}")
        raise
