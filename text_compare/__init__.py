from text_compare.errors import (
    TextCompareError,
    DirectoryNotFoundError,
    FileAccessError,
    ConfigError,
    TransportError,
)
from text_compare.models import FilePair, MismatchRecord, ComparisonResult
from text_compare.matcher import match_files, find_unmatched
from text_compare.comparator import compare_streams, compare_files
from text_compare.report import write_report, write_unmatched
from text_compare.patcher import patch_line

__version__ = "1.0.0"
