import logging
import os

from text_compare.errors import DirectoryNotFoundError
from text_compare.models import FilePair

logger = logging.getLogger(__name__)


def _list_files(folder):
    """Names of the non-directory entries directly under folder, in listing order."""
    if not os.path.isdir(folder):
        raise DirectoryNotFoundError(folder)
    if not os.access(folder, os.R_OK | os.X_OK):
        raise DirectoryNotFoundError(folder, reason="directory not readable")
    try:
        names = os.listdir(folder)
    except OSError as e:
        raise DirectoryNotFoundError(folder, reason=f"cannot list directory ({e.strerror})") from e
    return [name for name in names if not os.path.isdir(os.path.join(folder, name))]


def match_files(src_dir, dest_dir):
    """
    Pair every file in src_dir with the first file in dest_dir whose name
    matches ignoring case. Subdirectories are ignored on both sides and
    source files without a counterpart are skipped.
    """
    src_files = _list_files(src_dir)
    dest_files = _list_files(dest_dir)

    pairs = []
    for src_name in src_files:
        for dest_name in dest_files:
            if src_name.lower() == dest_name.lower():
                logger.debug(f"Paired {src_name} <-> {dest_name}")
                pairs.append(FilePair(os.path.join(src_dir, src_name), os.path.join(dest_dir, dest_name)))
                break
        else:
            logger.debug(f"No counterpart for {src_name} in {dest_dir}")

    logger.info(f"Matched {len(pairs)} of {len(src_files)} source files")
    return pairs


def find_unmatched(src_dir, dest_dir):
    """Return (source_only, dest_only): file names present on one side only."""
    src_files = _list_files(src_dir)
    dest_files = _list_files(dest_dir)

    src_keys = {name.lower() for name in src_files}
    dest_keys = {name.lower() for name in dest_files}

    source_only = [name for name in src_files if name.lower() not in dest_keys]
    dest_only = [name for name in dest_files if name.lower() not in src_keys]
    return source_only, dest_only
