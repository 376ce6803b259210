# src/pr_reviewer/review/parser.py
import logging
import re
from unidiff import PatchSet
from pr_reviewer.models.review import FileDiff, UNKNOWN_FILENAME


logger = logging.getLogger(__name__)

DIFF_MARKER = "diff --git"

# Headers only count at the start of a line; hunk lines start with +, - or space
_SECTION_START = re.compile(rf"^(?={re.escape(DIFF_MARKER)})", re.MULTILINE)

# `diff --git a/old b/new`, optionally with git's quoted paths
_HEADER_PAIR = re.compile(r'^\s*"?a/(?P<old>.+?)"?\s+"?b/(?P<new>.+?)"?\s*$')
_SINGLE_PATH = re.compile(r'(?:^|\s)"?[ab]/(?P<path>[^\s"]+)')


def parse_diff(diff_text: str | None) -> list[FileDiff]:
    """Split a pull request's unified diff into per-file records, in header order."""
    if not diff_text or not diff_text.strip():
        return []

    files = []
    for section in _SECTION_START.split(diff_text):
        # Anything ahead of the first header is not part of a file section
        if not section.startswith(DIFF_MARKER):
            continue
        patch = section.strip()
        header = section.split("\n", 1)[0][len(DIFF_MARKER):]
        files.append(_build_file_diff(_extract_filename(header), patch))

    return files


def _extract_filename(header: str) -> str:
    """Destination (b/) path of a header line, else the first a/ or b/ path."""
    pair = _HEADER_PAIR.match(header)
    if pair:
        return pair.group("new")

    single = _SINGLE_PATH.search(header)
    if single:
        return single.group("path")

    return UNKNOWN_FILENAME


def _build_file_diff(filename: str, patch: str) -> FileDiff:
    try:
        patched_files = list(PatchSet(patch))
    except Exception as e:
        logger.debug(f"Could not compute diff stats for {filename}: {e}")
        patched_files = []

    return FileDiff(
        filename=filename,
        patch=patch,
        additions=sum(pf.added for pf in patched_files),
        deletions=sum(pf.removed for pf in patched_files),
        is_new=any(pf.is_added_file for pf in patched_files),
        is_deleted=any(pf.is_removed_file for pf in patched_files),
    )
