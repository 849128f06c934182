"""Helpers for telling prompt file paths apart from inline prompt text."""
from __future__ import annotations

import glob
import os
import re
from typing import List, Optional, Tuple

FILE_SCHEME = "file://"

# Prefixes that look like paths but address remote prompt stores or URLs
NON_FILE_SCHEMES = ("portkey://", "langfuse://", "http://", "https://")

_EXTENSION_RE = re.compile(r"\.[^.\s/\\]{2,4}$")


def maybe_filepath(text: str) -> bool:
    """Guess whether `text` names a file (or glob) rather than being a prompt.

    Multi-line strings and known remote schemes are never paths. Wildcards, or a
    trailing 2-4 character extension on the last path segment, mark a path.
    """
    if "\n" in text:
        return False
    if any(scheme in text for scheme in NON_FILE_SCHEMES):
        return False
    if "*" in text or "?" in text:
        return True
    return bool(_EXTENSION_RE.search(text))


def strip_file_scheme(path: str) -> Tuple[str, bool]:
    """Return `path` without a leading ``file://`` and whether one was present."""
    if path.startswith(FILE_SCHEME):
        return path[len(FILE_SCHEME):], True
    return path, False


def split_function_name(path: str) -> Tuple[str, Optional[str]]:
    """Split ``dir/prompts.py:render`` into the file path and ``render``.

    Only the final path segment is inspected so Windows drive letters survive.
    """
    head, base = os.path.split(path)
    if ":" not in base:
        return path, None
    filename, function_name = base.split(":", 1)
    return os.path.join(head, filename), function_name or None


def resolve_path(base_path: str, path: str) -> str:
    return os.path.abspath(os.path.join(base_path or os.getcwd(), os.path.expanduser(path)))


def expand_glob(resolved: str) -> List[str]:
    """Expand `resolved` if it is a glob pattern; otherwise return it unchanged.

    A pattern with no matches is returned as-is so the caller can apply its
    missing-file handling.
    """
    if not glob.has_magic(resolved):
        return [resolved]
    matches = sorted(glob.glob(resolved))
    return matches or [resolved]
