"""
Source file listing from glob patterns.

Supports brace alternatives (``*.{js,ts}``), recursive ``**`` and ignore
patterns. Hidden files and directories are only matched when the pattern
names them explicitly.
"""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Iterable
from fnmatch import fnmatchcase

logger = logging.getLogger(__name__)


def _find_brace_group(pattern: str) -> tuple[int, int, list[str]] | None:
    """Locate the first top-level {a,b,...} group that contains a comma.

    Returns:
        (start, end, alternatives) with end pointing past the closing brace,
        or None if the pattern has no expandable group.
    """
    depth = 0
    start = -1
    splits: list[int] = []
    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = i
                splits = []
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                if splits:
                    bounds = [start, *splits, i]
                    alternatives = [pattern[a + 1 : b] for a, b in zip(bounds, bounds[1:])]
                    return start, i + 1, alternatives
                start = -1
        elif ch == "," and depth == 1:
            splits.append(i)
    return None


def expand_braces(pattern: str) -> list[str]:
    """Expand brace alternatives in a glob pattern.

    Examples:
        >>> expand_braces("src/*.{js,ts}")
        ['src/*.js', 'src/*.ts']
        >>> expand_braces("{a,b{1,2}}/x")
        ['a/x', 'b1/x', 'b2/x']
        >>> expand_braces("plain/*.php")
        ['plain/*.php']
    """
    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]
    start, end, alternatives = group
    prefix, suffix = pattern[:start], pattern[end:]
    expanded: list[str] = []
    for alt in alternatives:
        expanded.extend(expand_braces(prefix + alt + suffix))
    return expanded


def is_ignored(path: str, ignore: Iterable[str]) -> bool:
    """Check a relative path against ignore globs.

    ``*`` in an ignore pattern may cross directory separators, and a leading
    ``**/`` also matches paths at the top level.
    """
    posix_path = path.replace(os.sep, "/")
    for pattern in ignore:
        for candidate in expand_braces(pattern):
            if fnmatchcase(posix_path, candidate):
                return True
            if candidate.startswith("**/") and fnmatchcase(posix_path, candidate[3:]):
                return True
    return False


def find_source_files(
    patterns: Iterable[str],
    ignore: Iterable[str] = (),
    root: str | os.PathLike[str] = ".",
) -> list[str]:
    """Resolve glob patterns to a list of regular files.

    Args:
        patterns: Glob patterns, relative to root unless absolute.
        ignore: Glob patterns of paths to leave out.
        root: Base directory for relative patterns.

    Returns:
        File paths (relative patterns give root-joined paths), each listed
        once, in first-seen order.
    """
    ignore = tuple(ignore)
    root_dir = os.fspath(root)
    seen: set[str] = set()
    files: list[str] = []

    for pattern in patterns:
        for expanded in expand_braces(pattern):
            if os.path.isabs(expanded):
                matches = sorted(glob.glob(expanded, recursive=True))
                base = None
            else:
                matches = sorted(glob.glob(expanded, root_dir=root_dir, recursive=True))
                base = root_dir
            for match in matches:
                rel = match if base is None else os.path.normpath(match)
                if is_ignored(rel, ignore):
                    continue
                full = rel if base is None else os.path.normpath(os.path.join(base, rel))
                if full in seen or not os.path.isfile(full):
                    continue
                seen.add(full)
                files.append(full)

    logger.debug("Resolved %d file(s) under %s", len(files), root_dir)
    return files
