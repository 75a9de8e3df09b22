"""
Scan run orchestration.

One run: list source files -> extract keys from each -> load every locale
dictionary -> reconcile -> write every dictionary (unless dry-run).

All locales are loaded and reconciled before the first write, so a corrupt
locale file aborts the run without touching any other locale file.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from i18n_scan.common.locale_store import LocaleFileStore
from i18n_scan.common.typed_config.models import ScanOptions
from i18n_scan.core.extractor import extract_keys
from i18n_scan.core.file_finder import find_source_files
from i18n_scan.core.reconciler import reconcile
from i18n_scan.core.source_reader import read_source_text

logger = logging.getLogger(__name__)

FileFinder = Callable[[ScanOptions], Sequence[str]]
SourceReader = Callable[[str], str]


@dataclass(frozen=True)
class ScanResult:
    """Summary of one scan run.

    Attributes:
        files_scanned: Number of files listed for scanning.
        keys_found: Number of unique keys across all files.
        added: Entries added across all locales.
        per_locale_counts: Entries added per locale.
    """

    files_scanned: int
    keys_found: int
    added: int
    per_locale_counts: dict[str, int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "files_scanned": self.files_scanned,
            "keys_found": self.keys_found,
            "added": self.added,
            "per_locale_counts": dict(self.per_locale_counts),
        }


def _default_finder(options: ScanOptions) -> list[str]:
    return find_source_files(options.src, ignore=options.ignore, root=options.root)


def _log_configuration(options: ScanOptions) -> None:
    logger.info("i18n-scan configuration:")
    logger.info("  src:         %s", ", ".join(options.src))
    logger.info("  localesDir:  %s", options.locales_dir)
    logger.info("  locales:     %s", ", ".join(options.locales))
    logger.info("  master:      %s", options.master)
    logger.info("  placeholder: %s", options.placeholder)
    logger.info("  dry-run:     %s\n", options.dry)


def collect_keys(
    files: Sequence[str],
    read: SourceReader = read_source_text,
    silent: bool = False,
) -> set[str]:
    """Union of the keys found in every readable file.

    Files that cannot be read are skipped with a warning (unless silent).
    """
    found: set[str] = set()
    for path in files:
        try:
            content = read(path)
        except OSError as e:
            if not silent:
                logger.warning("Warning: could not read %s (%s).", path, e)
            continue
        found |= extract_keys(content)
    return found


def run_scan(
    options: ScanOptions,
    *,
    finder: FileFinder = _default_finder,
    read: SourceReader = read_source_text,
    store: LocaleFileStore | None = None,
) -> ScanResult:
    """Find keys in source files and add missing entries to locale files.

    Existing entries are never overwritten.

    Args:
        options: Run options.
        finder: Lists the files to scan (default: glob resolution of
            options.src).
        read: Reads one file to text.
        store: Locale store (default: LocaleFileStore(options.locales_dir)).

    Returns:
        ScanResult summary.

    Raises:
        LocaleParseError: If an existing locale file is corrupt.
        LocaleWriteError: If a locale file cannot be written.
    """
    silent = options.silent
    store = store if store is not None else LocaleFileStore(options.locales_dir)

    if not silent:
        _log_configuration(options)

    files = list(finder(options))
    if not silent:
        logger.info("Scanning %d file(s)...", len(files))

    found_keys = collect_keys(files, read=read, silent=silent)
    if not silent:
        logger.info("Found %d unique key(s).", len(found_keys))

    existing = store.load_all(options.locales)
    result = reconcile(found_keys, options.locales, options.master, existing, options.placeholder)
    if not silent:
        logger.info("Added new entries (total across locales): %d", result.added_total)

    for loc in options.locales:
        data = result.updated[loc]
        path = store.path_for(loc)
        if not options.dry:
            store.save(loc, data)
        if not silent:
            logger.info("%swrote: %s (%d keys)", "[DRY] " if options.dry else "", path, len(data))

    return ScanResult(
        files_scanned=len(files),
        keys_found=len(found_keys),
        added=result.added_total,
        per_locale_counts=result.per_locale_added,
    )
