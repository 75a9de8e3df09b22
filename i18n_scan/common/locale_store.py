# i18n_scan/common/locale_store.py
"""JSON locale dictionary store.

One file per locale at ``<locales_dir>/<locale>.json``: a flat JSON object
mapping translation keys to strings, written with 2-space indentation,
keys sorted and a trailing newline.

Usage:
    from i18n_scan.common.locale_store import LocaleFileStore

    store = LocaleFileStore("resources/lang")
    data = store.load("de")
    data["greeting"] = "Hallo"
    store.save("de", data)
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from collections.abc import Mapping

from i18n_scan.common.errors import LocaleParseError, LocaleWriteError

LocaleDict = dict[str, str]


def _get_logger() -> logging.Logger:
    """Get module logger (lazy to avoid side effect at import time)."""
    return logging.getLogger(__name__)


def serialize_locale(data: Mapping[str, str]) -> str:
    """Serialize a locale dictionary: sorted keys, 2-space indent, trailing newline.

    Non-ASCII characters are written as-is.
    """
    ordered = {key: data[key] for key in sorted(data)}
    return json.dumps(ordered, indent=2, ensure_ascii=False) + "\n"


class LocaleFileStore:
    """Locale JSON files under a single directory.

    Loading is lenient about absent or empty files and strict about corrupt
    ones: a locale file that is not a JSON object raises LocaleParseError so
    that existing translations are never silently discarded.

    Args:
        locales_dir: Directory holding <locale>.json files
    """

    def __init__(self, locales_dir: str | os.PathLike[str]):
        self._locales_dir = os.fspath(locales_dir)

    @property
    def locales_dir(self) -> str:
        return self._locales_dir

    def path_for(self, locale: str) -> str:
        """Path of the JSON file for a locale."""
        return os.path.join(self._locales_dir, f"{locale}.json")

    def load(self, locale: str) -> LocaleDict:
        """Load a locale dictionary.

        Returns:
            The dictionary; empty if the file does not exist or is empty.

        Raises:
            LocaleParseError: If the file is not valid JSON or not an object.
                Also raised when an existing file cannot be read.
        """
        path = self.path_for(locale)
        if not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise LocaleParseError(f"Failed to read {path}: {e}", path=path) from e
        except UnicodeDecodeError as e:
            raise LocaleParseError(f"Failed to parse {path}: {e}", path=path) from e

        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise LocaleParseError(f"Failed to parse {path}: {e}", path=path) from e

        if not isinstance(data, dict):
            raise LocaleParseError(
                f"Failed to parse {path}: expected a JSON object, got {type(data).__name__}",
                path=path,
            )
        return data

    def load_all(self, locales: list[str] | tuple[str, ...]) -> dict[str, LocaleDict]:
        """Load every locale in order. The first corrupt file aborts the load."""
        return {locale: self.load(locale) for locale in locales}

    def save(self, locale: str, data: Mapping[str, str]) -> str:
        """Save a locale dictionary atomically.

        Uses temp file + os.replace so a crash during save never leaves a
        truncated locale file behind.

        Returns:
            Path of the written file.

        Raises:
            LocaleWriteError: If the directory cannot be created or the file
                cannot be written.
        """
        path = self.path_for(locale)
        save_dir = os.path.dirname(path) or "."
        content = serialize_locale(data)

        fd = None
        temp_path = None
        try:
            os.makedirs(save_dir, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(suffix=".tmp", dir=save_dir)
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                fd = None  # os.fdopen took ownership
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, path)
            temp_path = None  # Success, don't delete
        except OSError as e:
            raise LocaleWriteError(f"Failed to write {path}: {e}", path=path) from e
        finally:
            if fd is not None:
                os.close(fd)
            if temp_path is not None:
                with contextlib.suppress(OSError):
                    os.unlink(temp_path)

        _get_logger().debug("Saved %s (%d keys)", path, len(data))
        return path

    def __repr__(self) -> str:
        return f"LocaleFileStore({self._locales_dir!r})"
