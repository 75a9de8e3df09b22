# i18n_scan/common/typed_config/models.py
#
# Frozen run options and the loose-value converters used to build them.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

PlaceholderMode = Literal["copy", "empty"]

PLACEHOLDER_MODES: tuple[str, ...] = ("copy", "empty")

DEFAULT_SRC: tuple[str, ...] = (
    "app/**/*.php",
    "resources/**/*.php",
    "resources/**/*.blade.php",
    "resources/**/*.{js,jsx,ts,tsx,vue}",
)
DEFAULT_LOCALES_DIR = "resources/lang"
DEFAULT_LOCALES: tuple[str, ...] = ("en", "de")
DEFAULT_MASTER = "en"
DEFAULT_PLACEHOLDER: PlaceholderMode = "copy"
DEFAULT_IGNORE: tuple[str, ...] = (
    "**/node_modules/**",
    "**/vendor/**",
    "**/dist/**",
    "**/build/**",
)

# Recognized bool strings
_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


# =============================================================================
# Helper Functions
# =============================================================================


def safe_bool(value: Any, default: bool = False) -> bool:
    """bool conversion. Unrecognized strings return default (typo guard).

    Args:
        value: Value to convert
        default: Value used for None or unrecognized input

    Returns:
        Converted bool
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        if not value:
            return default
        lower = value.strip().lower()
        if lower in _TRUE_STRINGS:
            return True
        if lower in _FALSE_STRINGS:
            return False
        return default
    return default


def safe_str(value: Any, default: str) -> str:
    """str conversion. None, empty and non-str values return default.

    Note:
        None is handled explicitly so that str(None) == "None" never leaks
        into the options.
    """
    if value is None:
        return default
    if not isinstance(value, str):
        return default
    if not value:
        return default
    return value


def safe_str_tuple(value: Any, default: tuple[str, ...]) -> tuple[str, ...]:
    """Comma-separated str or list/tuple -> Tuple[str, ...].

    Items are stripped and empty items dropped. A value that yields no items
    returns default.

    Examples:
        >>> safe_str_tuple("en, de", ())
        ('en', 'de')
        >>> safe_str_tuple(["a/**/*.php", " b "], ())
        ('a/**/*.php', 'b')
    """
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            return default
        items = list(value)
    else:
        return default
    result = tuple(item.strip() for item in items if item.strip())
    return result if result else default


def normalize_path(value: Any) -> str | None:
    """Path normalization. None, empty, whitespace-only and non-str -> None.

    Valid paths are returned unchanged (leading/trailing spaces are kept
    since they are filesystem dependent).
    """
    if value is None:
        return None
    if not isinstance(value, str):
        return None
    if not value.strip():
        return None
    return value


def _first_present(d: dict[str, Any], *names: str) -> Any:
    """Value of the first key in names that exists in d, else None."""
    for name in names:
        if name in d:
            return d[name]
    return None


# =============================================================================
# Dataclasses
# =============================================================================


@dataclass(frozen=True)
class ScanOptions:
    """Options for one scan run.

    Thread-safety: Immutable (frozen=True)

    Attributes:
        src: Globs of source files to scan.
        locales_dir: Directory holding <locale>.json files.
        locales: Locales to maintain.
        master: Locale that receives the key itself as value for new entries.
        placeholder: Value policy for new entries of non-master locales.
        dry: Compute everything but do not write files.
        silent: Suppress progress reporting.
        ignore: Globs excluded from the file listing.
        root: Base directory for relative source globs.
        strict: Treat a master locale missing from locales as an error.

    Note:
        Keys are read in snake_case, with the camelCase names of the
        command line flags (``localesDir``) accepted as a fallback.
    """

    src: tuple[str, ...] = DEFAULT_SRC
    locales_dir: str = DEFAULT_LOCALES_DIR
    locales: tuple[str, ...] = DEFAULT_LOCALES
    master: str = DEFAULT_MASTER
    placeholder: PlaceholderMode = DEFAULT_PLACEHOLDER
    dry: bool = False
    silent: bool = False
    ignore: tuple[str, ...] = DEFAULT_IGNORE
    root: str = "."
    strict: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "ScanOptions":
        """Build from a dict. Missing keys use defaults, bad types are converted safely.

        Args:
            d: Raw options (config file content merged with CLI overrides)

        Returns:
            ScanOptions instance
        """
        placeholder = safe_str(d.get("placeholder"), DEFAULT_PLACEHOLDER).strip().lower()
        if placeholder not in PLACEHOLDER_MODES:
            placeholder = DEFAULT_PLACEHOLDER

        return cls(
            src=safe_str_tuple(d.get("src"), DEFAULT_SRC),
            locales_dir=normalize_path(_first_present(d, "locales_dir", "localesDir"))
            or DEFAULT_LOCALES_DIR,
            locales=safe_str_tuple(d.get("locales"), DEFAULT_LOCALES),
            master=safe_str(d.get("master"), DEFAULT_MASTER).strip() or DEFAULT_MASTER,
            placeholder=placeholder,  # type: ignore[arg-type]
            dry=safe_bool(_first_present(d, "dry", "dry_run"), default=False),
            silent=safe_bool(d.get("silent"), default=False),
            ignore=_ignore_from(d.get("ignore")),
            root=normalize_path(d.get("root")) or ".",
            strict=safe_bool(d.get("strict"), default=False),
        )


def _ignore_from(value: Any) -> tuple[str, ...]:
    # An explicit empty list disables the default ignore patterns
    if isinstance(value, (list, tuple)) and not value:
        return ()
    return safe_str_tuple(value, DEFAULT_IGNORE)
