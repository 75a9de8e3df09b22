"""
Validation logic for raw run options.

This module provides:
- ValidationIssue and ValidationResult dataclasses
- validate_options_dict(), run on the raw dict before ScanOptions.from_dict()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import DEFAULT_LOCALES, DEFAULT_MASTER, PLACEHOLDER_MODES, safe_bool, safe_str_tuple

# Keys understood by ScanOptions.from_dict() (including aliases)
KNOWN_KEYS: frozenset[str] = frozenset(
    {
        "src",
        "locales_dir",
        "localesDir",
        "locales",
        "master",
        "placeholder",
        "dry",
        "dry_run",
        "silent",
        "ignore",
        "root",
        "strict",
    }
)


# ---------------------------------------------------------------------------
# Validation Issues
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue (error or warning).

    Attributes:
        field: Option name where the issue occurred.
        message: Human-readable description of the issue.
        is_error: True for errors (run refused), False for warnings.
    """

    field: str
    message: str
    is_error: bool


@dataclass
class ValidationResult:
    """Result of validation with all issues found."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(not issue.is_error for issue in self.issues)

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if not issue.is_error)

    def format_report(self) -> str:
        """Format a human-readable report of validation issues."""
        lines = [f"Errors: {self.error_count}, Warnings: {self.warning_count}"]
        for issue in self.issues:
            level = "ERROR" if issue.is_error else "WARN"
            lines.append(f"[{level}] {issue.field}: {issue.message}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Dict Validation
# ---------------------------------------------------------------------------


def _error(field_name: str, message: str) -> ValidationIssue:
    return ValidationIssue(field=field_name, message=message, is_error=True)


def _warning(field_name: str, message: str) -> ValidationIssue:
    return ValidationIssue(field=field_name, message=message, is_error=False)


def _raw_list(value: Any) -> list[str] | None:
    """Items of a str/list option as given, or None if the type is wrong."""
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            return None
        return [item.strip() for item in value if item.strip()]
    return None


def validate_options_dict(data: Any, strict: bool = False) -> ValidationResult:
    """Validate raw options before they are turned into ScanOptions.

    Checks:
    - Options are a dict
    - src and locales, when given, are non-empty lists of strings
    - locales has no duplicates
    - master, when given, is a non-empty string
    - placeholder, when given, is "copy" or "empty"
    - master is one of locales (warning, error when strict)
    - Unknown keys (warning)

    Args:
        data: Raw options dict.
        strict: Force strict mode. The "strict" key in data also enables it.

    Returns:
        ValidationResult with all errors and warnings.
    """
    result = ValidationResult()

    if not isinstance(data, dict):
        result.issues.append(_error("(options)", f"Options must be a mapping, got {type(data).__name__}"))
        return result

    strict = strict or safe_bool(data.get("strict"), default=False)

    for key in data:
        if key not in KNOWN_KEYS:
            result.issues.append(_warning(str(key), "Unknown option, ignored"))

    for list_key in ("src", "locales"):
        if list_key not in data:
            continue
        items = _raw_list(data[list_key])
        if items is None:
            result.issues.append(
                _error(list_key, f"Expected a list of strings or a comma-separated string, got {type(data[list_key]).__name__}")
            )
        elif not items:
            result.issues.append(_error(list_key, "Must not be empty"))

    locales = safe_str_tuple(data.get("locales"), ()) if "locales" in data else None
    if locales:
        seen: set[str] = set()
        for loc in locales:
            if loc in seen:
                result.issues.append(_error("locales", f"Duplicate locale: '{loc}'"))
            seen.add(loc)

    master = data.get("master")
    if "master" in data and (not isinstance(master, str) or not master.strip()):
        result.issues.append(_error("master", "Must be a non-empty string"))
        master = None

    placeholder = data.get("placeholder")
    if "placeholder" in data:
        if not isinstance(placeholder, str) or placeholder.strip().lower() not in PLACEHOLDER_MODES:
            result.issues.append(
                _error("placeholder", f"Must be one of {', '.join(PLACEHOLDER_MODES)}, got {placeholder!r}")
            )

    # Compare effective values so that defaults take part in the check
    if master is not None or "master" not in data:
        effective_master = master.strip() if isinstance(master, str) else DEFAULT_MASTER
        effective_locales = locales if locales else DEFAULT_LOCALES
        if effective_master not in effective_locales:
            message = f"Master locale '{effective_master}' is not in locales ({', '.join(effective_locales)})"
            result.issues.append(_error("master", message) if strict else _warning("master", message))

    return result
