"""
Additive merge of discovered keys into per-locale dictionaries.

Existing entries are never modified or removed. A key missing from a
locale's dictionary is added with:
- the key itself, for the master locale
- the key itself, for other locales in "copy" placeholder mode
- an empty string, for other locales in "empty" placeholder mode
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of one reconciliation.

    Attributes:
        updated: Dictionary per configured locale (fresh copies, including
            locales with no additions).
        added_total: Entries added across all locales.
        per_locale_added: Entries added per configured locale.
    """

    updated: dict[str, dict[str, str]]
    added_total: int
    per_locale_added: dict[str, int]


def placeholder_value(key: str, locale: str, master: str, placeholder: str) -> str:
    """Value assigned to a key newly added to a locale dictionary."""
    if locale == master:
        return key
    return key if placeholder == "copy" else ""


def reconcile(
    discovered_keys: Iterable[str],
    locales: Sequence[str],
    master: str,
    existing: Mapping[str, Mapping[str, str]],
    placeholder: str = "copy",
) -> ReconcileResult:
    """Add missing keys to every configured locale.

    The master locale is not required to be one of locales; when it is not,
    no dictionary receives the master value policy.

    Args:
        discovered_keys: Keys found in the sources.
        locales: Locales to maintain.
        master: Master locale.
        existing: Current dictionaries by locale; absent locales start empty.
            Never mutated.
        placeholder: "copy" or "empty".

    Returns:
        ReconcileResult with a dictionary for every locale in locales.
    """
    updated: dict[str, dict[str, str]] = {loc: dict(existing.get(loc, {})) for loc in locales}
    per_locale_added: dict[str, int] = {loc: 0 for loc in locales}
    added_total = 0

    # Sorted so insertion order does not depend on discovery order
    for key in sorted(set(discovered_keys)):
        for loc in locales:
            entries = updated[loc]
            if key in entries:
                continue
            entries[key] = placeholder_value(key, loc, master, placeholder)
            per_locale_added[loc] += 1
            added_total += 1

    return ReconcileResult(updated=updated, added_total=added_total, per_locale_added=per_locale_added)
