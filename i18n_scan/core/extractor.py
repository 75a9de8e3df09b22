"""
Translation key extraction from raw source text.

Recognized call shapes:
- ``__('key')`` / ``trans("key")`` with a ', " or ` quoted literal
- ``@lang('key')`` template directives with the same literal rule
- ``__(`key`)`` / ``trans(`key`)`` backtick literals without any ``$``

Only literal arguments are matched; dynamic expressions and multi-line
literals produce no key.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

# Each pattern exposes the literal content as the "key" group.
# A quoted literal is one or more of: any char except the delimiter or a
# backslash, or a backslash followed by any char. "Any char" and whitespace
# follow JavaScript regex rules: line terminators are \n, \r, U+2028 and
# U+2029, and whitespace includes U+FEFF but not \x1c-\x1f.
_WS = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"
_CHAR = r"[^\n\r\u2028\u2029]"
_LITERAL = r"(?P<q>['\"`])(?P<key>(?:(?!(?P=q)|\\)" + _CHAR + r"|\\" + _CHAR + r")+)(?P=q)"

CALL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:__|trans)\(" + _WS + _LITERAL + _WS + r"\)"),
    re.compile(r"@lang\(" + _WS + _LITERAL + _WS + r"\)"),
    re.compile(r"(?:__|trans)\(" + _WS + r"`(?P<key>[^`$]+)`" + _WS + r"\)"),
)


def unescape_key(raw: str) -> str:
    r"""Resolve \', \" and \\ inside a captured literal.

    The replacements are applied in that order, one pass each.

    Examples:
        >>> unescape_key(r"it\'s")
        "it's"
        >>> unescape_key(r'say \"hi\"')
        'say "hi"'
        >>> unescape_key(r"a\\b")
        'a\\b'
    """
    return raw.replace("\\'", "'").replace('\\"', '"').replace("\\\\", "\\")


def iter_key_matches(source: str) -> Iterator[tuple[int, str]]:
    """Yield (position, key) for every literal call match, pattern by pattern.

    Raw captures containing a newline are skipped. The same key may be
    yielded several times.
    """
    for pattern in CALL_PATTERNS:
        for m in pattern.finditer(source):
            raw = m.group("key")
            if raw and "\n" not in raw:
                yield m.start(), unescape_key(raw)


def extract_keys(source: str) -> set[str]:
    """Extract the set of translation keys referenced in source text."""
    return {key for _pos, key in iter_key_matches(source)}
