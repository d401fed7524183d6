"""Specifier parsing utilities for .NET SDK version requests.

Range validity follows the npm (node-semver) range grammar: comparators
joined by whitespace, sets joined by ``||``, hyphen ranges, ``~``/``^``
shorthands and x-ranges. Exact versions must be strict semver, with an
optional leading ``v``.
"""

import re
from typing import Optional, Tuple

import semantic_version

_NUMERIC_TAG = re.compile(r'^\d+$')

_NUMERIC_ID = r'(?:0|[1-9]\d*)'
_XRANGE_ID = rf'(?:{_NUMERIC_ID}|x|X|\*)'
_PRERELEASE_ID = r'(?:0|[1-9]\d*|\d*[a-zA-Z-][a-zA-Z0-9-]*)'
_BUILD_ID = r'[0-9A-Za-z-]+'
_XRANGE_PLAIN = (
    rf'[v=\s]*{_XRANGE_ID}(?:\.{_XRANGE_ID}(?:\.{_XRANGE_ID}'
    rf'(?:-{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*)?'
    rf'(?:\+{_BUILD_ID}(?:\.{_BUILD_ID})*)?)?)?'
)
_HYPHEN_RANGE = re.compile(rf'\s*{_XRANGE_PLAIN}\s+-\s+{_XRANGE_PLAIN}\s*')
_COMPARATOR = re.compile(rf'(?:~>?|\^|[<>]?=?){_XRANGE_PLAIN}')
# "> 1.2", "~ 1.2" and "^ 1.2" are single comparators
_OPERATOR_GAP = re.compile(r'(~>?|\^|[<>]=?|=)\s+')
_SET_SEPARATOR = re.compile(r'\s*\|\|\s*')


def normalize_specifier(raw: Optional[str]) -> str:
    """Trim surrounding whitespace; None becomes the empty specifier."""
    return (raw or '').strip()


def is_valid_range(spec: str) -> bool:
    """Return True when spec parses as an npm-style semantic version range.

    Prerelease and build tags are allowed on partial versions (``6.0.x-pre``)
    but must not be empty (``1.2.3-`` is rejected).
    """
    for range_set in _SET_SEPARATOR.split(spec.strip()):
        if _HYPHEN_RANGE.fullmatch(range_set):
            continue
        comparators = _OPERATOR_GAP.sub(r'\1', range_set).split()
        if not all(_COMPARATOR.fullmatch(c) for c in comparators):
            return False
    return True


def is_exact_version(spec: str) -> bool:
    """Return True for a full A.B.C version, optionally prefixed with v."""
    candidate = spec[1:] if spec[:1] == 'v' else spec
    try:
        semantic_version.Version(candidate)
    except ValueError:
        return False
    return True


def is_numeric_tag(tag: Optional[str]) -> bool:
    """Return True when tag consists of decimal digits only."""
    return bool(tag) and bool(_NUMERIC_TAG.match(tag))


def split_channel(spec: str) -> Tuple[str, Optional[str]]:
    """Return (major, minor) tags of a channel-shaped specifier.

    Components after the minor one are ignored; minor is None when absent.
    """
    parts = spec.split('.')
    major = parts[0]
    minor = parts[1] if len(parts) > 1 else None
    return major, minor
