"""Semantic-version bumps with permissive, never-raising component parsing."""

from __future__ import annotations

import re

RELEASE_TYPES = ("major", "minor", "patch")

_NAN = "NaN"

_DECIMAL = re.compile(r"[+-]?[0-9]+(?:[eE][+-]?[0-9]+)?")
_RADIX_LITERALS = (
    (re.compile(r"0[xX]([0-9a-fA-F]+)"), 16),
    (re.compile(r"0[bB]([01]+)"), 2),
    (re.compile(r"0[oO]([0-7]+)"), 8),
)
_INFINITY = re.compile(r"[+-]?Infinity")

Number = int | float | None


def _to_number(text: str) -> Number:
    # None stands for not-a-number; it survives arithmetic and renders as "NaN".
    s = text.strip()
    if not s:
        return 0
    if _INFINITY.fullmatch(s):
        return float("-inf") if s.startswith("-") else float("inf")
    for pattern, base in _RADIX_LITERALS:
        m = pattern.fullmatch(s)
        if m:
            return int(m.group(1), base)
    if not _DECIMAL.fullmatch(s):
        return None
    if "e" not in s.lower():
        return int(s)
    value = float(s)
    if value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def _segment_number(segments: list[str], index: int) -> Number:
    if index >= len(segments):
        return None
    return _to_number(segments[index])


def _bump(value: Number) -> Number:
    return None if value is None else value + 1


def _render_number(value: Number) -> str:
    if value is None:
        return _NAN
    if isinstance(value, int):
        return str(value)
    if value == float("inf"):
        return "Infinity"
    if value == float("-inf"):
        return "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e")
        exp = int(exponent)
        text = f"{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp)}"
    return text


def _render(*parts: Number) -> str:
    return ".".join(_render_number(p) for p in parts)


def calculate_next_version(current_version: str, release_type: str) -> str:
    """Return the version that follows ``current_version`` for ``release_type``.

    Malformed versions are not rejected: unreadable or missing components come
    back as ``NaN``. Unknown release types return ``current_version`` as is.
    """

    segments = str(current_version).split(".")
    major = _segment_number(segments, 0)
    minor = _segment_number(segments, 1)
    patch = _segment_number(segments, 2)

    if release_type == "major":
        return _render(_bump(major), 0, 0)
    if release_type == "minor":
        return _render(major, _bump(minor), 0)
    if release_type == "patch":
        return _render(major, minor, _bump(patch))
    return current_version
