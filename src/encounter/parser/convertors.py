"""
Lenient conversions of extracted text to numeric types.

Source markup is noisy ("1 000,50 руб.", "39 999", "—"), so these functions
never raise: anything that does not look like a number becomes zero.
"""
import re

from src.encounter.parser.descriptors import Coercion, CoercionKind, Custom

NON_FLOAT_CHARS = re.compile(r"[^0-9.]")
NON_INT_CHARS = re.compile(r"[^0-9]")
FLOAT_PREFIX = re.compile(r"\d+(?:\.\d*)?|\.\d+")
INT_CHUNK = 4000


def to_float(raw: str) -> float:
    """Normalize comma decimal separators, drop noise and parse the leading number."""
    cleaned = NON_FLOAT_CHARS.sub("", raw.replace(",", "."))
    match = FLOAT_PREFIX.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group())


def digits_to_int(digits: str) -> int:
    """Parse an ASCII digit string of any length; the empty string is 0."""
    value = 0
    for start in range(0, len(digits), INT_CHUNK):
        chunk = digits[start:start + INT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def to_int(raw: str) -> int:
    return digits_to_int(NON_INT_CHARS.sub("", raw))


def coerce(kind: Coercion, raw: str):
    """Apply the coercion named by a field descriptor to raw text."""
    if isinstance(kind, Custom):
        return kind.fn(raw)
    if kind is CoercionKind.FLOAT:
        return to_float(raw)
    if kind is CoercionKind.INT:
        return to_int(raw)
    if kind is CoercionKind.NONE:
        return raw
    raise ValueError(f"Unknown coercion kind: {kind!r}")
