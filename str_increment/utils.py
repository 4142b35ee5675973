"""Alphanumeric string increment and decrement.

Only ASCII ``0-9``, ``a-z`` and ``A-Z`` take part in carry/borrow
propagation. Every other character, including non-ASCII letters and
digits, is a carry-stopper: it is never changed and the scan does not
cross it.
"""
import enum
from typing import Dict, Tuple


class CharClass(enum.Enum):
    DIGIT = "digit"
    LOWER = "lower"
    UPPER = "upper"
    OTHER = "other"


# (first, last) of each incrementable class
_RANGES: Dict[CharClass, Tuple[str, str]] = {
    CharClass.DIGIT: ("0", "9"),
    CharClass.LOWER: ("a", "z"),
    CharClass.UPPER: ("A", "Z"),
}

# prepended on full overflow, keyed by the class of the leftmost character
_OVERFLOW_PREFIX: Dict[CharClass, str] = {
    CharClass.DIGIT: "1",
    CharClass.LOWER: "a",
    CharClass.UPPER: "A",
}


def classify(ch: str) -> CharClass:
    if "0" <= ch <= "9":
        return CharClass.DIGIT
    if "a" <= ch <= "z":
        return CharClass.LOWER
    if "A" <= ch <= "Z":
        return CharClass.UPPER
    return CharClass.OTHER


def is_incrementable(s: str) -> bool:
    """Return True when s is non-empty and made only of ASCII letters and digits."""
    return bool(s) and all(classify(ch) is not CharClass.OTHER for ch in s)


def increment(s: str) -> str:
    """Return the successor of s.

    The rightmost run of ASCII alphanumerics is incremented with carry
    ("az9" -> "ba0"). When the carry runs past the first character a new
    leading character is added ("999" -> "1000", "zz" -> "aaa"). Empty
    input and input ending in a non-alphanumeric character are returned
    unchanged.
    """
    chars = list(s)
    i = len(chars) - 1
    while i >= 0:
        cls = classify(chars[i])
        if cls is CharClass.OTHER:
            # carry is dropped at the boundary
            return "".join(chars)
        first, last = _RANGES[cls]
        if chars[i] != last:
            chars[i] = chr(ord(chars[i]) + 1)
            return "".join(chars)
        chars[i] = first
        i -= 1

    if not chars:
        return ""
    return _OVERFLOW_PREFIX[classify(s[0])] + "".join(chars)


def decrement(s: str) -> str:
    """Return the predecessor of s.

    Mirrors :func:`increment` with borrow instead of carry ("ba0" ->
    "az9"). A borrow past the first character drops that character
    ("aa" -> "z"), as does a leading "1" turning into "0" ("100" -> "99").
    A leading "0" already present is kept ("05" -> "04").
    Values with no predecessor ("a", "A", "0"), empty input and input
    ending in a non-alphanumeric character are returned unchanged.
    """
    chars = list(s)
    i = len(chars) - 1
    while i >= 0:
        cls = classify(chars[i])
        if cls is CharClass.OTHER:
            return "".join(chars)
        first, last = _RANGES[cls]
        if chars[i] != first:
            chars[i] = chr(ord(chars[i]) - 1)
            if i == 0 and chars[0] == "0" and len(chars) > 1:
                del chars[0]
            return "".join(chars)
        chars[i] = last
        i -= 1

    # full underflow
    if len(chars) <= 1:
        return s
    return "".join(chars[1:])


def _check_alphanumeric(s: str) -> None:
    if not s:
        raise ValueError("cannot increment or decrement an empty string")
    if not is_incrementable(s):
        raise ValueError(f"string must be composed only of ASCII alphanumeric characters: {s!r}")


def strict_increment(s: str) -> str:
    """Like :func:`increment`, but raise ValueError for empty or non-alphanumeric input."""
    _check_alphanumeric(s)
    return increment(s)


def strict_decrement(s: str) -> str:
    """Like :func:`decrement`, but raise ValueError where no predecessor exists.

    Raises ValueError for empty input, input containing anything other
    than ASCII letters and digits, and the out-of-range values "a", "A"
    and "0".
    """
    _check_alphanumeric(s)
    if s in ("a", "A", "0"):
        raise ValueError(f"{s!r} is out of decrement range")
    return decrement(s)
