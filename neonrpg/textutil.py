"""Small text and number helpers used by the game's file loaders."""

from __future__ import annotations

import math
import string
from itertools import zip_longest
from pathlib import Path
from typing import Iterator

_PRINTABLE_LOW = 32
_PRINTABLE_HIGH = 126
_NUMERIC_CHARS = frozenset(string.digits + ".")
_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_LOWER = frozenset(string.ascii_lowercase)
_ASCII_UPPER = frozenset(string.ascii_uppercase)


def count_word(text: str, delimiter: str) -> int:
    """Count the fields of ``text`` separated by ``delimiter``.

    Leading delimiters are ignored, runs of delimiters count once, and a
    trailing delimiter opens one more (empty) field.
    """
    stripped = text.lstrip(delimiter)
    count = 1
    for current, following in zip_longest(stripped, stripped[1:]):
        if current == delimiter and following != delimiter:
            count += 1
    return count


def split_words(text: str, delimiter: str) -> list[str]:
    """Split ``text`` into words on ``delimiter`` and newlines.

    Runs of delimiters are collapsed; each newline ends the current word.
    """
    words: list[str] = []
    length = len(text)
    pos = 0
    while pos < length:
        while pos < length and text[pos] == delimiter:
            pos += 1
        end = pos
        while end < length and text[end] not in (delimiter, "\n"):
            end += 1
        words.append(text[pos:end])
        pos = end + 1
    return words


def split_lines(text: str) -> list[str]:
    """Split a script into its lines, keeping a final empty line if present."""
    return text.split("\n")


def is_numeric(text: str) -> bool:
    """True when every character is a decimal digit or a dot."""
    return all(ch in _NUMERIC_CHARS for ch in text)


def is_alpha(text: str) -> bool:
    """True when every character is an ASCII letter."""
    return all(ch in _ASCII_LETTERS for ch in text)


def is_lower(text: str) -> bool:
    """True when every character is an ASCII lower-case letter."""
    return all(ch in _ASCII_LOWER for ch in text)


def is_upper(text: str) -> bool:
    """True when every character is an ASCII upper-case letter."""
    return all(ch in _ASCII_UPPER for ch in text)


def is_printable(text: str) -> bool:
    """True when every character lies in the printable ASCII range."""
    return all(_PRINTABLE_LOW <= ord(ch) <= _PRINTABLE_HIGH for ch in text)


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def contains(text: str, pattern: str) -> bool:
    """True when ``pattern`` occurs in ``text``; an empty text matches nothing."""
    return bool(text) and pattern in text


def parse_digits(text: str) -> int:
    """Read ``text`` as an unsigned decimal number.

    Every character is taken as a digit by its offset from ``'0'``; no sign
    or separator is recognised.
    """
    value = 0
    for ch in text:
        value = value * 10 + (ord(ch) - ord("0"))
    return value


def is_prime(number: int) -> bool:
    """True when ``number`` is a prime."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


def next_prime(number: int) -> int:
    """Return the smallest prime strictly greater than ``number``."""
    candidate = number + 1
    while not is_prime(candidate):
        candidate += 1
    return candidate


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to ``exponent``; negative exponents give 0."""
    if exponent == 0:
        return 1
    if exponent < 0:
        return 0
    return base**exponent


def integer_sqrt(number: int) -> int:
    """Return the square root of a perfect square, or 0 for anything else."""
    if number < 0:
        return 0
    root = math.isqrt(number)
    return root if root * root == number else 0


def format_number(number: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    return f"{number:d}"


def _next_arg(values: Iterator[object]) -> object:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_char(value: object) -> str:
    if isinstance(value, int):
        return chr(value)
    if isinstance(value, str) and len(value) == 1:
        return value
    raise TypeError(f"%c needs an int or a single character, not {value!r}")


def format_message(template: str, *args: object) -> str:
    """Expand ``%c``, ``%s``, ``%d``, ``%i`` and ``%%`` in ``template``.

    Any other character after ``%`` is dropped together with the ``%``.
    """
    values = iter(args)
    chars = iter(template)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            out.append("%")
        elif spec == "c":
            out.append(_as_char(_next_arg(values)))
        elif spec == "s":
            out.append(str(_next_arg(values)))
        elif spec in ("d", "i"):
            out.append(format_number(int(_next_arg(values))))
    return "".join(out)


def read_file(path: str | Path) -> str:
    """Return the whole content of a regular file.

    Raises ``FileNotFoundError`` when it is missing and ``OSError`` when the
    path is not a regular file.
    """
    target = Path(path)
    if not target.exists():
        raise FileNotFoundError(f"no such file: {target}")
    if not target.is_file():
        raise OSError(f"not a regular file: {target}")
    with target.open(encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()