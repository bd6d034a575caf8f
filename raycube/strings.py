"""Small text helpers used by the scene file reader."""

from __future__ import annotations

__all__ = ["atoi", "split_any", "trim"]


def atoi(text: str | None) -> int:
    """Read a leading signed decimal integer from ``text``.

    An optional single ``+`` or ``-`` sign may come first, then digits are
    consumed until the first non-digit. Leading whitespace is not skipped,
    so text that does not start with a sign or a digit reads as ``0``.
    A missing value (``None``) reads as ``-1``.
    """
    if text is None:
        return -1
    sign = 1
    rest = text
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def split_any(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on every character found in ``delimiters``.

    Runs of delimiters count as one separator and empty pieces are dropped.
    """
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def trim(text: str | None, chars: str) -> str | None:
    """Remove every character of ``chars`` from both ends of ``text``.

    ``None`` passes through unchanged.
    """
    if text is None:
        return None
    if not chars:
        return text
    return text.strip(chars)