"""String helpers: searching, slicing, joining, trimming and splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _check_char(sep)
    return [piece for piece in s.split(sep) if piece]


def strchr(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string, so its
    index is ``len(s)``. Returns None when ``c`` does not occur.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``; NUL gives ``len(s)``; None if absent."""
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def striteri(
    chars: MutableSequence[str], f: Callable[[int, str], str | None]
) -> None:
    """Call ``f(index, char)`` for each character, in place.

    When ``f`` returns a string, it replaces the character at that index;
    when it returns None, the character is left as it is.
    """
    if chars is None or f is None:
        return
    for index, char in enumerate(chars):
        replacement = f(index, char)
        if replacement is not None:
            chars[index] = replacement


def strjoin(a: str | None, b: str | None) -> str:
    """Concatenate two strings; a missing string counts as empty."""
    return (a or "") + (b or "")


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full result would
    have had. When ``size`` is no larger than ``dst``, nothing is appended
    and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most ``size - 1`` characters of ``src``.

    Returns the copied text and ``len(src)``. A size of zero copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    A missing string gives an empty one; a missing function gives a copy.
    """
    if s is None:
        return ""
    if f is None:
        return s
    return "".join(f(index, char) for index, char in enumerate(s))


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when equal, otherwise the difference of the character
    codes at the first mismatch; the end of a string counts as code zero.
    """
    index = 0
    while index < n and index < len(a) and index < len(b):
        if a[index] != b[index]:
            return ord(a[index]) - ord(b[index])
        index += 1
    if index < n:
        return _code_at(a, index) - _code_at(b, index)
    return 0


def strnstr(big: str, little: str, n: int) -> int | None:
    """Index of ``little`` in the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when there is
    no match that ends within the first ``n`` characters.
    """
    if not little:
        return 0
    for index in range(min(len(big), max(n, 0))):
        remaining = n - index
        if len(little) > remaining:
            return None
        if big.startswith(little, index):
            return index
    return None


def strtrim(s: str | None, charset: str | None) -> str | None:
    """Remove every character in ``charset`` from both ends of ``s``.

    Returns None when either argument is missing.
    """
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str | None, start: int, length: int) -> str | None:
    """At most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty string; a missing string
    gives None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start : start + length]