"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from solong.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: TextIO | None = None) -> None:
    """Write the single character ``c`` to ``stream`` (stdout by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` to ``stream`` (stdout by default)."""
    _target(stream).write(s)


def putendl(s: str, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline."""
    out = _target(stream)
    out.write(s)
    out.write("\n")


def putnbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of the signed 32-bit integer ``n``."""
    _target(stream).write(itoa(n))