"""Coloured terminal output and colouring of actual output against expected output."""

from __future__ import annotations

import enum
import sys
from typing import List, Optional, TextIO

BORDER_CHAR = "~"

_ESC = "\033"
_NUL = "\0"
_HIGHLIGHTED = frozenset("/\\_-")


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


_WAS_ORIGINALLY_TTY = _stdout_is_tty()


class Enable(enum.Enum):
    """When bold output is applied."""

    DISABLE = 0
    ENABLE = 1
    TTY = 2
    COUT = 3


def _is_enabled(out: TextIO, enable: Enable) -> bool:
    return (
        enable is Enable.ENABLE
        or (enable is Enable.TTY and _WAS_ORIGINALLY_TTY)
        or (enable is Enable.COUT and _WAS_ORIGINALLY_TTY and out is sys.stdout)
    )


def output_red(text: object) -> str:
    """Return text wrapped in red."""
    return f"\033[31m{text}\033[39m"


def output_green(text: object) -> str:
    """Return text wrapped in green."""
    return f"\033[32m{text}\033[39m"


def output_notfound(text: object) -> str:
    """Return text wrapped in red and underlined, marking expected output that is missing."""
    return f"\033[31;4m{text}\033[39;24m"


def output_bold(text: object, out: Optional[TextIO] = None, enable: Enable = Enable.COUT) -> None:
    """Write text to out (standard output by default), in bold when enabled."""
    stream = out if out is not None else sys.stdout
    if _is_enabled(stream, enable):
        stream.write(f"\033[1m{text}\033[22m")
    else:
        stream.write(str(text))


def output_bold_digits(text: str, out: Optional[TextIO] = None, enable: Enable = Enable.COUT) -> None:
    """Write text to out with every digit and '-' in bold when enabled."""
    stream = out if out is not None else sys.stdout
    if not _is_enabled(stream, enable):
        stream.write(text)
        return
    stream.write(
        "".join(f"\033[1m{char}\033[22m" if char.isdigit() or char == "-" else char for char in text)
    )


class _ActualReader:
    """Reads characters of actual output, passing escape sequences straight to the result."""

    def __init__(self, text: str, result: List[str]) -> None:
        self._text = text
        self._pos = 0
        self._result = result

    def _read(self) -> str:
        if self._pos >= len(self._text):
            return _NUL
        char = self._text[self._pos]
        self._pos += 1
        return char

    def _emit_opcode(self) -> None:
        opcode = [_ESC]
        while self._pos < len(self._text):
            char = self._text[self._pos]
            self._pos += 1
            if char in ("m", _NUL):
                break
            opcode.append(char)
        opcode.append("m")
        self._result.append("".join(opcode))

    def next_char(self) -> str:
        """Return the next plain character, or NUL at the end."""
        char = self._read()
        while char == _ESC:
            self._emit_opcode()
            char = self._read()
        return char


def colorize_against(actual: str, expected: str) -> str:
    """Return actual output coloured by how it compares with expected output.

    Matching digits and tree branches are green, wrong characters red and
    expected characters that never appeared red and underlined. The two
    texts are realigned on '~' and on line ends.
    """
    result: List[str] = []
    reader = _ActualReader(actual, result)
    emit = result.append
    size = len(expected)
    i = 0
    c = _NUL

    while i < size:
        c = reader.next_char()
        if c == _NUL:
            break
        e = expected[i]
        i += 1

        for align in (BORDER_CHAR, "\n"):
            while c != e and (c == align or e == align):
                if c == align and e != c and i < size:
                    emit(e if e in ("\n", " ") else output_notfound(e))
                    e = expected[i]
                    i += 1
                elif c == _NUL:
                    break
                if e == align and c != e and c != _NUL:
                    emit(output_red(c))
                    c = reader.next_char()
                elif i >= size:
                    break

        if c == _NUL:
            break

        if e.isdigit() or e in _HIGHLIGHTED:
            emit(output_green(c) if c == e else output_red(c))
        else:
            emit(c if c == e else output_red(c))
    else:
        # Expected output is used up: whatever actual output remains is wrong.
        c = reader.next_char() if c != _NUL or not actual else _NUL

    while c != _NUL:
        emit(output_red(c))
        c = reader.next_char()

    while i < size:
        e = expected[i]
        i += 1
        emit(e if e == "\n" else output_notfound(e))

    return "".join(result)