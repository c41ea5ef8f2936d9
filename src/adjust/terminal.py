from __future__ import annotations

import os
import shutil
import sys
import termios
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import BinaryIO, TextIO

from adjust.command import formatEcho


def clearLine(out: TextIO) -> None:
    cols = shutil.get_terminal_size().columns
    out.write(" " * cols + "\r")
    out.flush()


@contextmanager
def cbreakStdin(stdin: TextIO | None = None, out: TextIO | None = None) -> Iterator[None]:
    """Deliver keys unbuffered and unechoed for the life of the block.

    Does nothing when stdin is not a terminal, so piped input still works.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    if not stdin.isatty():
        yield
        return
    fd = stdin.fileno()
    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ECHO | termios.ICANON)
    termios.tcsetattr(fd, termios.TCSADRAIN, new)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
        clearLine(out)  # keep shell prompt tidy


def fdKeyReader(fd: int) -> Callable[[], int | None]:
    # one byte per read, None once the input is exhausted
    def readKey() -> int | None:
        ch = os.read(fd, 1)
        return ch[0] if ch else None
    return readKey


def streamKeyReader(stream: BinaryIO) -> Callable[[], int | None]:
    def readKey() -> int | None:
        ch = stream.read(1)
        return ch[0] if ch else None
    return readKey


def echoTo(out: TextIO) -> Callable[[str, float], None]:
    def echo(name: str, value: float) -> None:
        out.write(formatEcho(name, value))
        out.flush()
    return echo
