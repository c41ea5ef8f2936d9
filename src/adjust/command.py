from __future__ import annotations

import logging
import subprocess
from typing import Protocol

PLACEHOLDER = "%"
NULL_STDERR = " 2>/dev/null"


class CommandRunner(Protocol):
    def __call__(self, command: str) -> None: ...


def formatValue(value: float) -> str:
    """Render a value the way a default C++ ostream would.

    Six significant digits, trailing zeros trimmed and no forced decimal
    point, so 20.0 -> "20" and 0.1 + 0.2 -> "0.3".
    """
    return f"{value:g}"


def formatEcho(name: str, value: float) -> str:
    # fixed notation for the status line, \r so the next echo overwrites it
    return f"{name} : {value:f}\r"


def buildCommand(template: str, value: float, suffix: str = NULL_STDERR) -> str:
    """Substitute value for the first '%' in template and append suffix.

    A template without a '%' is passed through unchanged.
    """
    head, marker, tail = template.partition(PLACEHOLDER)
    if not marker:
        return template + suffix
    return head + formatValue(value) + tail + suffix


def runShell(command: str) -> None:
    # blocks until the command exits, status and output deliberately ignored
    logging.debug(f"runShell: {command!r}")
    subprocess.run(command, shell=True, check=False)
