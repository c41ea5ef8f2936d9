from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator

from adjust.adjustment import AdjustmentSpec

# Characters a command template may contain
TEMPLATE_RE = re.compile(r"[-a-zA-Z0-9%/ _><]+")

# name low high step initial [template on the same line]
HEADER_RE = re.compile(r"\s*(\S+)\s+(\S+)\s+(\S+)\s+(\S+)\s+(\S+)(?:\s+(\S.*))?\s*")

# decimal strtod syntax with optional exponent, inf, infinity or nan (no hex)
FLOAT_RE = re.compile(r"[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf(?:inity)?|nan)", re.IGNORECASE)


def parseFloat(text: str) -> float | None:
    if FLOAT_RE.fullmatch(text) is None:
        return None
    return float(text)


def parseHeader(line: str) -> tuple[str, tuple[float, float, float, float], str | None] | None:
    m = HEADER_RE.fullmatch(line)
    if m is None:
        return None
    low, high, step, initial = (parseFloat(f) for f in m.group(2, 3, 4, 5))
    if low is None or high is None or step is None or initial is None:
        return None
    return m.group(1), (low, high, step, initial), m.group(6)


def parseTemplate(line: str) -> str | None:
    template = line.lstrip()
    if TEMPLATE_RE.fullmatch(template) is None:
        return None
    return template


def iterAdjustments(lines: Iterable[str]) -> Iterator[AdjustmentSpec]:
    """Yield each well formed record, silently skipping malformed ones.

    A record is a header line "name low high step initial" followed by a
    template line. Text trailing the five header fields is taken as the
    template, making that record a single line. Blank lines are ignored.
    """
    numbered = enumerate((ln.rstrip("\r\n") for ln in lines), 1)
    for lineNo, line in numbered:
        if not line.strip():
            continue
        header = parseHeader(line)
        if header is None:
            logging.debug(f"adjustments: skipping bad header at line {lineNo}: {line!r}")
            continue
        name, (low, high, step, initial), inline = header

        if inline is None:
            # template is the next non-blank line
            nextLine = next(((n, t) for n, t in numbered if t.strip()), None)
            if nextLine is None:
                logging.debug(f"adjustments: {name} has no command template")
                return
            lineNo, inline = nextLine
        template = parseTemplate(inline)
        if template is None:
            logging.debug(f"adjustments: skipping {name}, bad template at line {lineNo}: {inline!r}")
            continue
        yield AdjustmentSpec(name, low, high, step, initial, template)


def readLines(path: str) -> list[str] | None:
    try:
        with open(os.path.expanduser(path), encoding="utf-8", errors="replace") as f:
            return f.readlines()
    except OSError as e:
        logging.debug(f"adjustments: cannot read {path}: {e}")
        return None


def findAdjustment(name: str, path: str) -> AdjustmentSpec | None:
    # first record with an exactly matching name, None if there is none
    lines = readLines(path)
    if lines is None:
        logging.debug(f"adjustments: no readable adjustments file at {path}")
        return None
    for spec in iterAdjustments(lines):
        if spec.name == name:
            logging.info(f"adjustments: found {spec}")
            return spec
    return None


def listAdjustments(path: str) -> list[str]:
    lines = readLines(path)
    if lines is None:
        return []
    return [spec.name for spec in iterAdjustments(lines)]
