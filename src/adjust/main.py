#!/usr/bin/env python3

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from adjust.adjustLoop import runLoop
from adjust.adjustments import findAdjustment, listAdjustments
from adjust.settings import Settings, loadSettings
from adjust.terminal import cbreakStdin, echoTo, fdKeyReader

USAGE = """
    adjust - dynamic adjustment for system parameters

Command line utility for adjusting system parameters such as
brightness, gamma etc. from the terminal.

usage: adjust <attribute>
       left/right cursor keys to decrement/increment
       q to quit

A configuration entry provides a value range, a step value and an initial
value. The left / right cursor keys move the value within the range. After
each key the configured command is run with '%' replaced by the value.

There is very little error checking: unknown attributes and malformed
entries are silently ignored and command failures are not reported.

Attributes are configured in the adjustments file (~/.adjustments by
default), two lines per attribute:

    <name> <low> <high> <step> <initial>
    <command, with % for the value>

Example:

    gamma 0.1 0.9 0.1 0.5
    xgamma -gamma %
    brightness 15 95 5 20
    echo % > /sys/class/backlight/nvidia_0/brightness

Command characters are limited to letters, digits, space and -%/_<>

Writing to /sys or /dev usually requires running as root.
"""


def printUsage(settings: Settings, out: TextIO) -> None:
    out.write(USAGE)
    names = listAdjustments(settings.adjustmentsPath)
    if names:
        out.write(f"\nAvailable in {settings.adjustmentsPath}: {' '.join(names)}\n")
    out.write("\n")


def usageSettings() -> Settings:
    # a broken settings file must not hide the usage text
    try:
        return loadSettings()
    except RuntimeError as e:
        logging.debug(f"main: ignoring settings for usage: {e}")
        return Settings()


def setupLogging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.logLevel,
        filename=settings.logFile,
        format="%(asctime)s %(levelname)s %(message)s")


def run(attribute: str, settings: Settings) -> float | None:
    with cbreakStdin():
        spec = findAdjustment(attribute, settings.adjustmentsPath)
        if spec is None:
            logging.info(f"main: no adjustment named {attribute!r}")
            return None
        try:
            return runLoop(
                spec,
                fdKeyReader(sys.stdin.fileno()),
                echo=echoTo(sys.stdout),
                quitKey=settings.quitKey,
                stderrSuffix=settings.stderrSuffix)
        except KeyboardInterrupt:
            return None


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printUsage(usageSettings(), sys.stdout)
        return 1
    settings = loadSettings()
    setupLogging(settings)
    run(args[0], settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
