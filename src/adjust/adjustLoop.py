from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from adjust.adjustment import AdjustmentSession, AdjustmentSpec
from adjust.command import NULL_STDERR, CommandRunner, buildCommand, runShell

ESC = 27

# Final bytes of the VT100 cursor key sequences ESC [ A..D
UP = ord("A")
DOWN = ord("B")
RIGHT = ord("C")
LEFT = ord("D")


@dataclass
class AdjustLoop:
    """Keystroke driven adjustment of one value.

    Every key other than quit or an escape prefix rebuilds the command,
    redraws the status line and runs the command, whether or not the value
    moved. An escape byte swallows exactly one following byte (normally the
    '[' of a CSI sequence) without looking at it.
    """
    spec: AdjustmentSpec
    readKey: Callable[[], int | None]
    runCommand: CommandRunner = runShell
    echo: Callable[[str, float], None] | None = None
    quitKey: str = "q"
    stderrSuffix: str = NULL_STDERR
    session: AdjustmentSession = field(init=False)

    def __post_init__(self) -> None:
        self.session = AdjustmentSession.fromSpec(self.spec)

    @property
    def value(self) -> float:
        return self.session.value

    def run(self) -> float:
        quitByte = ord(self.quitKey)
        self._apply()
        while (key := self.readKey()) is not None:
            if key == quitByte:
                break
            if key == ESC:
                self.readKey()  # XXX assumes '[', not checked
                continue
            if key == LEFT:
                self.session.decrement()
            elif key == RIGHT:
                self.session.increment()
            # UP, DOWN and anything else leave the value alone
            self._apply()
        return self.session.value

    def _apply(self) -> None:
        value = self.session.value
        command = buildCommand(self.spec.commandTemplate, value, self.stderrSuffix)
        if self.echo:
            self.echo(self.spec.name, value)
        self.runCommand(command)


def runLoop(
        spec: AdjustmentSpec,
        readKey: Callable[[], int | None],
        runCommand: CommandRunner = runShell,
        echo: Callable[[str, float], None] | None = None,
        quitKey: str = "q",
        stderrSuffix: str = NULL_STDERR) -> float:
    loop = AdjustLoop(spec, readKey, runCommand, echo, quitKey, stderrSuffix)
    value = loop.run()
    logging.info(f"adjustLoop: {spec.name} finished at {value:g}")
    return value
