# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Record formats.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .formatter import Formatter
from .style import Style

LVL_TRACE = 5
logging.addLevelName(LVL_TRACE, "TRACE")

RecordFormat = Callable[[Formatter, logging.LogRecord], None]
"Function that writes a log record into a formatter."

LEVEL_COLORS = {
    LVL_TRACE: "white",
    logging.DEBUG: "blue",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


def level_style(buf: Formatter, level: int) -> Style:
    """
    Get the style for a level label.  Levels between the standard ones take
    the color of the next lower standard level.
    """
    style = buf.style()
    color = None
    for lvl in sorted(LEVEL_COLORS):
        if lvl <= level:
            color = LEVEL_COLORS[lvl]
    if color is not None:
        style.set_color(color)
    if level >= logging.ERROR:
        style.set_bold(True)
    return style


class DefaultFormat:
    """
    The default record format::

        2018-02-13T23:08:04Z INFO  my.logger: message

    Args:
        timestamp:
            Whether to write the record timestamp.
        target:
            Whether to write the logger name.
    """

    timestamp: bool
    target: bool

    def __init__(self, *, timestamp: bool = True, target: bool = True):
        self.timestamp = timestamp
        self.target = target
        self._exc_formatter = logging.Formatter()

    def __call__(self, buf: Formatter, record: logging.LogRecord) -> None:
        if self.timestamp:
            buf.write(f"{buf.timestamp()} ")

        lstyle = level_style(buf, record.levelno)
        buf.write(f"{lstyle.value(record.levelname):<5} ")

        if self.target:
            buf.write(f"{record.name}: ")

        buf.writeln(record.getMessage())

        if record.exc_info:
            buf.writeln(self._exc_formatter.formatException(record.exc_info))
        if record.stack_info:
            buf.writeln(self._exc_formatter.formatStack(record.stack_info))

    def __repr__(self):
        return f"DefaultFormat(timestamp={self.timestamp}, target={self.target})"
