# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Output targets and style policies, resolved into writers.
"""

from __future__ import annotations

import threading
from enum import Enum

from rich.color import ColorSystem
from rich.console import Console

from .buffer import Buffer

__all__ = [
    "Target",
    "WriteStyle",
    "DEFAULT_TARGET",
    "DEFAULT_WRITE_STYLE",
    "parse_write_style",
    "Writer",
    "WriterBuilder",
]


class Target(str, Enum):
    """
    The stream log records are written to.
    """

    STDOUT = "stdout"
    STDERR = "stderr"


class WriteStyle(str, Enum):
    """
    Whether terminal styles are written.
    """

    AUTO = "auto"
    "Write styles if the target is a terminal that supports them."
    ALWAYS = "always"
    "Always write styles, even to pipes and files."
    NEVER = "never"
    "Never write styles."


DEFAULT_TARGET = Target.STDERR
DEFAULT_WRITE_STYLE = WriteStyle.AUTO

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}
_STREAM_LOCKS = {Target.STDOUT: threading.Lock(), Target.STDERR: threading.Lock()}


def parse_write_style(spec: str) -> WriteStyle:
    """
    Parse a write style.  Unrecognized values (including the empty string)
    yield the default style rather than an error.
    """
    match spec:
        case "auto":
            return WriteStyle.AUTO
        case "always":
            return WriteStyle.ALWAYS
        case "never":
            return WriteStyle.NEVER
        case _:
            return DEFAULT_WRITE_STYLE


class Writer:
    """
    A resolved output stream with a resolved color system.

    Writers are created with :class:`WriterBuilder`.  The stream itself is
    looked up when printing, so redirecting :data:`sys.stdout` or
    :data:`sys.stderr` after building is honored.
    """

    target: Target
    write_style: WriteStyle
    color_system: ColorSystem | None
    console: Console

    def __init__(
        self,
        console: Console,
        target: Target,
        write_style: WriteStyle,
        color_system: ColorSystem | None,
    ):
        self.console = console
        self.target = target
        self.write_style = write_style
        self.color_system = color_system

    @property
    def supports_color(self) -> bool:
        return self.color_system is not None

    def buffer(self) -> Buffer:
        """
        Create an empty buffer that writes styles for this writer.
        """
        return Buffer(self.color_system)

    def print(self, buffer: Buffer) -> None:
        """
        Write a buffer's contents to the output stream in a single write.
        Prints to the same target are serialized across threads.
        """
        data = buffer.getvalue()
        with _STREAM_LOCKS[self.target]:
            stream = self.console.file
            binary = getattr(stream, "buffer", None)
            if binary is not None:
                # flush pending text so it is not reordered after our bytes
                stream.flush()
                binary.write(data)
                binary.flush()
            else:
                stream.write(data.decode("utf-8", errors="replace"))
                stream.flush()

    def __repr__(self):
        return "<Writer {} style={} color={}>".format(
            self.target.value,
            self.write_style.value,
            self.color_system.name if self.color_system else None,
        )


class WriterBuilder:
    """
    Builder for :class:`Writer` objects.
    """

    _target: Target
    _write_style: WriteStyle

    def __init__(self):
        self._target = DEFAULT_TARGET
        self._write_style = DEFAULT_WRITE_STYLE

    def target(self, target: Target) -> WriterBuilder:
        """
        Set the target stream.
        """
        self._target = Target(target)
        return self

    def write_style(self, write_style: WriteStyle) -> WriterBuilder:
        """
        Set the style policy.
        """
        self._write_style = WriteStyle(write_style)
        return self

    def parse(self, write_style: str) -> WriterBuilder:
        """
        Set the style policy from a string; see :func:`parse_write_style`.
        """
        return self.write_style(parse_write_style(write_style))

    def build(self) -> Writer:
        """
        Build a writer, probing the target's color support if the style is
        :attr:`WriteStyle.AUTO`.
        """
        stderr = self._target == Target.STDERR
        match self._write_style:
            case WriteStyle.ALWAYS:
                console = Console(stderr=stderr, force_terminal=True)
                system = _COLOR_SYSTEMS.get(console.color_system or "", ColorSystem.STANDARD)
            case WriteStyle.NEVER:
                console = Console(stderr=stderr, no_color=True)
                system = None
            case _:
                console = Console(stderr=stderr)
                if console.no_color or console.color_system is None:
                    system = None
                else:
                    system = _COLOR_SYSTEMS[console.color_system]

        return Writer(console, self._target, self._write_style, system)

    def __repr__(self):
        return "WriterBuilder(target={}, write_style={})".format(
            self._target.value, self._write_style.value
        )
