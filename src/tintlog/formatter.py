# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Formatter that log records are written into.
"""

from __future__ import annotations

from typing import Any

from .buffer import Buffer
from .style import Style, StyledValue
from .timestamp import Timestamp
from .writer import Writer, WriteStyle


class Formatter:
    """
    A file-like object to write one log record into.

    Record format functions receive a formatter and write text into it with
    :meth:`write` or :meth:`writeln`.  Terminal styles come from
    :meth:`style`; styles share the formatter's buffer, so styled and plain
    writes come out in the order they were made.

    Formatters are created by the logging handler from a :class:`Writer`, and
    are not safe to share between threads.

    Example:

    .. code:: python

        def format(buf: Formatter, record: logging.LogRecord):
            style = buf.style().set_color("green")
            buf.write(f"{style.value(record.levelname)}: {record.getMessage()}\\n")
    """

    _buf: Buffer
    _write_style: WriteStyle

    def __init__(self, writer: Writer):
        self._buf = writer.buffer()
        self._write_style = writer.write_style

    @property
    def write_style(self) -> WriteStyle:
        return self._write_style

    def style(self) -> Style:
        """
        Create a new, unstyled :class:`Style` that writes into this formatter.
        """
        return Style(self._buf)

    def timestamp(self) -> Timestamp:
        """
        Capture the current time, for writing into the record.
        """
        return Timestamp.now()

    def write(self, data: bytes | bytearray | str | StyledValue[Any]) -> int:
        """
        Write data into the record.

        Returns:
            The number of bytes added to the buffer.
        """
        if isinstance(data, StyledValue):
            start = len(self._buf)
            data.write_to(self._buf)
            return len(self._buf) - start
        else:
            return self._buf.write(data)

    def writeln(self, *parts: object) -> int:
        """
        Write each of ``parts`` in turn, followed by a newline.  Parts that
        are not strings, bytes, or styled values are written with :func:`str`.
        """
        n = 0
        for part in parts:
            if not isinstance(part, (bytes, bytearray, str, StyledValue)):
                part = str(part)
            n += self.write(part)
        n += self.write("\n")
        return n

    def flush(self) -> None:
        pass

    def writable(self) -> bool:
        return True

    def getvalue(self) -> bytes:
        """
        Get the bytes written so far.
        """
        return self._buf.getvalue()

    def print(self, writer: Writer) -> None:
        """
        Print the record to a writer's stream.
        """
        writer.print(self._buf)

    def clear(self) -> None:
        """
        Clear the record so the formatter can be reused.
        """
        self._buf.clear()

    def __repr__(self):
        return "<Formatter {} bytes>".format(len(self._buf))
