# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Logging handler driving the formatting pipeline.
"""

from __future__ import annotations

import threading
from logging import NOTSET, Handler, LogRecord

from .formats import DefaultFormat, RecordFormat
from .formatter import Formatter
from .writer import Writer, WriterBuilder


class FormatHandler(Handler):
    """
    :mod:`logging` handler that writes each record with a record format.

    Each thread gets its own :class:`Formatter`, which is cleared after every
    record and reused for the next one.

    Args:
        writer:
            The writer to print records to.  Defaults to a writer built with
            the default target and style.
        format:
            The record format.  Defaults to :class:`DefaultFormat`.
        level:
            The handler level.
    """

    writer: Writer
    record_format: RecordFormat

    def __init__(
        self,
        writer: Writer | None = None,
        format: RecordFormat | None = None,
        level: int = NOTSET,
    ):
        super().__init__(level)
        self.writer = writer if writer is not None else WriterBuilder().build()
        self.record_format = format if format is not None else DefaultFormat()
        self._local = threading.local()

    @property
    def supports_color(self) -> bool:
        return self.writer.supports_color

    def record_formatter(self) -> Formatter:
        """
        Get the current thread's formatter.
        """
        fmt = getattr(self._local, "formatter", None)
        if fmt is None:
            fmt = Formatter(self.writer)
            self._local.formatter = fmt
        return fmt

    def emit(self, record: LogRecord) -> None:
        try:
            fmt = self.record_formatter()
            try:
                self.record_format(fmt, record)
                fmt.print(self.writer)
            finally:
                fmt.clear()
        except Exception:
            self.handleError(record)
