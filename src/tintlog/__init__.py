# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Colorized, buffered formatting of log records.
"""

from ._version import tintlog_version
from .buffer import Buffer
from .config import LogSettings, basic_logging
from .diagnostics import ConfigWarning, StyleError
from .formats import LVL_TRACE, DefaultFormat, RecordFormat
from .formatter import Formatter
from .handler import FormatHandler
from .style import Color, ColorSpec, Style, StyledValue
from .timestamp import Timestamp
from .writer import Target, Writer, WriterBuilder, WriteStyle, parse_write_style

__version__ = tintlog_version()

__all__ = [
    "Buffer",
    "Color",
    "ColorSpec",
    "Style",
    "StyledValue",
    "Timestamp",
    "Formatter",
    "Target",
    "WriteStyle",
    "Writer",
    "WriterBuilder",
    "parse_write_style",
    "FormatHandler",
    "DefaultFormat",
    "RecordFormat",
    "LVL_TRACE",
    "LogSettings",
    "basic_logging",
    "StyleError",
    "ConfigWarning",
]
