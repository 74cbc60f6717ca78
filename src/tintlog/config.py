# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Logging configuration.
"""

from __future__ import annotations

import logging
import re
import warnings
from typing import Any

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .diagnostics import ConfigWarning
from .formats import LVL_TRACE, DefaultFormat
from .handler import FormatHandler
from .processors import remove_internal, render_event
from .writer import DEFAULT_TARGET, Target, WriterBuilder, WriteStyle, parse_write_style

__all__ = ["LogSettings", "basic_logging", "active_settings"]

_log = structlog.stdlib.get_logger(__name__)
_active_settings: LogSettings | None = None
_active_handler: FormatHandler | None = None


def active_settings() -> LogSettings | None:
    """
    Get the most recently applied logging settings.
    """
    return _active_settings


def basic_logging(level: int = logging.INFO) -> FormatHandler:
    """
    Simple one-function logging configuration for simple command lines.
    """
    cfg = LogSettings(level=level)
    return cfg.apply()


class LogSettings(BaseSettings):
    """
    Settings for tintlog's console logging.

    Settings are read from ``TINTLOG_``-prefixed environment variables, so
    ``TINTLOG_STYLE=never`` turns off colors and ``TINTLOG_LEVEL=debug``
    turns on debug output.
    """

    model_config = SettingsConfigDict(env_prefix="TINTLOG_")

    level: int = logging.INFO
    """
    The root logging level.  Accepts level numbers and names (including
    ``TRACE``).
    """
    style: WriteStyle = WriteStyle.AUTO
    """
    Whether to write terminal styles; unrecognized values mean ``auto``.
    """
    target: Target = DEFAULT_TARGET
    """
    The stream to write to.
    """
    timestamp: bool = True
    """
    Whether to write record timestamps.
    """

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_level(value)
        return value

    @field_validator("style", mode="before")
    @classmethod
    def validate_style(cls, value: Any) -> Any:
        if isinstance(value, WriteStyle):
            return value
        return parse_write_style(str(value))

    @field_validator("target", mode="before")
    @classmethod
    def validate_target(cls, value: Any) -> Any:
        if isinstance(value, Target):
            return value
        try:
            return Target(str(value).strip().lower())
        except ValueError:
            warnings.warn(
                f"invalid log target {value!r}, using {DEFAULT_TARGET.value}", ConfigWarning
            )
            return DEFAULT_TARGET

    def apply(self) -> FormatHandler:
        """
        Apply the settings, installing a :class:`FormatHandler` on the root
        logger.  A handler installed by a previous call is removed.

        Returns:
            The installed handler.
        """
        global _active_settings, _active_handler

        writer = WriterBuilder().target(self.target).write_style(self.style).build()
        handler = FormatHandler(writer, DefaultFormat(timestamp=self.timestamp))

        root = logging.getLogger()
        if _active_handler is not None:
            root.removeHandler(_active_handler)
        root.addHandler(handler)
        root.setLevel(self.level)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                remove_internal,
                render_event,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
        )

        _active_settings = self
        _active_handler = handler
        _log.debug(
            "logging configured", writer=repr(writer), level=logging.getLevelName(self.level)
        )
        return handler


def remove_handler() -> None:
    """
    Remove the handler installed by :meth:`LogSettings.apply`, if any.
    """
    global _active_settings, _active_handler

    if _active_handler is not None:
        logging.getLogger().removeHandler(_active_handler)
    _active_settings = None
    _active_handler = None


def parse_level(value: str) -> int:
    """
    Parse a logging level from a number or level name.  Invalid levels warn
    and yield ``INFO``.
    """
    value = value.strip().upper()
    lmap = logging.getLevelNamesMapping()
    if re.match(r"^\d+$", value):
        return int(value)
    elif value == "TRACE":
        return LVL_TRACE
    elif value in lmap:
        return lmap[value]
    else:
        warnings.warn(f"invalid log level {value}", ConfigWarning)
        return logging.INFO
