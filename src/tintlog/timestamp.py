# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Record timestamps.
"""

from __future__ import annotations

from datetime import datetime, timezone


class Timestamp:
    """
    An instant captured for a log record, rendered as
    ``YYYY-MM-DDTHH:MM:SSZ``.

    The layout is fixed (UTC, whole seconds) so existing log parsers can rely
    on it.  Rendering happens only when the timestamp is converted to text.
    """

    __slots__ = ("_instant",)

    _instant: datetime

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        else:
            instant = instant.astimezone(timezone.utc)
        object.__setattr__(self, "_instant", instant)

    @classmethod
    def now(cls) -> Timestamp:
        return cls(datetime.now(timezone.utc))

    @property
    def instant(self) -> datetime:
        return self._instant

    def __setattr__(self, name, value):
        raise AttributeError("Timestamp is immutable")

    def __str__(self):
        t = self._instant
        return "{:04d}-{:02d}-{:02d}T{:02d}:{:02d}:{:02d}Z".format(
            t.year, t.month, t.day, t.hour, t.minute, t.second
        )

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self):
        return f"Timestamp({self})"

    def __eq__(self, other):
        if isinstance(other, Timestamp):
            return self._instant == other._instant
        return NotImplemented

    def __hash__(self):
        return hash(self._instant)
