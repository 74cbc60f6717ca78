# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Shared output buffers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.color import ColorSystem

if TYPE_CHECKING:
    from .style import ColorSpec

RESET = "\x1b[0m"


class Buffer:
    """
    Growable byte buffer that collects one formatted log record.

    A buffer is shared (not copied) between a :class:`~tintlog.Formatter` and
    every :class:`~tintlog.Style` it mints, so that plain writes and styled
    writes land in one linear byte stream.

    Args:
        color_system:
            The color system to emit escape sequences for.  If ``None``,
            :meth:`set_color` and :meth:`reset` write nothing.
    """

    color_system: ColorSystem | None
    _data: bytearray

    def __init__(self, color_system: ColorSystem | None = None):
        self.color_system = color_system
        self._data = bytearray()

    @property
    def supports_color(self) -> bool:
        return self.color_system is not None

    def write(self, data: bytes | bytearray | str) -> int:
        """
        Append data to the buffer.  Strings are encoded as UTF-8, with
        unencodable characters (such as lone surrogates) backslash-escaped.

        Returns:
            The number of bytes written.
        """
        if isinstance(data, str):
            data = data.encode("utf-8", errors="backslashreplace")
        self._data += data
        return len(data)

    def set_color(self, spec: ColorSpec) -> None:
        """
        Switch the buffer's terminal style to ``spec``.
        """
        if self.color_system is None:
            return

        self.write(RESET)
        codes = spec.sgr_codes(self.color_system)
        if codes:
            self.write("\x1b[" + ";".join(codes) + "m")

    def reset(self) -> None:
        """
        Reset the buffer's terminal style to the default.
        """
        if self.color_system is not None:
            self.write(RESET)

    def clear(self) -> None:
        """
        Truncate the buffer, keeping it for reuse.
        """
        del self._data[:]

    def getvalue(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self):
        return "<Buffer {} bytes, color={}>".format(
            len(self._data), self.color_system.name if self.color_system else None
        )
