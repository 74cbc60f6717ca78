# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Color and weight styling for values written to a log record.

Styles are minted by :meth:`tintlog.Formatter.style` and tag values for
colored output:

.. code:: python

    def format(buf, record):
        level_style = buf.style()
        level_style.set_color("red").set_bold(True)
        buf.writeln(level_style.value(record.levelname), ": ", record.getMessage())

Every styled value resets the terminal style after it is written, even if
writing the value fails, so styles never leak into the rest of the line.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from rich.color import Color, ColorSystem

from .buffer import Buffer
from .diagnostics import StyleError

__all__ = ["Color", "ColorSpec", "Style", "StyledValue"]

T = TypeVar("T")
ColorLike = Color | str


def _color(color: ColorLike | None) -> Color | None:
    if color is None or isinstance(color, Color):
        return color
    return Color.parse(color)


@dataclass
class ColorSpec:
    """
    Foreground color, background color, and weight of a styled span.  Absent
    colors inherit the terminal default.
    """

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False

    def set_fg(self, color: ColorLike | None) -> ColorSpec:
        self.fg = _color(color)
        return self

    set_color = set_fg

    def set_bg(self, color: ColorLike | None) -> ColorSpec:
        self.bg = _color(color)
        return self

    def set_bold(self, yes: bool = True) -> ColorSpec:
        self.bold = yes
        return self

    def sgr_codes(self, system: ColorSystem) -> list[str]:
        """
        Get the SGR parameters selecting this spec in a color system.
        """
        codes = []
        if self.bold:
            codes.append("1")
        if self.fg is not None:
            codes.extend(self.fg.downgrade(system).get_ansi_codes(foreground=True))
        if self.bg is not None:
            codes.extend(self.bg.downgrade(system).get_ansi_codes(foreground=False))
        return codes

    def copy(self) -> ColorSpec:
        return copy.copy(self)


class Style:
    """
    A set of styling attributes bound to a formatter's output buffer.

    Copying a style (with :func:`copy.copy` or :meth:`copy`) duplicates its
    spec, but the copy still writes into the same buffer.
    """

    buffer: Buffer
    spec: ColorSpec

    def __init__(self, buffer: Buffer, spec: ColorSpec | None = None):
        self.buffer = buffer
        self.spec = spec if spec is not None else ColorSpec()

    def set_color(self, color: ColorLike) -> Style:
        """
        Set the foreground color.
        """
        self.spec.set_fg(color)
        return self

    def set_bg(self, color: ColorLike) -> Style:
        """
        Set the background color.
        """
        self.spec.set_bg(color)
        return self

    def set_bold(self, yes: bool = True) -> Style:
        """
        Set whether text is bold.
        """
        self.spec.set_bold(yes)
        return self

    def value(self, value: T) -> StyledValue[T]:
        """
        Wrap a value so it is written with this style.
        """
        return StyledValue(self, value)

    def copy(self) -> Style:
        return Style(self.buffer, self.spec.copy())

    __copy__ = copy

    def __repr__(self):
        return f"Style(spec={self.spec!r})"


class StyledValue(Generic[T]):
    """
    A value paired with the style to write it in.

    Any textual conversion (``str``, ``repr``, or ``format`` with any format
    spec) renders the value between the style's escape sequences.  Passing a
    styled value to :meth:`tintlog.Formatter.write` renders it directly into
    the shared buffer.
    """

    __slots__ = ("style", "value")

    style: Style
    value: T

    def __init__(self, style: Style, value: T):
        self.style = style
        self.value = value

    def write_to(self, sink: Buffer) -> None:
        """
        Render the value's ``str`` form into a buffer.
        """
        self._render(sink, lambda: format(self.value))

    def _render(self, sink: Buffer, convert: Callable[[], str]) -> None:
        try:
            sink.set_color(self.style.spec)
        except OSError:
            raise StyleError("cannot apply terminal style") from None

        write_error = None
        try:
            sink.write(convert())
        except Exception as e:
            write_error = e

        # reset even if the write failed
        try:
            sink.reset()
        except OSError as e:
            if write_error is None:
                raise StyleError("cannot reset terminal style") from None
            write_error.add_note(f"resetting terminal style also failed: {e}")

        if write_error is not None:
            raise write_error

    def _render_text(self, convert: Callable[[], str]) -> str:
        scratch = Buffer(self.style.buffer.color_system)
        self._render(scratch, convert)
        return scratch.getvalue().decode("utf-8")

    def __str__(self) -> str:
        return self._render_text(lambda: str(self.value))

    def __repr__(self) -> str:
        return self._render_text(lambda: repr(self.value))

    def __format__(self, format_spec: str) -> str:
        return self._render_text(lambda: format(self.value, format_spec))
