# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
Warning and error classes for tintlog.
"""


class StyleError(ValueError):
    """
    Error raised when a terminal style cannot be applied to or reset on an
    output buffer.

    This is a formatting error: the underlying I/O error is deliberately not
    attached.  Code that needs I/O-level diagnostics should write unstyled
    text directly.
    """

    pass


class ConfigWarning(UserWarning):
    """
    Warning raised for detectable problems with logging configuration.
    """

    pass
