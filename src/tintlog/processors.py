# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
structlog processors for routing events into tintlog handlers.
"""

from typing import Any

from structlog.typing import EventDict


def remove_internal(logger: Any, method: str, event_dict: EventDict) -> EventDict:
    """
    Filter out “internal” attrs (beginning with ``_``).
    """

    to_del = [k for k in event_dict.keys() if k.startswith("_")]
    for k in to_del:
        del event_dict[k]

    return event_dict


def render_event(logger: Any, method: str, event_dict: EventDict) -> str:
    """
    Render an event as its message followed by ``key=value`` pairs, to be
    passed on as a standard :mod:`logging` message.
    """
    event_dict = dict(event_dict)
    parts = [str(event_dict.pop("event", ""))]
    parts += [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in event_dict.items()]
    return " ".join(p for p in parts if p)
