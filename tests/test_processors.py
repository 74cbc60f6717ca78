# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

from tintlog.processors import remove_internal, render_event


def test_remove_internal():
    ed = remove_internal(None, "info", {"event": "hi", "_private": 1, "n": 2})
    assert ed == {"event": "hi", "n": 2}


def test_render_event():
    msg = render_event(None, "info", {"event": "loaded", "rows": 10, "name": "ml"})
    assert msg == "loaded rows=10 name='ml'"


def test_render_event_only():
    assert render_event(None, "info", {"event": "done"}) == "done"
