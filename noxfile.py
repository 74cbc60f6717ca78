# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import nox


@nox.session(venv_backend="uv", python=["3.11", "3.12", "3.13"])
def test(session):
    session.install("-e", ".", "--group", "test")
    opts = session.posargs
    if not opts:
        opts = ["tests"]
    session.run("pytest", *opts)
