# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import logging

import structlog
from pytest import fixture

from tintlog.config import remove_handler

_log = structlog.stdlib.get_logger("tintlog.tests")

structlog.configure(
    [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.MaybeTimeStamper(fmt="iso"),
        structlog.processors.KeyValueRenderer(key_order=["timestamp", "event"]),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
)


@fixture(autouse=True)
def log_test(request):
    _log.info("running test %s:%s", request.module.__name__, request.function.__name__)


@fixture(autouse=True)
def reset_logging():
    """
    Undo logging configuration applied by a test.
    """
    root = logging.getLogger()
    level = root.level
    yield
    remove_handler()
    root.setLevel(level)


@fixture
def no_color_env(monkeypatch):
    "Clear environment variables that make rich force terminal output."
    for var in ["FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "NO_COLOR"]:
        monkeypatch.delenv(var, raising=False)
