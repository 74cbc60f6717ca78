# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import logging
import sys

import click
import structlog

from . import __version__
from .config import LogSettings
from .formats import LVL_TRACE

__all__ = ["tintlog", "main", "version", "demo"]
_log = structlog.stdlib.get_logger(__name__)


def main():
    """
    Run the tintlog CLI.  This just delegates to :func:`tintlog`, but maps
    errors to exit codes.
    """
    try:
        ec = tintlog.main(standalone_mode=False)
    except click.ClickException as e:
        e.show()
        sys.exit(2)
    except Exception as e:
        _log.error("tintlog command failed", exc_info=e)
        sys.exit(3)

    if isinstance(ec, int):
        sys.exit(ec)


@click.group("tintlog")
@click.option("-v", "--verbose", "verbosity", count=True, help="Enable verbose logging output")
@click.option(
    "--style",
    type=click.Choice(["auto", "always", "never"]),
    help="Whether to write terminal colors.",
)
@click.option(
    "--target",
    type=click.Choice(["stdout", "stderr"]),
    help="The stream to write log records to.",
)
@click.option("--no-timestamp", is_flag=True, help="Omit record timestamps.")
def tintlog(verbosity: int, style: str | None, target: str | None, no_timestamp: bool):
    """
    Colorized log formatting.
    """

    # options override TINTLOG_* environment variables only when given
    overrides = {}
    if verbosity > 1:
        overrides["level"] = LVL_TRACE
    elif verbosity:
        overrides["level"] = logging.DEBUG
    if style:
        overrides["style"] = style
    if target:
        overrides["target"] = target
    if no_timestamp:
        overrides["timestamp"] = False

    LogSettings(**overrides).apply()


@tintlog.command("version")
def version():
    """
    Print tintlog version info.
    """
    click.echo(f"tintlog version {__version__}")


@tintlog.command("demo")
@click.argument("message", default="the quick brown fox")
def demo(message: str):
    """
    Write MESSAGE at every log level.
    """
    log = logging.getLogger("tintlog.demo")
    log.log(LVL_TRACE, "%s", message)
    log.debug("%s", message)
    log.info("%s", message)
    log.warning("%s", message)
    log.error("%s", message)
    log.critical("%s", message)
    _log.info(message, source="structlog")
