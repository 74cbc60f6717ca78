# This file is part of tintlog.
# Copyright (C) 2025-2026 tintlog contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import logging
import re
import threading

from pytest import fixture

from tintlog import LVL_TRACE, DefaultFormat, FormatHandler, Target, WriterBuilder, WriteStyle
from tintlog.formats import level_style

LINE_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z INFO  tintlog\.test\.handler: hello 5\n$"
)


def make_handler(style=WriteStyle.NEVER, **kwargs):
    writer = WriterBuilder().target(Target.STDOUT).write_style(style).build()
    return FormatHandler(writer, **kwargs)


@fixture
def logger():
    log = logging.getLogger("tintlog.test.handler")
    log.propagate = False
    log.setLevel(logging.DEBUG)
    yield log
    log.handlers.clear()
    log.propagate = True
    log.setLevel(logging.NOTSET)


def test_default_format(logger, capsys):
    logger.addHandler(make_handler())
    logger.info("hello %d", 5)

    out, _err = capsys.readouterr()
    assert LINE_RE.match(out)


def test_default_format_no_timestamp(logger, capsys):
    logger.addHandler(make_handler(format=DefaultFormat(timestamp=False, target=False)))
    logger.warning("careful")

    out, _err = capsys.readouterr()
    assert out == "WARNING careful\n"


def test_default_format_colors(logger, capsys):
    logger.addHandler(make_handler(WriteStyle.ALWAYS, format=DefaultFormat(timestamp=False)))
    logger.error("boom")

    out, _err = capsys.readouterr()
    assert out == "\x1b[0m\x1b[1;31mERROR\x1b[0m tintlog.test.handler: boom\n"


def test_default_format_exception(logger, capsys):
    logger.addHandler(make_handler(format=DefaultFormat(timestamp=False)))
    try:
        raise KeyError("missing")
    except KeyError:
        logger.exception("lookup failed")

    out, _err = capsys.readouterr()
    lines = out.splitlines()
    assert lines[0] == "ERROR tintlog.test.handler: lookup failed"
    assert lines[1].startswith("Traceback")
    assert lines[-1] == "KeyError: 'missing'"


def test_level_filter(logger, capsys):
    logger.addHandler(make_handler(level=logging.WARNING))
    logger.info("quiet")
    logger.warning("loud")

    out, _err = capsys.readouterr()
    assert "quiet" not in out
    assert "loud" in out


def test_custom_format(logger, capsys):
    def fmt(buf, record):
        style = buf.style().set_bold(True)
        buf.writeln(style.value(record.levelname.lower()), " | ", record.getMessage())

    logger.addHandler(make_handler(format=fmt))
    logger.debug("a")
    logger.info("b")

    out, _err = capsys.readouterr()
    assert out == "debug | a\ninfo | b\n"


def test_surrogate_message_printed(logger, capsys):
    calls = []
    handler = make_handler(format=DefaultFormat(timestamp=False))
    handler.handleError = lambda record: calls.append(record)  # type: ignore
    logger.addHandler(handler)

    logger.warning("file %s", "bad\udcffname")

    out, _err = capsys.readouterr()
    assert calls == []
    assert out == "WARNING tintlog.test.handler: file bad\\udcffname\n"

def test_failed_format_cleared(logger, capsys):
    calls = []

    def fmt(buf, record):
        buf.write("partial ")
        if record.getMessage() == "bad":
            raise RuntimeError("format failed")
        buf.writeln(record.getMessage())

    handler = make_handler(format=fmt)
    handler.handleError = lambda record: calls.append(record)  # type: ignore
    logger.addHandler(handler)

    logger.info("bad")
    logger.info("good")

    out, _err = capsys.readouterr()
    assert len(calls) == 1
    assert out == "partial good\n"
    assert handler.record_formatter().getvalue() == b""


def test_formatter_per_thread():
    handler = make_handler()
    fmt = handler.record_formatter()
    assert handler.record_formatter() is fmt

    other = []
    t = threading.Thread(target=lambda: other.append(handler.record_formatter()))
    t.start()
    t.join()
    assert other[0] is not fmt


def test_level_styles():
    handler = make_handler(WriteStyle.ALWAYS)
    buf = handler.record_formatter()

    assert level_style(buf, logging.INFO).spec.fg.name == "green"
    assert level_style(buf, logging.DEBUG).spec.fg.name == "blue"
    assert level_style(buf, LVL_TRACE).spec.fg.name == "white"
    assert level_style(buf, logging.WARNING).spec.fg.name == "yellow"
    assert level_style(buf, logging.WARNING + 5).spec.fg.name == "yellow"
    assert level_style(buf, logging.CRITICAL).spec.bold
    assert not level_style(buf, logging.INFO).spec.bold
    assert level_style(buf, 1).spec.fg is None
