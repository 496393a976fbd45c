import logging
import sys

import pytest

from maven_essentials.core.logging_config import _StderrHandler, configure_logging


def test_handler_writes_to_current_stderr(capsys):
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "to stderr", None, None)

    handler.emit(record)

    captured = capsys.readouterr()
    assert captured.err == "to stderr\n"
    assert captured.out == ""
    assert handler.stream is sys.stderr


def test_handler_stream_cannot_be_replaced():
    handler = _StderrHandler()

    with pytest.raises(TypeError, match="sys.stderr"):
        handler.setStream(sys.stdout)


def test_configure_logging_installs_one_handler():
    root = logging.getLogger()

    configure_logging("INFO")
    configure_logging("DEBUG")

    handlers = [h for h in root.handlers if isinstance(h, _StderrHandler)]
    assert len(handlers) == 1
    assert root.level == logging.DEBUG
    configure_logging("INFO")
