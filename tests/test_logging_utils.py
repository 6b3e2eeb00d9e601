"""
test_logging_utils.py
---------------------
Unit tests for logging_utils.py.
"""

import logging

from funnel.logging_utils import configure_logging, ColorFormatter


def test_console_only_by_default():
    log_path = configure_logging(level=logging.DEBUG, name="funnel.test.console")
    logger = logging.getLogger("funnel.test.console")
    assert log_path is None
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, ColorFormatter)


def test_file_handler_written(tmp_path):
    log_path = configure_logging(level=logging.INFO, log_dir=tmp_path,
                                 name="funnel.test.file", run_prefix="t")
    logger = logging.getLogger("funnel.test.file")
    logger.info("hello funnel")
    for h in logger.handlers:
        h.flush()
    assert log_path.parent == tmp_path
    assert "hello funnel" in log_path.read_text(encoding="utf-8")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def test_reconfigure_replaces_handlers():
    configure_logging(name="funnel.test.reconf")
    configure_logging(name="funnel.test.reconf")
    assert len(logging.getLogger("funnel.test.reconf").handlers) == 1


def test_color_formatter_includes_level_and_message():
    record = logging.LogRecord("funnel", logging.WARNING, __file__, 1, "pinch %d", (2,), None)
    text = ColorFormatter(datefmt="%H:%M:%S").format(record)
    assert "WARN" in text
    assert "pinch 2" in text
