import logging
import os
import sys
import tempfile

import pytest

from searchresults.config import Config, update_default_config
from searchresults.reporting import logging as reporting_logging


@pytest.fixture
def restore_root_logger():
    logger = logging.getLogger()
    handlers, level = logger.handlers[:], logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.skipif(sys.platform == "win32", reason="does not run on windows")
def test_logging(restore_root_logger):
    tempfolder = tempfile.mkdtemp()

    reporting_logging.init_logging(tempfolder)

    python_logger = logging.getLogger()
    python_logger.progress("test")
    python_logger.info("test")
    python_logger.warning("test")
    python_logger.error("test")
    python_logger.critical("test")
    python_logger.debug("test")

    log_path = os.path.join(tempfolder, "log.txt")
    assert os.path.exists(log_path)
    with open(log_path) as f:
        lines = f.readlines()
    assert len(lines) == 5
    assert "PROGRESS: test" in lines[0]


def test_log_level_from_config(restore_root_logger):
    # given
    update_default_config([Config({"general": {"log_level": "WARNING"}})])

    # when
    reporting_logging.init_logging()

    # then
    assert logging.getLogger().level == logging.WARNING


def test_log_level_by_name(restore_root_logger):
    # when
    reporting_logging.init_logging(log_level="progress")

    # then
    assert logging.getLogger().level == reporting_logging.PROGRESS_LEVELV_NUM


def test_unknown_log_level_raises(restore_root_logger):
    with pytest.raises(ValueError):
        reporting_logging.init_logging(log_level="verbose")


def test_default_formatter_without_ansi():
    # given
    formatter = reporting_logging.DefaultFormatter(use_ansi=False)
    record = logging.LogRecord("root", logging.WARNING, "", 0, "message", None, None)

    # when
    formatted = formatter.format(record)

    # then
    assert formatted.endswith("WARNING: message")
    assert "\x1b[" not in formatted


def test_print_environment(restore_root_logger, caplog):
    with caplog.at_level(logging.INFO):
        reporting_logging.print_environment()

    assert "pandas" in caplog.text
