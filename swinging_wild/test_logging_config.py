import logging

import pytest

from swinging_wild.config import LOGGER_NAME
from swinging_wild.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)


def test_setup_logging_is_idempotent(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO


def test_setup_logging_writes_log_file(package_logger, tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger("swinging_wild.input_file").debug("hello")

    for handler in package_logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    assert len(package_logger.handlers) == 2
