import logging

from utils.logger import LOG_FORMAT, get_logger


def test_get_logger_attaches_single_handler():
    logger = get_logger("tests.logger.single")
    get_logger("tests.logger.single")
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_get_logger_sets_level():
    logger = get_logger("tests.logger.level", level=logging.DEBUG)
    assert logger.level == logging.DEBUG
    get_logger("tests.logger.level", level=logging.WARNING)
    assert logger.level == logging.WARNING


def test_get_logger_without_name_is_root():
    assert get_logger() is logging.getLogger()
