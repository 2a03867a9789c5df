import logging

from mdview.utils.logging_setup import LOGGER_NAME, setup_logging


def test_setup_logging_sets_level_and_single_handler():
    logger = setup_logging("debug")
    setup_logging("DEBUG")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert sum(getattr(h, "_mdview", False) for h in logger.handlers) == 1


def test_setup_logging_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO


def test_setup_logging_accepts_ints():
    assert setup_logging(logging.WARNING).level == logging.WARNING
