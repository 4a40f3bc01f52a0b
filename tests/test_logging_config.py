import logging

import pytest

from logging_config import PROJECT_LOGGERS, setup_logging
from percolation_stats import PercolationStats


@pytest.fixture(autouse=True)
def reset_project_loggers():
    yield
    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_handlers_are_not_duplicated():
    setup_logging()
    setup_logging()
    for name in PROJECT_LOGGERS:
        logger = logging.getLogger(name)
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO


def test_summary_goes_to_log_file(tmp_path):
    log_file = tmp_path / "percolation.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    PercolationStats(4, 2, seed=0)

    for handler in logging.getLogger("percolation_stats").handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "percolation_stats - INFO - n=4 trials=2 mean=" in text
    assert "trial 1: threshold" in text
