import logging

import pytest

from bloodmeans import load_bloodsample
from bloodmeans.utils.logging_utils import LOGGER_NAME


@pytest.fixture
def logger():
    return logging.getLogger("bloodmeans.tests")


@pytest.fixture
def bloodsample():
    return load_bloodsample()


@pytest.fixture(autouse=True)
def reset_toolbox_logger():
    # setup_logging binds handlers to the streams of the test that called it
    yield
    toolbox_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(toolbox_logger.handlers):
        toolbox_logger.removeHandler(handler)
        handler.close()
    toolbox_logger.setLevel(logging.NOTSET)
