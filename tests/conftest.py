import logging

import pytest
from click.testing import CliRunner


@pytest.fixture(scope='function')
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger('rangeparser')
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
