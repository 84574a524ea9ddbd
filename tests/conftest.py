import logging

import pytest

from aave_aptos.logging import logger


@pytest.fixture(scope="session", autouse=True)
def _set_aave_aptos_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
