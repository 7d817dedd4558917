"""
Shared pytest fixtures for booleint tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_booleint_logging():
    """Reset the booleint logger before and after each test.

    Leaves only a NullHandler and an inherited (NOTSET) level so handlers
    added by one test never leak into another.
    """
    logger = logging.getLogger("booleint")

    def _reset():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()
