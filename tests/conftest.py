import logging

import pytest

from models.cart import ShoppingCart
from utils.logger import LOGGER_NAME


@pytest.fixture
def shopping_cart() -> ShoppingCart:
    # a new, empty cart for every test
    return ShoppingCart()


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = logger.handlers[:]
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved
    logger.setLevel(saved_level)
