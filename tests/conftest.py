import pytest

from symbolic_differentiation import VariableNode, logging_system


@pytest.fixture
def x():
    return VariableNode('x')


@pytest.fixture
def quiet_logging():
    """Drop whatever logger a test configured so the next one starts fresh"""
    yield
    if logging_system._global_logger is not None:
        for handler in logging_system._global_logger.logger.handlers:
            handler.close()
        logging_system._global_logger.logger.handlers.clear()
    logging_system._global_logger = None
