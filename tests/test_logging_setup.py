import logging

import pytest

from app.logging_setup import LOG_FORMAT, configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_installs_single_handler():
    configure_logging("debug")
    configure_logging("WARNING")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert root.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("bogus")
