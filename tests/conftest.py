"""Pytest configuration and shared fixtures."""
import logging
import pytest

from memcached_client.core import logging as mc_logging


@pytest.fixture
def sample_messages():
    """Diagnostic messages the client reports."""
    return [
        "unexpected response terminator",
        "SERVER_ERROR out of memory storing object",
        "",
        "key contains whitespace: 'a b'",
        "ключ не найден",
    ]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove MEMCACHED_* variables so settings fall back to defaults."""
    for name in ("MEMCACHED_ENVIRONMENT", "MEMCACHED_LOG_LEVEL", "MEMCACHED_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_library_logger():
    """Restore the library logger after tests that configure it."""
    library_logger = logging.getLogger(mc_logging.LIBRARY_LOGGER_NAME)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    yield library_logger
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)
    mc_logging._installed_handlers.clear()
