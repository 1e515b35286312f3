"""Tests for environment driven logging configuration."""

import importlib.util
import logging

import pytest
import structlog
from ecomm_types.utils.logging import configure_logging, get_log_level, get_logger


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ENV", "ENVIRONMENT", "PROTEAN_ENV", "LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.parametrize(
    "environment,level",
    [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING")],
)
def test_level_follows_environment(clean_env, environment, level):
    clean_env.setenv("ENVIRONMENT", environment)
    assert get_log_level() == level


def test_defaults_to_development(clean_env):
    assert get_log_level() == "DEBUG"


def test_explicit_level_wins(clean_env):
    clean_env.setenv("ENVIRONMENT", "production")
    clean_env.setenv("LOG_LEVEL", "error")
    assert get_log_level() == "ERROR"


def test_log_dir_adds_rotating_files(clean_env, tmp_path):
    clean_env.setenv("PROTEAN_ENV", "test")
    clean_env.setenv("LOG_DIR", str(tmp_path / "logs"))

    configure_logging()
    get_logger(__name__).warning("Written to file", check="log_dir")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert (tmp_path / "logs" / "ecomm_types.log").exists()
    assert (tmp_path / "logs" / "ecomm_types_error.log").exists()

    clean_env.delenv("LOG_DIR")
    configure_logging()


@pytest.fixture
def host_logging():
    """A root logger set up the way a host application might have left it."""
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level

    host_handler = logging.StreamHandler()
    host_handler.setLevel(logging.ERROR)
    root_logger.handlers = [host_handler]
    root_logger.setLevel(logging.ERROR)

    yield root_logger, host_handler

    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)


def _load_fresh(module):
    """Execute a module's source again under a throwaway name, as a first import would."""
    spec = importlib.util.spec_from_file_location(f"_fresh_{module.__name__.replace('.', '_')}", module.__file__)
    fresh = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(fresh)
    return fresh


def test_importing_domain_leaves_host_logging_alone(host_logging):
    import ecomm_types.domain

    root_logger, host_handler = host_logging
    structlog_config = structlog.get_config()

    _load_fresh(ecomm_types.domain)

    assert root_logger.handlers == [host_handler]
    assert root_logger.level == logging.ERROR
    assert structlog.get_config() == structlog_config


def test_rejected_timestamp_does_not_touch_host_handlers(host_logging):
    from ecomm_types.errors import ParseError
    from ecomm_types.shared.timestamp import Timestamp

    root_logger, host_handler = host_logging

    with pytest.raises(ParseError):
        Timestamp.from_rfc3339_nano("nope")

    assert root_logger.handlers == [host_handler]
    assert root_logger.level == logging.ERROR
