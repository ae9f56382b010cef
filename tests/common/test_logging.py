"""Test suite for graphwalk logging helpers."""

import logging

import pytest

from graphwalk import Graph
from graphwalk.exceptions import InvalidExtensionError
from graphwalk.logging import (
    LIBRARY_LOGGER_NAME,
    TRACE_LEVEL_NUMBER,
    add_custom_log_level,
    configure_logging,
    get_logging_config,
)


@pytest.fixture
def library_logger():
    """The graphwalk logger, restored after the test."""
    lib_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    level = lib_logger.level
    handlers = list(lib_logger.handlers)
    yield lib_logger
    lib_logger.setLevel(level)
    for handler in list(lib_logger.handlers):
        if handler not in handlers:
            lib_logger.removeHandler(handler)


class TestLoggingConfig:
    """Test get_logging_config()."""

    def test_defaults(self):
        """Test WARNING is the default level"""
        config = get_logging_config()
        assert config["level"] == logging.WARNING
        assert config["level_name"] == "WARNING"
        assert "%(message)s" in config["format"]

    def test_level_from_env(self, monkeypatch):
        """Test GRAPHWALK_LOG_LEVEL is read case-insensitively"""
        monkeypatch.setenv("GRAPHWALK_LOG_LEVEL", "debug")
        config = get_logging_config()
        assert config["level"] == logging.DEBUG
        assert config["level_name"] == "DEBUG"

    def test_trace_level_from_env(self, monkeypatch):
        """Test the custom TRACE level can be selected"""
        monkeypatch.setenv("GRAPHWALK_LOG_LEVEL", "TRACE")
        assert get_logging_config()["level"] == TRACE_LEVEL_NUMBER

    def test_invalid_level_falls_back(self, monkeypatch, caplog):
        """Test unknown level names fall back to WARNING with a warning"""
        monkeypatch.setenv("GRAPHWALK_LOG_LEVEL", "LOUD")
        with caplog.at_level(logging.WARNING, logger="graphwalk.logging.config"):
            config = get_logging_config()
        assert config["level"] == logging.WARNING
        assert "Invalid log level: LOUD" in caplog.text

    def test_format_from_env(self, monkeypatch):
        """Test GRAPHWALK_LOG_FORMAT overrides the format"""
        monkeypatch.setenv("GRAPHWALK_LOG_FORMAT", "%(message)s")
        assert get_logging_config()["format"] == "%(message)s"


class TestConfigureLogging:
    """Test configure_logging()."""

    def test_sets_level_and_handler(self, library_logger):
        """Test the library logger gets a level and one stream handler"""
        had_handlers = bool(library_logger.handlers)
        result = configure_logging(level=logging.DEBUG)
        assert result is library_logger
        assert library_logger.level == logging.DEBUG
        if not had_handlers:
            assert len(library_logger.handlers) == 1
            assert isinstance(library_logger.handlers[0], logging.StreamHandler)

    def test_repeated_calls_do_not_add_handlers(self, library_logger):
        """Test calling twice only adjusts the level"""
        configure_logging(level=logging.INFO)
        count = len(library_logger.handlers)
        configure_logging(level=logging.ERROR)
        assert len(library_logger.handlers) == count
        assert library_logger.level == logging.ERROR

    def test_env_level_used_by_default(self, library_logger, monkeypatch):
        """Test the environment level applies when no level is passed"""
        monkeypatch.setenv("GRAPHWALK_LOG_LEVEL", "INFO")
        configure_logging()
        assert library_logger.level == logging.INFO


class TestCustomLevels:
    """Test custom log level registration."""

    def test_trace_registered(self):
        """Test TRACE is registered below DEBUG"""
        assert TRACE_LEVEL_NUMBER < logging.DEBUG
        assert logging.getLevelName(TRACE_LEVEL_NUMBER) == "TRACE"
        assert hasattr(logging.getLogger("graphwalk"), "trace")

    def test_reregistering_same_level(self):
        """Test registering the same name and number again is allowed"""
        assert add_custom_log_level("TRACE", TRACE_LEVEL_NUMBER) == TRACE_LEVEL_NUMBER

    def test_conflicting_level(self):
        """Test reusing a name with another number fails"""
        with pytest.raises(ValueError):
            add_custom_log_level("TRACE", TRACE_LEVEL_NUMBER + 1)


class TestLibraryLogging:
    """Test what the library logs."""

    def test_graph_changes_logged_at_debug(self, caplog):
        """Test vertex and edge creation are logged"""
        with caplog.at_level(logging.DEBUG, logger="graphwalk.core.graph"):
            Graph().edge("A", "B")
        assert "Added vertex 'A'" in caplog.text
        assert "Added edge 'A' - 'B'" in caplog.text

    def test_color_changes_logged_at_trace(self, path_graph, caplog):
        """Test traversal color transitions are logged at TRACE"""
        with caplog.at_level(
            TRACE_LEVEL_NUMBER, logger="graphwalk.core.traversal.engine"
        ):
            path_graph.depth_first_traversal()
        trace_records = [r for r in caplog.records if r.levelno == TRACE_LEVEL_NUMBER]
        assert len(trace_records) == 8
        assert trace_records[0].getMessage() == "vertex 'A' -> GREY"
        assert trace_records[-1].getMessage() == "vertex 'A' -> BLACK"

    def test_no_trace_output_by_default(self, path_graph, caplog):
        """Test color transitions are silent at DEBUG"""
        with caplog.at_level(logging.DEBUG, logger="graphwalk.core.traversal.engine"):
            path_graph.depth_first_traversal()
        assert not [r for r in caplog.records if r.levelno == TRACE_LEVEL_NUMBER]

    def test_rejected_extension_logged(self, graph, caplog):
        """Test invalid extensions are logged as warnings"""
        with caplog.at_level(logging.WARNING, logger="graphwalk.core.graph"):
            with pytest.raises(InvalidExtensionError):
                graph.apply(object())
        assert "Rejected extension" in caplog.text
