#!/usr/bin/env python3
"""
Tests for logging configuration
"""
import logging

import pytest

from recut.core.logging_config import LoggingManager


@pytest.fixture(autouse=True)
def _restore_root_logger():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)


class TestLoggingManager:

    def test_level_from_config(self):
        LoggingManager.configure(config={'logging': {'level': 'ERROR'}})
        assert logging.getLogger().level == logging.ERROR

    def test_verbose_enables_debug(self):
        LoggingManager.configure(verbose=True, config={'logging': {'level': 'ERROR'}})
        assert logging.getLogger().level == logging.DEBUG

    def test_explicit_level_wins(self):
        LoggingManager.configure(verbose=True, level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING

    def test_log_dir_creates_component_file(self, tmp_path):
        log_dir = tmp_path / "logs"
        logger = LoggingManager.configure(component="recut_test", log_dir=str(log_dir), level=logging.INFO)
        logger.info("written to file")

        log_files = list(log_dir.glob("recut_test_*.log"))
        assert len(log_files) == 1
        assert "written to file" in log_files[0].read_text()

    def test_get_logger(self):
        assert LoggingManager.get_logger("recut.range").name == "recut.range"
