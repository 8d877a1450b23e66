"""Tests for logger configuration."""

import logging
import sys
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RediQuery.utils.log import configure_logging, log, log_file_path, resolve_level


class TestConfigureLogging(unittest.TestCase):
    def setUp(self) -> None:
        self._handlers = list(log.handlers)
        self._level = log.level
        self._propagate = log.propagate

    def tearDown(self) -> None:
        for handler in log.handlers:
            handler.close()
        log.handlers[:] = self._handlers
        log.setLevel(self._level)
        log.propagate = self._propagate

    def test_file_handler_writes_abbreviated_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging(level="INFO", action="search", log_to_file=True, log_dir=tmp)
            log.debug("issued FT.SEARCH")
            for handler in log.handlers:
                handler.flush()

            files = list((Path(tmp) / "search").glob("search_*.log"))
            self.assertEqual(len(files), 1)
            content = files[0].read_text(encoding="utf-8")
            for handler in log.handlers:
                handler.close()

        self.assertIn("[DEBG] issued FT.SEARCH", content)

    def test_console_only_without_action(self) -> None:
        configure_logging(level="WARNING", action=None, log_to_file=True)
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.handlers[0].level, logging.WARNING)
        self.assertFalse(log.propagate)

    def test_console_level_follows_config(self) -> None:
        configure_logging(level="debug")
        self.assertEqual(log.handlers[0].level, logging.DEBUG)
        self.assertEqual(log.level, logging.DEBUG)


class TestHelpers(unittest.TestCase):
    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("warning"), logging.WARNING)
        self.assertEqual(resolve_level(None), logging.INFO)
        self.assertEqual(resolve_level("chatty"), logging.INFO)

    def test_log_file_path_layout(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = log_file_path(tmp, "info", now=datetime(2024, 3, 5, 7, 8, 9))
            self.assertTrue(path.parent.is_dir())
        self.assertEqual(path, Path(tmp) / "info" / "info_0305070809.log")


if __name__ == "__main__":
    unittest.main()
