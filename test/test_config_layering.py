"""Tests for layered config parsing and validation."""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from RediQuery.config import AppConfig, load_config, load_config_with_defaults, parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "info", "to_file": False, "dir": "log"},
        "redis": {
            "host": "localhost",
            "port": 6379,
            "db": 0,
            "password_env": "RQ_TEST_PASSWORD",
            "socket_timeout": 5,
        },
        "search": {"default_score": 1, "default_limit": 10},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.redis.port, 6379)
        self.assertEqual(cfg.redis.socket_timeout, 5.0)
        self.assertEqual(cfg.search.default_score, "1")
        self.assertEqual(cfg.search.default_limit, 10)

    def test_empty_mapping_uses_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(parse_config_dict({}), AppConfig())

    def test_password_read_from_env(self) -> None:
        with patch.dict(os.environ, {"RQ_TEST_PASSWORD": " secret "}):
            cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.redis.password, "secret")

    def test_missing_password_env_means_no_auth(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = parse_config_dict(_base_raw_config())
        self.assertIsNone(cfg.redis.password)

    def test_wrong_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["redis"]["port"] = "6379"
        with self.assertRaisesRegex(TypeError, "redis.port"):
            parse_config_dict(raw)

    def test_bool_is_not_an_int(self) -> None:
        raw = _base_raw_config()
        raw["redis"]["db"] = True
        with self.assertRaisesRegex(TypeError, "redis.db"):
            parse_config_dict(raw)

    def test_invalid_port_range(self) -> None:
        raw = _base_raw_config()
        raw["redis"]["port"] = 70000
        with self.assertRaisesRegex(ValueError, "redis.port"):
            parse_config_dict(raw)

    def test_unknown_log_level(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "chatty"
        with self.assertRaisesRegex(ValueError, "log.level"):
            parse_config_dict(raw)

    def test_non_numeric_score(self) -> None:
        raw = _base_raw_config()
        raw["search"]["default_score"] = "high"
        with self.assertRaisesRegex(ValueError, "search.default_score"):
            parse_config_dict(raw)

    def test_section_must_be_mapping(self) -> None:
        with self.assertRaisesRegex(TypeError, "redis"):
            parse_config_dict({"redis": ["localhost"]})


class TestConfigFiles(unittest.TestCase):
    def test_override_merges_with_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default_path = Path(tmp) / "default.yml"
            default_path.write_text(
                "log:\n  level: INFO\nredis:\n  host: localhost\n  port: 6379\nsearch:\n  default_limit: 10\n",
                encoding="utf-8",
            )
            override_path = Path(tmp) / "override.yml"
            override_path.write_text("redis:\n  port: 6380\n", encoding="utf-8")

            cfg = load_config_with_defaults(override_path, default_path=default_path)

        self.assertEqual(cfg.redis.host, "localhost")
        self.assertEqual(cfg.redis.port, 6380)
        self.assertEqual(cfg.search.default_limit, 10)

    def test_shipped_default_config(self) -> None:
        cfg = load_config(REPO_ROOT / "config" / "default.yml")
        self.assertEqual(cfg.redis.host, "localhost")
        self.assertEqual(cfg.search.default_score, "1.0")

    def test_missing_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(load_config(Path(tmp) / "absent.yml"), AppConfig())

    def test_root_must_be_mapping(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "list.yml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "mapping"):
                load_config(path)


if __name__ == "__main__":
    unittest.main()
