"""Unit tests for config loading."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from call_type_icons.config import DEFAULT_CONFIG, config_path, load_config


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self.temp_dir.name) / "config.json"

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_missing_file_gives_defaults(self):
        self.assertEqual(load_config(self.path), DEFAULT_CONFIG)
        self.assertFalse(self.path.exists())

    def test_partial_file_is_merged(self):
        self.path.write_text(json.dumps({"carrier_variant": True, "colors": {"missed": "#ff0000"}}))
        cfg = load_config(self.path)
        self.assertTrue(cfg["carrier_variant"])
        self.assertEqual(cfg["icon_margin"], DEFAULT_CONFIG["icon_margin"])
        self.assertEqual(cfg["colors"]["missed"], "#ff0000")
        self.assertEqual(cfg["colors"]["incoming"], DEFAULT_CONFIG["colors"]["incoming"])

    def test_broken_json_gives_defaults(self):
        self.path.write_text("{not json")
        with self.assertLogs("call_type_icons.config", level="ERROR"):
            cfg = load_config(self.path)
        self.assertEqual(cfg, DEFAULT_CONFIG)

    def test_non_object_gives_defaults(self):
        self.path.write_text("[1, 2]")
        with self.assertLogs("call_type_icons.config", level="ERROR"):
            cfg = load_config(self.path)
        self.assertEqual(cfg, DEFAULT_CONFIG)

    def test_non_object_colors_gives_defaults(self):
        self.path.write_text(json.dumps({"icon_margin": 9, "colors": "red"}))
        with self.assertLogs("call_type_icons.config", level="ERROR"):
            cfg = load_config(self.path)
        self.assertEqual(cfg, DEFAULT_CONFIG)

    def test_defaults_are_not_shared(self):
        cfg = load_config(self.path)
        cfg["colors"]["missed"] = "#000000"
        self.assertNotEqual(DEFAULT_CONFIG["colors"]["missed"], "#000000")

    def test_config_path_uses_appdata(self):
        with mock.patch.dict(os.environ, {"APPDATA": self.temp_dir.name}):
            self.assertEqual(
                config_path(), Path(self.temp_dir.name) / "call-type-icons" / "config.json"
            )


if __name__ == "__main__":
    unittest.main()
