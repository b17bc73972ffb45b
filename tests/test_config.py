# tests/test_config.py
import json
import shutil
import tempfile
import unittest
from pathlib import Path

from shift_wage.config import AppConfig, DEFAULT_SETTINGS


class TestAppConfig(unittest.TestCase):

    def setUp(self):
        # Each test gets its own data directory so the user's real settings are untouched
        self.test_dir = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_first_run_writes_defaults(self):
        cfg = AppConfig(user_data_dir=self.test_dir)
        self.assertEqual(cfg.settings, DEFAULT_SETTINGS)
        self.assertTrue(cfg.settings_file.exists())
        self.assertTrue((self.test_dir / "logs").is_dir())
        self.assertEqual(cfg.get_log_path(), self.test_dir / "logs" / "app.log")

    def test_update_setting_persists(self):
        cfg = AppConfig(user_data_dir=self.test_dir)
        cfg.update_setting("default_hourly_rate", "1200")

        reloaded = AppConfig(user_data_dir=self.test_dir)
        self.assertEqual(reloaded.settings["default_hourly_rate"], "1200")
        self.assertEqual(reloaded.settings["log_level"], DEFAULT_SETTINGS["log_level"])

    def test_unknown_setting_is_ignored(self):
        cfg = AppConfig(user_data_dir=self.test_dir)
        with self.assertLogs(level="WARNING"):
            cfg.update_setting("night_multiplier", 2.0)
        self.assertNotIn("night_multiplier", cfg.settings)

    def test_saved_values_merge_over_defaults(self):
        (self.test_dir / "settings.json").write_text(
            json.dumps({"default_start_time": "22:00"}), encoding="utf-8"
        )
        cfg = AppConfig(user_data_dir=self.test_dir)
        self.assertEqual(cfg.settings["default_start_time"], "22:00")
        self.assertEqual(cfg.settings["default_end_time"], DEFAULT_SETTINGS["default_end_time"])

    def test_corrupt_settings_fall_back_to_defaults(self):
        (self.test_dir / "settings.json").write_text("{not json", encoding="utf-8")
        with self.assertLogs(level="ERROR"):
            cfg = AppConfig(user_data_dir=self.test_dir)
        self.assertEqual(cfg.settings, DEFAULT_SETTINGS)

    def test_non_object_settings_fall_back_to_defaults(self):
        (self.test_dir / "settings.json").write_text("[1, 2]", encoding="utf-8")
        with self.assertLogs(level="ERROR"):
            cfg = AppConfig(user_data_dir=self.test_dir)
        self.assertEqual(cfg.settings, DEFAULT_SETTINGS)


if __name__ == "__main__":
    unittest.main()
