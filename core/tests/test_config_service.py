"""
core/tests/test_config_service.py

Layering and typing of the ConfigService. Every test passes an explicit
environment and user file so the developer's machine cannot leak in.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from core.config.config_service import AppConfig, ConfigService


class TestConfigService(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.user_ini = Path(self._tmp.name) / "config.ini"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _service(self, environ=None) -> ConfigService:
        return ConfigService(user_ini=self.user_ini, environ=environ or {})

    def test_defaults(self) -> None:
        cfg = self._service()
        self.assertEqual(cfg.dates.display_format, "%d/%m/%Y")
        self.assertEqual(cfg.dates.input_formats, ("%Y-%m-%d", "%d/%m/%Y"))
        self.assertEqual(cfg.recipients.conjunctions, ("e", "and"))
        self.assertEqual(cfg.logging.level, "WARNING")
        self.assertEqual(cfg.meta_source("Dates", "display_format")["layer"], "defaults.ini")

    def test_logging_format_is_not_interpolated(self) -> None:
        self.assertIn("%(message)s", self._service().logging.format)

    def test_environment_overrides_defaults(self) -> None:
        cfg = self._service({"CASETRACK_LOGGING__LEVEL": "DEBUG", "OTHER_VAR": "x"})
        self.assertEqual(cfg.logging.level, "DEBUG")
        self.assertEqual(cfg.meta_source("Logging", "level")["layer"], "env")

    def test_user_file_wins(self) -> None:
        self.user_ini.write_text("[Logging]\nlevel = ERROR\n\n[Recipients]\nconjunctions = y, und\n", encoding="utf-8")
        cfg = self._service({"CASETRACK_LOGGING__LEVEL": "DEBUG"})
        self.assertEqual(cfg.logging.level, "ERROR")
        self.assertEqual(cfg.recipients.conjunctions, ("y", "und"))
        self.assertEqual(cfg.meta_source("Logging", "level")["source"], str(self.user_ini))

    def test_reload_picks_up_changes(self) -> None:
        cfg = self._service()
        self.user_ini.write_text("[General]\napp_name = other\n", encoding="utf-8")
        cfg.reload()
        self.assertEqual(cfg.general.app_name, "other")

    def test_get_with_cast(self) -> None:
        cfg = self._service({"CASETRACK_GENERAL__RETRIES": "3"})
        self.assertEqual(cfg.get("General", "retries", cast=int), 3)
        self.assertEqual(cfg.get("Dates", "input_formats", cast=tuple), ("%Y-%m-%d", "%d/%m/%Y"))
        self.assertEqual(cfg.get("General", "app_name", cast=str.upper), "CASETRACK")
        self.assertIsNone(cfg.get("General", "missing"))

    def test_as_app_config(self) -> None:
        app = self._service().as_app_config()
        self.assertIsInstance(app, AppConfig)
        self.assertEqual(app.general.version, "1.0.0")


if __name__ == "__main__":
    unittest.main()
