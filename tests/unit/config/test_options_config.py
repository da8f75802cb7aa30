"""Tests for config persistence and option loading.

Malformed config data must fall back to defaults instead of raising.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from codedecor import config
from codedecor.surface import MemorySurface, TextLine, TextRun, render_ansi


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("codedecor.config.CONFIG_PATH", config_path), mock.patch.dict(
                os.environ, {}, clear=True
            ):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_options(), config.DecoratorOptions())

                config_path.write_text("[1, 2, 3]\n", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_options(), config.DecoratorOptions())

    def test_validate_invariants_requires_a_real_boolean(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("codedecor.config.CONFIG_PATH", config_path), mock.patch.dict(
                os.environ, {}, clear=True
            ):
                config.save_config({"validate_invariants": "yes"})
                self.assertFalse(config.load_validate_invariants())

                config.save_config({"validate_invariants": True})
                self.assertTrue(config.load_validate_invariants())

    def test_environment_overrides_config_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("codedecor.config.CONFIG_PATH", config_path):
                config.save_config({"validate_invariants": True})
                with mock.patch.dict(os.environ, {config.VALIDATE_ENV_VAR: "off"}):
                    self.assertFalse(config.load_validate_invariants())
                with mock.patch.dict(os.environ, {config.VALIDATE_ENV_VAR: "garbage"}):
                    self.assertTrue(config.load_validate_invariants())
                config.save_config({})
                with mock.patch.dict(os.environ, {config.VALIDATE_ENV_VAR: "1"}):
                    self.assertTrue(config.load_options().validate_invariants)

    def test_ansi_styles_round_trip_and_drop_invalid_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("codedecor.config.CONFIG_PATH", config_path):
                config.save_ansi_styles({"hl": "4"})
                self.assertEqual(config.load_ansi_styles(), {"hl": "4"})

                config.save_config({"ansi_styles": {"hl": "4", " ": "1", "bad": 3, "k": ""}})
                self.assertEqual(config.load_ansi_styles(), {"hl": "4"})

                config.save_config({"ansi_styles": ["hl"]})
                self.assertEqual(config.load_ansi_styles(), {})

    def test_configured_styles_feed_ansi_rendering(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("codedecor.config.CONFIG_PATH", config_path), mock.patch.dict(
                os.environ, {}, clear=True
            ):
                config.save_ansi_styles({"hl": "4"})
                options = config.load_options()

        surface = MemorySurface([TextLine(1, [TextRun("x", {"hl"})])])
        self.assertEqual(render_ansi(surface, options.ansi_styles), "\033[4mx\033[0m")


if __name__ == "__main__":
    unittest.main()
