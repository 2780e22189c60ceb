import os
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from songbook.config import Settings, find_config


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings()
        self.assertEqual(settings.logging.level, "INFO")
        self.assertTrue(settings.logging.color)
        self.assertIsNone(settings.logging.warnings_log)
        self.assertEqual(settings.diagnostics.language, "en")

    def test_load_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "songbook.yaml"
            path.write_text(
                "logging:\n  level: debug\n  color: false\n  warnings_log: logs/warn.log\n"
                "diagnostics:\n  language: zh\n",
                encoding="utf-8",
            )
            settings = Settings.load(path)
        self.assertEqual(settings.logging.level, "DEBUG")
        self.assertFalse(settings.logging.color)
        self.assertTrue(settings.logging.warnings_log.is_absolute())
        self.assertEqual(settings.logging.warnings_log.name, "warn.log")
        self.assertEqual(settings.diagnostics.language, "zh")

    def test_empty_file_gives_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "songbook.yaml"
            path.write_text("", encoding="utf-8")
            settings = Settings.load(path)
        self.assertEqual(settings, Settings())

    def test_rejects_unknown_language_and_level(self) -> None:
        with self.assertRaises(ValidationError):
            Settings.model_validate({"diagnostics": {"language": "fr"}})
        with self.assertRaises(ValidationError):
            Settings.model_validate({"logging": {"level": "loud"}})


class TestFindConfig(unittest.TestCase):
    def test_explicit_path_wins(self) -> None:
        self.assertEqual(find_config(Path("/etc/songbook.yaml")), Path("/etc/songbook.yaml"))

    def test_missing_config_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            cwd = os.getcwd()
            os.chdir(tmpdir)
            try:
                with self.assertRaises(FileNotFoundError):
                    find_config(None)
                Path("songbook.yml").write_text("{}", encoding="utf-8")
                self.assertEqual(find_config(None).name, "songbook.yml")
            finally:
                os.chdir(cwd)


if __name__ == "__main__":
    unittest.main()
