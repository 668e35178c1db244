import json
import tempfile
import unittest
from pathlib import Path

from triad_recall.core.config import ConfigManager


class TestConfigManager(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config_dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_creates_default_files(self):
        manager = ConfigManager(str(self.config_dir))
        for name in ("fretboard", "voicings", "database"):
            self.assertTrue((self.config_dir / f"{name}.json").exists())
        self.assertEqual(manager.get_config("fretboard"), {"tuning": "standard", "max_fret": 12})

    def test_update_persists(self):
        manager = ConfigManager(str(self.config_dir))
        self.assertTrue(manager.update_config("fretboard", {"tuning": "drop_d"}))

        reloaded = ConfigManager(str(self.config_dir))
        self.assertEqual(reloaded.get_config("fretboard")["tuning"], "drop_d")
        self.assertEqual(reloaded.get_config("fretboard")["max_fret"], 12)

    def test_missing_keys_filled_from_defaults(self):
        (self.config_dir / "voicings.json").write_text(json.dumps({"difficulty": "beginner"}))
        manager = ConfigManager(str(self.config_dir))
        self.assertEqual(manager.get_config("voicings"), {"difficulty": "beginner", "show_tab": True})

    def test_corrupt_file_falls_back_to_defaults(self):
        (self.config_dir / "fretboard.json").write_text("{not json")
        with self.assertLogs("triad_recall.core.config", level="ERROR"):
            manager = ConfigManager(str(self.config_dir))
        self.assertEqual(manager.get_config("fretboard")["tuning"], "standard")

    def test_reset(self):
        manager = ConfigManager(str(self.config_dir))
        manager.update_config("fretboard", {"max_fret": 24})
        self.assertTrue(manager.reset_config("fretboard"))
        self.assertEqual(manager.get_config("fretboard")["max_fret"], 12)

    def test_unknown_config(self):
        manager = ConfigManager(str(self.config_dir))
        with self.assertLogs("triad_recall.core.config", level="ERROR"):
            self.assertFalse(manager.update_config("audio", {"gain": 1}))
        with self.assertLogs("triad_recall.core.config", level="ERROR"):
            self.assertFalse(manager.reset_config("audio"))
        self.assertEqual(manager.get_config("audio"), {})

    def test_get_config_returns_copy(self):
        manager = ConfigManager(str(self.config_dir))
        manager.get_config("fretboard")["tuning"] = "open_g"
        self.assertEqual(manager.get_config("fretboard")["tuning"], "standard")

    def test_database_path(self):
        manager = ConfigManager(str(self.config_dir))
        self.assertEqual(manager.database_path(), self.config_dir / "triad_database.json")
        manager.update_config("database", {"path": "/tmp/elsewhere.json"})
        self.assertEqual(manager.database_path(), Path("/tmp/elsewhere.json"))


if __name__ == "__main__":
    unittest.main()
