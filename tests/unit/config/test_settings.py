# tests/unit/config/test_settings.py
# Unit tests for configuration management including load/save, defaults & validation

import json
from dataclasses import fields
from pathlib import Path

import pytest

from auditmemo.config.settings import (
    CONFIG_ENV_VAR,
    MemoSettings,
    SettingsManager,
    default_config_path,
)
from auditmemo.core.exceptions import SettingsValidationError


# * Test MemoSettings dataclass behavior
class TestMemoSettings:

    # * Test default values are correctly set
    def test_default_settings(self):
        settings = MemoSettings()

        assert settings.data_dir == "data"
        assert settings.memo_filename == "memo.md"
        assert settings.base_dir == ".auditmemo"
        assert settings.theme == "slate"
        assert settings.show_ids is True
        assert settings.enforce_policy is True
        assert settings.history_limit == 0

    # * Test the persisted keys are exactly the settings the CLI reads
    def test_setting_names(self):
        assert [f.name for f in fields(MemoSettings)] == [
            "data_dir",
            "memo_filename",
            "base_dir",
            "history_dirname",
            "theme",
            "show_ids",
            "enforce_policy",
            "history_limit",
            "dev_mode",
        ]

    # * Test path composition properties
    def test_path_composition(self):
        settings = MemoSettings(data_dir="memos", memo_filename="q3.md", base_dir=".state")

        assert settings.memo_path == Path("memos") / "q3.md"
        assert settings.memo_dir == Path(".state")
        assert settings.history_dir == Path(".state") / "history"

    # * Test boolean fields reject non-booleans
    @pytest.mark.parametrize("field", ["show_ids", "enforce_policy", "dev_mode"])
    def test_bool_fields_validated(self, field):
        with pytest.raises(ValueError, match=field):
            MemoSettings(**{field: "yes"})

    # * Test history_limit bounds
    @pytest.mark.parametrize("limit", [-1, 1, True, "5"])
    def test_invalid_history_limit(self, limit):
        with pytest.raises(ValueError, match="history_limit"):
            MemoSettings(history_limit=limit)

    def test_valid_history_limit(self):
        assert MemoSettings(history_limit=2).history_limit == 2

    # * Test unknown theme rejected
    def test_invalid_theme(self):
        with pytest.raises(SettingsValidationError, match="theme") as exc:
            MemoSettings(theme="neon")
        assert (exc.value.setting_name, exc.value.value) == ("theme", "neon")

    def test_empty_memo_filename(self):
        with pytest.raises(ValueError, match="memo_filename"):
            MemoSettings(memo_filename="  ")


# * Test SettingsManager persistence
class TestSettingsManager:

    # * Test loading the isolated config written by conftest
    def test_load_existing_config(self, tmp_path):
        manager = SettingsManager(tmp_path / "fake_home" / ".auditmemo" / "config.json")
        settings = manager.load()
        assert settings.base_dir == str(tmp_path / ".auditmemo")

    # * Test missing config falls back to defaults
    def test_load_missing_config(self, tmp_path):
        manager = SettingsManager(tmp_path / "absent.json")
        assert manager.load() == MemoSettings()

    # * Test invalid config warns & uses defaults
    def test_load_invalid_config(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text('{"theme": "neon"}', encoding="utf-8")

        settings = SettingsManager(path).load()

        assert settings == MemoSettings()
        assert "Invalid config file" in capsys.readouterr().out

    # * Test malformed JSON warns & uses defaults
    def test_load_malformed_json(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        assert SettingsManager(path).load() == MemoSettings()
        assert "Using default settings" in capsys.readouterr().out

    # * Test unknown keys in the file are treated as invalid
    def test_load_unknown_key(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"model": "gpt"}', encoding="utf-8")
        assert SettingsManager(path).load() == MemoSettings()

    # * Test set persists & re-validates
    def test_set_and_get(self, tmp_path):
        path = tmp_path / "config.json"
        manager = SettingsManager(path)

        manager.set("theme", "forest")

        assert manager.get("theme") == "forest"
        assert json.loads(path.read_text(encoding="utf-8"))["theme"] == "forest"

    def test_set_invalid_value_not_saved(self, tmp_path):
        path = tmp_path / "config.json"
        manager = SettingsManager(path)

        with pytest.raises(ValueError):
            manager.set("history_limit", -3)

        assert not path.exists()
        assert manager.get("history_limit") == 0

    def test_set_unknown_key(self, tmp_path):
        with pytest.raises(ValueError, match="Unknown setting"):
            SettingsManager(tmp_path / "c.json").set("model", "x")

    def test_get_unknown_key_is_none(self, tmp_path):
        assert SettingsManager(tmp_path / "c.json").get("nope") is None

    # * Test reset restores defaults
    def test_reset(self, tmp_path):
        manager = SettingsManager(tmp_path / "config.json")
        manager.set("show_ids", False)
        manager.reset()
        assert manager.list_settings()["show_ids"] is True

    # * Test changing config_path drops the cached settings
    def test_config_path_setter_clears_cache(self, tmp_path):
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        second.write_text('{"theme": "mono"}', encoding="utf-8")

        manager = SettingsManager(first)
        assert manager.load().theme == "slate"
        manager.config_path = second
        assert manager.load().theme == "mono"


# * Test config location resolution
class TestDefaultConfigPath:
    def test_home_default(self, isolate_config):
        assert default_config_path() == isolate_config / ".auditmemo" / "config.json"

    def test_env_override(self, tmp_path, monkeypatch):
        target = tmp_path / "elsewhere.json"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
        assert default_config_path() == target
