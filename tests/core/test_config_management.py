# tests/core/test_config_management.py
import json

import pytest

from aria_shell.core.managers.config_manager import ConfigManager
from aria_shell.core.utils.path_utils import PathUtils

# A small, predictable configuration for these tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "linter": {
        "workers": 4,
        "extensions": [".html"],
        "include_head": True
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Sets up an isolated environment for the ConfigManager:
    - Creates a temporary package root holding a fake 'settings.json'.
    - Monkeypatches PathUtils to point at it.
    The shared singleton is reloaded from the real file afterwards.
    """
    package_root = tmp_path / "aria_shell"
    package_root.mkdir()
    (package_root / "settings.json").write_text(json.dumps(MOCK_SETTINGS_CONTENT))
    monkeypatch.setattr(PathUtils, "get_shell_package_root", lambda: package_root)

    manager = ConfigManager()
    manager.reset()  # Force a reload from the fake file
    yield manager

    monkeypatch.undo()
    manager.reset()


def test_singleton():
    assert ConfigManager() is ConfigManager()


def test_config_manager_load(config_env):
    config = config_env.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["linter"]["workers"] == 4


def test_config_manager_get_nested(config_env):
    assert config_env.get_nested("linter.extensions") == [".html"]
    assert config_env.get_nested("non.existent.key", "default") == "default"
    assert config_env.get_nested("linter.workers.deeper", "default") == "default"


def test_config_manager_set_nested(config_env):
    """Overrides are cast to the type of the value they replace."""
    config_env.set_nested("debug.level", "INFO")
    assert config_env.get_nested("debug.level") == "INFO"

    config_env.set_nested("output.format", "json")
    assert config_env.get_nested("output.format") == "json"

    config_env.set_nested("linter.workers", "8")
    assert config_env.get_nested("linter.workers") == 8
    assert isinstance(config_env.get_nested("linter.workers"), int)

    config_env.set_nested("linter.extensions", [".vue"])
    assert config_env.get_nested("linter.extensions") == [".vue"]


def test_uncastable_value_is_stored_as_given(config_env):
    assert config_env.set_nested("linter.workers", "many")
    assert config_env.get_nested("linter.workers") == "many"


def test_cannot_set_below_a_scalar(config_env):
    assert not config_env.set_nested("debug.level.sub", "x")


def test_reset_discards_overrides(config_env):
    config_env.set_nested("linter.workers", 2)
    config_env.reset()
    assert config_env.get_nested("linter.workers") == 4


def test_missing_settings_file_gives_empty_config(tmp_path, monkeypatch, config_env):
    monkeypatch.setattr(PathUtils, "get_shell_package_root", lambda: tmp_path / "nowhere")
    config_env.reset()
    assert config_env.get_all() == {}


def test_broken_settings_file_gives_empty_config(tmp_path, monkeypatch, config_env):
    broken = tmp_path / "broken"
    broken.mkdir()
    (broken / "settings.json").write_text("{ not json")
    monkeypatch.setattr(PathUtils, "get_shell_package_root", lambda: broken)
    config_env.reset()
    assert config_env.get_all() == {}


def test_shipped_settings_are_loaded():
    """The packaged settings.json carries the linter defaults."""
    manager = ConfigManager()
    manager.reset()
    assert manager.get_nested("linter.workers") == 1
    assert ".html" in manager.get_nested("linter.extensions")
    assert manager.get_nested("output.format") == "pretty"


def test_boolean_and_list_overrides(config_env):
    config_env.set_nested("linter.include_head", "false")
    assert config_env.get_nested("linter.include_head") is False

    config_env.set_nested("linter.extensions", ".vue, .svelte")
    assert config_env.get_nested("linter.extensions") == [".vue", ".svelte"]


def test_apply_overrides_skips_unset_flags(config_env):
    config_env.apply_overrides({"linter.workers": "2", "output.format": None})
    assert config_env.get_nested("linter.workers") == 2
    assert config_env.get_nested("output.format") is None
