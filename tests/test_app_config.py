"""Tests for app_config module."""

import tomllib

import pytest

import app_config
from app_config import Overrides


def test_load_empty_when_no_file():
    """load() returns {} when config.toml doesn't exist."""
    assert app_config.load() == {}


def test_save_and_load():
    """save() writes config that load() can read back."""
    config = {"defaults": {"library_path": "/lib/libIndexStore.dylib"}}
    app_config.save(config)
    assert app_config.load() == config


def test_save_creates_parent_dir(tmp_path, monkeypatch):
    """save() creates parent directories if they don't exist."""
    nested = tmp_path / "deep" / "nested" / "config"
    monkeypatch.setattr(app_config, "app_config_dir", lambda: nested)
    app_config.save({"defaults": {}})
    assert app_config.app_config_path().exists()


def test_app_config_path():
    """app_config_path() returns config.toml inside config dir."""
    path = app_config.app_config_path()
    assert path.name == "config.toml"
    assert path.parent == app_config.app_config_dir()


def test_overrides_for_no_config():
    assert app_config.overrides_for("/project") == Overrides()


def test_overrides_for_defaults_only():
    app_config.save({"defaults": {"exclude_stale_results": False}})
    assert app_config.overrides_for("/project") == Overrides(
        exclude_stale_results=False
    )


def test_overrides_for_project_wins_over_defaults():
    """[projects."<dir>"] values replace [defaults], others are kept."""
    app_config.save(
        {
            "defaults": {"index_database_path": "/db/shared", "library_path": "/lib"},
            "projects": {"/project": {"index_database_path": "/db/project"}},
        }
    )
    result = app_config.overrides_for("/project")
    assert result.index_database_path == "/db/project"
    assert result.library_path == "/lib"


def test_overrides_for_other_project_ignored():
    app_config.save({"projects": {"/other": {"library_path": "/lib"}}})
    assert app_config.overrides_for("/project").library_path is None


def test_overrides_for_unknown_key_exits():
    app_config.save({"defaults": {"index_path": "/store"}})
    with pytest.raises(SystemExit, match="index_path"):
        app_config.overrides_for("/project")


def test_overrides_for_wrong_type_exits():
    app_config.save({"defaults": {"exclude_system_results": "nope"}})
    with pytest.raises(SystemExit):
        app_config.overrides_for("/project")


def test_set_override_defaults():
    app_config.set_override("library_path", "/lib/libIndexStore.dylib")
    assert app_config.load() == {
        "defaults": {"library_path": "/lib/libIndexStore.dylib"}
    }


def test_set_override_project():
    app_config.set_override("exclude_system_results", False, project="/project")
    with open(app_config.app_config_path(), "rb") as f:
        raw = tomllib.load(f)
    assert raw["projects"]["/project"] == {"exclude_system_results": False}


def test_set_override_unknown_key():
    with pytest.raises(SystemExit, match="Unknown key"):
        app_config.set_override("index_path", "/store")
    assert not app_config.app_config_path().exists()


def test_set_override_wrong_type_not_saved():
    with pytest.raises(SystemExit):
        app_config.set_override("exclude_stale_results", "sometimes")
    assert not app_config.app_config_path().exists()
