"""Shared fixtures. Keeps the real environment and user config out of tests."""

import pytest

import app_config

_LEAKY_VARS = (
    "BUILT_PRODUCTS_DIR",
    "INDEXKIT_INDEX_STORE_PATH",
    "INDEXKIT_INDEX_DATABASE_PATH",
    "INDEXKIT_LIBRARY_PATH",
    "INDEXKIT_EXCLUDE_SYSTEM_RESULTS",
    "INDEXKIT_EXCLUDE_STALE_RESULTS",
)


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    """Point app_config at a temp dir and drop variables a shell may export.

    setenv-then-delenv makes monkeypatch restore the variable to *absent*
    afterwards, even if load_dotenv() sets it during the test.
    """
    config_dir = tmp_path / "app-config"
    config_dir.mkdir()
    monkeypatch.setattr(app_config, "app_config_dir", lambda: config_dir)
    for name in _LEAKY_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
