"""Collect resolution overrides from every layer.

Precedence, highest first:
  1. explicit values (CLI flags)
  2. INDEXKIT_* environment variables (a .env file is loaded by the CLI)
  3. app config: [projects."<dir>"] table, then [defaults]
  4. inference in resolve.py
"""

import app_config
from environment import Environment
from resolve import ConfigInput

ENV_PREFIX = "INDEXKIT_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def parse_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise SystemExit(
        f"{name} must be one of true/false/yes/no/on/off/1/0, got {value!r}"
    )


def env_var(key: str) -> str:
    """INDEXKIT_ variable name for an override key."""
    return ENV_PREFIX + key.upper()


def from_environment(environment: Environment) -> dict[str, str | bool]:
    """Overrides set through INDEXKIT_* variables."""
    found: dict[str, str | bool] = {}
    for key in app_config.OVERRIDE_KEYS:
        name = env_var(key)
        raw = environment.get(name)
        if raw is None:
            continue
        found[key] = parse_bool(raw, name) if key in app_config.BOOL_KEYS else raw
    return found


def build_input(
    project_directory: str,
    explicit: dict | None = None,
    environment: Environment | None = None,
) -> ConfigInput:
    """Layer app config, environment and explicit values into a ConfigInput."""
    if environment is None:
        environment = Environment.current()
    stored = app_config.overrides_for(project_directory)
    values: dict = {
        key: getattr(stored, key)
        for key in app_config.OVERRIDE_KEYS
        if getattr(stored, key) is not None
    }
    values.update(from_environment(environment))
    for key, value in (explicit or {}).items():
        if value is not None:
            values[key] = value
    return ConfigInput(project_directory=project_directory, **values)
