"""User-level config for indexkit (default overrides, per-project overrides).

Reads/writes {platformdirs.user_config_dir("indexkit")}/config.toml.

Example config.toml:

    [defaults]
    exclude_system_results = false

    [projects."/Users/me/Code/App"]
    index_store_path = "/Users/me/DerivedData/App/Index.noindex/DataStore"
"""

import argparse
import tomllib
from pathlib import Path

import msgspec
import tomli_w
from platformdirs import user_config_dir


class Overrides(msgspec.Struct, forbid_unknown_fields=True, omit_defaults=True):
    index_store_path: str | None = None
    index_database_path: str | None = None
    library_path: str | None = None
    exclude_system_results: bool | None = None
    exclude_stale_results: bool | None = None


OVERRIDE_KEYS = tuple(Overrides.__struct_fields__)
BOOL_KEYS = frozenset({"exclude_system_results", "exclude_stale_results"})


def app_config_dir() -> Path:
    """Return the OS-native indexkit config directory."""
    return Path(user_config_dir("indexkit"))


def app_config_path() -> Path:
    """Return the path to config.toml."""
    return app_config_dir() / "config.toml"


def load() -> dict:
    """Read config.toml, returning empty dict if missing."""
    path = app_config_path()
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def save(config: dict) -> None:
    """Write config.toml, creating parent dir if needed."""
    path = app_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(tomli_w.dumps(config).encode())


def _convert(data: dict, where: str) -> Overrides:
    try:
        return msgspec.convert(data, Overrides)
    except msgspec.ValidationError as exc:
        raise SystemExit(f"Invalid {where} in {app_config_path()}: {exc}") from exc


def overrides_for(project_directory: str) -> Overrides:
    """Merge [defaults] with the [projects."<dir>"] table, project wins."""
    config = load()
    defaults = _convert(config.get("defaults", {}), "[defaults]")
    merged = msgspec.structs.asdict(defaults)
    project = config.get("projects", {}).get(project_directory)
    if project is not None:
        specific = _convert(project, f'[projects."{project_directory}"]')
        for key, value in msgspec.structs.asdict(specific).items():
            if value is not None:
                merged[key] = value
    return Overrides(**merged)


def set_override(key: str, value: str | bool, project: str | None = None) -> None:
    """Store one override under [defaults] or [projects."<project>"]."""
    if key not in OVERRIDE_KEYS:
        available = ", ".join(OVERRIDE_KEYS)
        raise SystemExit(f"Unknown key '{key}'. Available: {available}")
    config = load()
    if project is None:
        table = config.setdefault("defaults", {})
    else:
        table = config.setdefault("projects", {}).setdefault(project, {})
    table[key] = value
    _convert(table, f"value for {key}")
    save(config)


def show_main() -> None:
    """CLI: indexkit config show"""
    config = load()
    path = app_config_path()
    if not config:
        print(f"No overrides configured ({path}).")
        print("Run 'indexkit config set KEY VALUE' to add one.")
        return
    print(f"# {path}\n")
    print(tomli_w.dumps(config), end="")


def set_main() -> None:
    """CLI: indexkit config set KEY VALUE [--project DIR]"""
    import overrides

    parser = argparse.ArgumentParser(description="Store a resolution override")
    parser.add_argument("key", choices=OVERRIDE_KEYS, help="Override name")
    parser.add_argument("value", help="Path, or true/false for exclude_* keys")
    parser.add_argument(
        "--project",
        help="Only apply to this project directory (default: all projects)",
    )
    args = parser.parse_args()

    value: str | bool = args.value
    if args.key in BOOL_KEYS:
        value = overrides.parse_bool(args.value, args.key)
    set_override(args.key, value, project=args.project)
    where = f'projects."{args.project}"' if args.project else "defaults"
    print(f"Set {args.key} in [{where}] of {app_config_path()}")
