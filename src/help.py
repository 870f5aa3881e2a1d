"""Command reference for indexkit."""

import sys

COMMANDS = [
    (
        "resolve [--project-dir DIR] [--json]",
        "Print index store, database and libIndexStore paths",
    ),
    ("resolve --index-store-path PATH", "Override the detected index store"),
    ("resolve --include-system --include-stale", "Keep system/stale results"),
    ("help", "Show this reference"),
]

CONFIG_COMMANDS = [
    ("config show", "Print stored overrides"),
    ("config set KEY VALUE [--project DIR]", "Store an override"),
]

ENV_VARS = [
    ("BUILT_PRODUCTS_DIR", "Set by Xcode; selects the DerivedData index store"),
    ("PWD", "Package root for SwiftPM builds (.build/debug/Index/Store)"),
    ("INDEXKIT_INDEX_STORE_PATH", "Override index_store_path"),
    ("INDEXKIT_INDEX_DATABASE_PATH", "Override index_database_path"),
    ("INDEXKIT_LIBRARY_PATH", "Override library_path"),
    ("INDEXKIT_EXCLUDE_SYSTEM_RESULTS", "true/false"),
    ("INDEXKIT_EXCLUDE_STALE_RESULTS", "true/false"),
]

DEV_COMMANDS = [
    ("pytest", "Run tests"),
    ("ruff check .", "Lint"),
    ("ruff format .", "Format"),
    ("ty check", "Type check"),
    ("poe precommit", "Run ty + ruff + tests"),
]


def main() -> None:
    filter_arg = sys.argv[1] if len(sys.argv) > 1 else None

    if filter_arg and filter_arg not in ("--dev",):
        all_rows = COMMANDS + CONFIG_COMMANDS + ENV_VARS + DEV_COMMANDS
        matches = [(n, d) for n, d in all_rows if filter_arg in n]
        if matches:
            _print_table(matches)
        else:
            print(f"No command matching '{filter_arg}'")
            sys.exit(1)
        return

    print("indexkit commands\n")
    _print_table(COMMANDS)

    print("\nconfig commands\n")
    _print_table(CONFIG_COMMANDS)

    print("\nenvironment\n")
    _print_table(ENV_VARS)

    if filter_arg == "--dev" or not filter_arg:
        print("\ndev commands\n")
        _print_table(DEV_COMMANDS)


def _print_table(rows: list[tuple[str, str]]) -> None:
    name_w = max(len(r[0]) for r in rows)
    for name, desc in rows:
        print(f"  {name:<{name_w}}  {desc}")
