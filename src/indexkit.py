"""Unified CLI dispatcher for indexkit.

Usage:
    indexkit <subcommand> [args...]
    indexkit config <subcommand> [args...]
    indexkit --help
"""

import importlib
import sys

SUBCOMMANDS: dict[str, tuple[str, str]] = {
    "resolve": ("resolve", "main"),
    "help": ("help", "main"),
}

NESTED_COMMANDS: dict[str, dict[str, tuple[str, str]]] = {
    "config": {
        "show": ("app_config", "show_main"),
        "set": ("app_config", "set_main"),
    },
}


def main() -> None:
    args = sys.argv[1:]

    if not args or args[0] in ("--help", "-h"):
        _show_help()
        return

    cmd = args[0]

    # Nested commands: indexkit config set ...
    if cmd in NESTED_COMMANDS:
        if len(args) < 2 or args[1] in ("--help", "-h"):
            _show_help()
            return

        subcmd = args[1]
        subcommands = NESTED_COMMANDS[cmd]

        if subcmd not in subcommands:
            print(f"Unknown command: {cmd} {subcmd}", file=sys.stderr)
            print(file=sys.stderr)
            _show_help(file=sys.stderr)
            sys.exit(1)

        module_path, func_name = subcommands[subcmd]
        sys.argv = [f"{cmd} {subcmd}", *args[2:]]
        _run(module_path, func_name)
        return

    if cmd not in SUBCOMMANDS:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        print(file=sys.stderr)
        _show_help(file=sys.stderr)
        sys.exit(1)

    module_path, func_name = SUBCOMMANDS[cmd]

    # Rewrite sys.argv so the subcommand's argparse sees the right program name
    sys.argv = [cmd, *args[1:]]
    _run(module_path, func_name)


def _run(module_path: str, func_name: str) -> None:
    mod = importlib.import_module(module_path)
    fn = getattr(mod, func_name)
    fn()


def _show_help(file=None) -> None:
    if file is None:
        file = sys.stdout
    import help as help_mod

    if file is sys.stdout:
        # Reset sys.argv so help:main doesn't see --help as a filter
        sys.argv = ["help"]
        help_mod.main()
    else:
        print("indexkit commands\n", file=file)
        for name, desc in help_mod.COMMANDS + help_mod.CONFIG_COMMANDS:
            print(f"  {name}  {desc}", file=file)
