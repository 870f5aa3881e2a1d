"""Resolve an indexkit configuration from overrides and the environment.

Resolution order, each step only when no override was given:
  1. exclude_system_results / exclude_stale_results default to True
  2. project_directory is taken as given (existence is not checked)
  3. index_database_path → <temp dir>/index_<pid>
  4. library_path → <xcode-select -p>/Toolchains/.../libIndexStore.dylib
  5. index_store_path → derived from BUILT_PRODUCTS_DIR (Xcode) or PWD (SwiftPM)

Any failure raises a ResolutionError; nothing partial is returned.
"""

import argparse
import os
import sys

import msgspec

import build_env
import toolchain
from environment import PWD, Environment
from errors import InvalidPath, ResolutionError
from toolchain import ProcessRunner, run_command


class ConfigInput(msgspec.Struct):
    project_directory: str
    index_store_path: str | None = None
    index_database_path: str | None = None
    library_path: str | None = None
    exclude_system_results: bool | None = None
    exclude_stale_results: bool | None = None


class ResolvedConfiguration(msgspec.Struct, frozen=True):
    project_directory: str
    index_store_path: str
    index_database_path: str
    library_path: str
    exclude_system_results: bool
    exclude_stale_results: bool


def _override(field: str, value: str) -> str:
    if not value or "\0" in value or not os.path.isabs(value):
        raise InvalidPath(field, value)
    return value


def default_database_path(environment: Environment) -> str:
    """Per-process database location inside the temp directory."""
    return os.path.join(environment.temp_dir, f"index_{environment.pid}")


class ConfigResolver:
    """Resolves ConfigInput records against one environment and runner."""

    def __init__(
        self,
        environment: Environment | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        if environment is None:
            environment = Environment.current()
        self.environment = environment
        if runner is None:
            runner = run_command
        self.runner = runner

    def resolve(self, config_input: ConfigInput) -> ResolvedConfiguration:
        exclude_system = config_input.exclude_system_results
        exclude_stale = config_input.exclude_stale_results

        if not config_input.project_directory:
            raise InvalidPath("project_directory", config_input.project_directory)

        if config_input.index_database_path is not None:
            database = _override(
                "index_database_path", config_input.index_database_path
            )
        else:
            database = default_database_path(self.environment)

        if config_input.library_path is not None:
            library = _override("library_path", config_input.library_path)
        else:
            library = toolchain.library_path(self.runner)

        if config_input.index_store_path is not None:
            store = _override("index_store_path", config_input.index_store_path)
        else:
            build = build_env.classify(self.environment)
            store = build_env.index_store_path(build)

        return ResolvedConfiguration(
            project_directory=config_input.project_directory,
            index_store_path=store,
            index_database_path=database,
            library_path=library,
            exclude_system_results=True if exclude_system is None else exclude_system,
            exclude_stale_results=True if exclude_stale is None else exclude_stale,
        )


def resolve(
    config_input: ConfigInput,
    environment: Environment | None = None,
    runner: ProcessRunner | None = None,
) -> ResolvedConfiguration:
    """Resolve config_input in one pass. Raises ResolutionError on failure."""
    return ConfigResolver(environment, runner).resolve(config_input)


def _print_table(config: ResolvedConfiguration) -> None:
    rows = msgspec.structs.asdict(config)
    name_w = max(len(k) for k in rows)
    for key, value in rows.items():
        if isinstance(value, bool):
            value = str(value).lower()
        print(f"  {key:<{name_w}}  {value}")


def main() -> None:
    """CLI: indexkit resolve [--project-dir DIR] [overrides...] [--json]"""
    from dotenv import find_dotenv, load_dotenv

    import overrides

    parser = argparse.ArgumentParser(
        description="Resolve index store, database and libIndexStore paths"
    )
    parser.add_argument(
        "--project-dir",
        help="Project root (default: $PWD)",
    )
    parser.add_argument("--index-store-path", help="Use this index store")
    parser.add_argument("--index-database-path", help="Use this index database")
    parser.add_argument("--library-path", help="Use this libIndexStore.dylib")
    parser.add_argument(
        "--include-system",
        action="store_true",
        help="Keep system symbols in results",
    )
    parser.add_argument(
        "--include-stale",
        action="store_true",
        help="Keep stale symbols in results",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON")
    args = parser.parse_args()

    load_dotenv(find_dotenv(usecwd=True))
    environment = Environment.current()
    project_dir = args.project_dir or environment.get(PWD) or os.getcwd()
    explicit = {
        "index_store_path": args.index_store_path,
        "index_database_path": args.index_database_path,
        "library_path": args.library_path,
        "exclude_system_results": False if args.include_system else None,
        "exclude_stale_results": False if args.include_stale else None,
    }
    config_input = overrides.build_input(project_dir, explicit, environment)

    try:
        config = resolve(config_input, environment)
    except ResolutionError as exc:
        print(f"Could not resolve {exc.field}: {exc.message}", file=sys.stderr)
        if exc.field == "project_directory":
            print("Pass --project-dir with the project root.", file=sys.stderr)
        else:
            flag = "--" + exc.field.replace("_", "-")
            print(
                f"Pass {flag} or set {overrides.env_var(exc.field)} to override.",
                file=sys.stderr,
            )
        sys.exit(1)

    if args.json:
        print(msgspec.json.encode(config).decode())
    else:
        _print_table(config)


if __name__ == "__main__":
    main()
