"""Classify the invoking build environment and locate its index store.

Xcode exports BUILT_PRODUCTS_DIR to everything it launches, pointing at
``DerivedData/<Project>/Build/Products/<Configuration>``. The index store sits
three levels above that, under ``Index.noindex/DataStore``. Command-line
(SwiftPM) builds have no such marker; their store lives under the package's
``.build/debug/Index/Store``.
"""

import os

import msgspec

from environment import BUILT_PRODUCTS_DIR, PWD, Environment
from errors import InvalidPath, MissingEnvironmentVariable

IDE_STORE_SUFFIX = "Index.noindex/DataStore"
COMMAND_LINE_STORE_SUFFIX = ".build/debug/Index/Store"


class IDEBuild(msgspec.Struct, frozen=True, tag="ide"):
    build_products_dir: str


class CommandLineBuild(msgspec.Struct, frozen=True, tag="command-line"):
    working_directory: str


Build = IDEBuild | CommandLineBuild


def classify(environment: Environment) -> Build:
    """Pick the build convention from the environment.

    Presence of the sentinel decides, not its value: an empty
    BUILT_PRODUCTS_DIR is still an IDE build (and fails path validation later).
    """
    if environment.has(BUILT_PRODUCTS_DIR):
        return IDEBuild(build_products_dir=environment.get(BUILT_PRODUCTS_DIR))
    cwd = environment.get(PWD)
    if cwd is None:
        raise MissingEnvironmentVariable("index_store_path", PWD)
    return CommandLineBuild(working_directory=cwd)


def _absolute(value: str) -> str:
    if not value or "\0" in value or not os.path.isabs(value):
        raise InvalidPath("index_store_path", value)
    return os.path.normpath(value)


def index_store_path(build: Build) -> str:
    """Return the index store location for a classified build."""
    if isinstance(build, IDEBuild):
        root = _absolute(build.build_products_dir)
        for _ in range(3):
            root = os.path.dirname(root)
        return os.path.join(root, IDE_STORE_SUFFIX)
    if isinstance(build, CommandLineBuild):
        cwd = _absolute(build.working_directory)
        return os.path.join(cwd, COMMAND_LINE_STORE_SUFFIX)
    raise TypeError(f"Unknown build kind: {build!r}")
