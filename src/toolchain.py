"""Locate libIndexStore inside the active Xcode toolchain."""

import os
import shlex
import subprocess
from collections.abc import Callable, Sequence

from errors import InvalidPath, ToolchainNotFound

TOOLCHAIN_ROOT_COMMAND = ["xcode-select", "-p"]
LIBRARY_SUFFIX = "Toolchains/XcodeDefault.xctoolchain/usr/lib/libIndexStore.dylib"
DEFAULT_TIMEOUT = 30.0

ProcessRunner = Callable[[Sequence[str]], str]


class CommandError(Exception):
    """An external command could not be run or exited non-zero."""


def run_command(argv: Sequence[str], timeout: float = DEFAULT_TIMEOUT) -> str:
    """Run argv and return its stripped stdout."""
    try:
        result = subprocess.run(
            list(argv),
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except subprocess.CalledProcessError as exc:
        stderr = (exc.stderr or "").strip()
        raise CommandError(stderr or f"exit status {exc.returncode}") from exc
    except subprocess.TimeoutExpired as exc:
        raise CommandError(f"timed out after {timeout:g}s") from exc
    except OSError as exc:
        raise CommandError(str(exc)) from exc
    return result.stdout.strip()


def library_path(runner: ProcessRunner = run_command) -> str:
    """Return the libIndexStore path under the toolchain root.

    Raises ToolchainNotFound when the discovery command fails or prints
    nothing, InvalidPath when it prints something that is not absolute.
    """
    command = shlex.join(TOOLCHAIN_ROOT_COMMAND)
    try:
        root = runner(TOOLCHAIN_ROOT_COMMAND).strip()
    except CommandError as exc:
        raise ToolchainNotFound("library_path", command, str(exc)) from exc
    if not root:
        raise ToolchainNotFound("library_path", command, "empty output")
    if not os.path.isabs(root):
        raise InvalidPath("library_path", root)
    return os.path.join(os.path.normpath(root), LIBRARY_SUFFIX)
