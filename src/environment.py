"""Process environment snapshot used during resolution."""

import os
import tempfile

import msgspec

# Set by Xcode for every build phase and scheme action it launches.
BUILT_PRODUCTS_DIR = "BUILT_PRODUCTS_DIR"
PWD = "PWD"


class Environment(msgspec.Struct, frozen=True):
    variables: dict[str, str] = {}
    pid: int = 0
    temp_dir: str = ""

    @classmethod
    def current(cls) -> "Environment":
        """Snapshot the running process."""
        return cls(
            variables=dict(os.environ),
            pid=os.getpid(),
            temp_dir=tempfile.gettempdir(),
        )

    def has(self, name: str) -> bool:
        return name in self.variables

    def get(self, name: str) -> str | None:
        return self.variables.get(name)
