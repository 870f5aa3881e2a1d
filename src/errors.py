"""Error kinds raised while resolving an indexkit configuration."""


class ResolutionError(Exception):
    """Base class; ``field`` names the configuration field that failed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class MissingEnvironmentVariable(ResolutionError):
    def __init__(self, field: str, name: str) -> None:
        super().__init__(field, f"Environment variable {name} is not set")
        self.name = name


class InvalidPath(ResolutionError):
    def __init__(self, field: str, value: str) -> None:
        super().__init__(field, f"Not a valid absolute path: {value!r}")
        self.value = value


class ToolchainNotFound(ResolutionError):
    def __init__(self, field: str, command: str, detail: str = "") -> None:
        message = f"Could not locate the active toolchain with `{command}`"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(field, message)
        self.command = command
