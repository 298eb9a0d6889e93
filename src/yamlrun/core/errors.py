"""Error types raised by yamlrun.

Fatal errors (ConfigError, NotFoundError, MissingFieldError) abort the whole
invocation and are turned into a styled message by the CLI error boundary.

Non-fatal errors (BuildFailure, DownloadFailure) are caught at the
reconciliation and fetch boundaries and reported to the user there.
"""


class YamlrunError(Exception):
    """Base class for all yamlrun errors."""


class ConfigError(YamlrunError):
    """Registry file is missing, malformed or inconsistent."""


class NotFoundError(YamlrunError):
    """Library id is not declared in the registry."""

    def __init__(self, library_id: str) -> None:
        super().__init__(f"Library {library_id} not found")
        self.library_id = library_id


class MissingFieldError(YamlrunError):
    """A library entry lacks a field required for the requested action."""

    def __init__(self, library_id: str, field_name: str) -> None:
        super().__init__(f"No {field_name} for {library_id}")
        self.library_id = library_id
        self.field_name = field_name


class BuildFailure(YamlrunError):
    """Containerized build did not exit with status zero."""

    def __init__(self, library_id: str, exit_code: int | None, detail: str | None = None) -> None:
        message = f"Build of {library_id} failed"
        if exit_code is not None:
            message += f" (exit code {exit_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.library_id = library_id
        self.exit_code = exit_code


class DownloadFailure(YamlrunError):
    """Source archive could not be downloaded."""

    def __init__(self, url: str, detail: str | None = None) -> None:
        message = f"Failed to download {url}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.url = url
