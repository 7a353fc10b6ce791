"""Contains exceptions raised while mirroring a repository."""


class MirrorError(Exception):
    """Base class for every error that aborts a sync run."""

    pass


class ConfigurationError(MirrorError):
    """Raised when the run cannot be configured."""

    pass


class RepositoryConfigurationError(ConfigurationError):
    """Raised when the repository identity cannot be resolved or is malformed."""

    pass


class RequiredConfigurationElementError(ConfigurationError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str, env_name: str) -> None:
        """Initializes the exception with the name of the missing element."""
        super().__init__(f"Missing required configuration element: {name} (command line option {cli_name}, environment variable {env_name})")
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name


class FetchError(MirrorError):
    """Raised when fetching a remote resource fails.

    Carries the exit status of the external client (a process exit code, or an
    HTTP status code for the in-process client) and whatever it wrote to its
    error stream.
    """

    def __init__(self, resource: str, exit_status: int | None, stderr: str = "") -> None:
        """Initializes the exception with the failing resource and captured output."""
        detail = stderr.strip() or "no error output"
        super().__init__(f"Fetching {resource} failed with exit status {exit_status}: {detail}")
        self.resource = resource
        self.exit_status = exit_status
        self.stderr = stderr


class ResponseShapeError(MirrorError):
    """Raised when a response does not have the shape the sync run depends on."""

    pass


class PersistenceError(MirrorError):
    """Raised when writing the mirror to disk fails."""

    def __init__(self, path: str, reason: str) -> None:
        """Initializes the exception with the path that could not be written."""
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
