"""Docker operations interface for containerized builds and image inventory.

This module defines the abstract interface for Docker operations, using
ABC-based dependency injection for testability.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ImageSummary:
    """One line of `docker images` output."""

    repository: str
    tag: str
    id: str
    created: str
    size: str


class Docker(ABC):
    """Abstract interface for Docker operations.

    Real implementations use subprocess to call the Docker CLI. Fake
    implementations are pure in-memory for unit tests without requiring a
    Docker daemon.
    """

    @abstractmethod
    def is_daemon_running(self) -> bool:
        """Check if Docker daemon is running and accessible.

        Returns:
            True if Docker daemon is running, False otherwise
        """
        ...

    @abstractmethod
    def run_container(
        self,
        image_tag: str,
        volumes: dict[str, str],
        env_vars: dict[str, str],
        command: list[str],
        user: str | None = None,
        workdir: str | None = None,
        interactive: bool = True,
    ) -> int:
        """Run a container to completion and return its exit code.

        Args:
            image_tag: Docker image tag to run
            volumes: Volume mounts, host path -> container path. The container
                path may carry a mount option suffix such as ":ro".
            env_vars: Environment variables to set in container
            command: Command and arguments to execute in container
            user: User (uid or uid:gid) to run as, None for the image default
            workdir: Working directory inside the container
            interactive: Whether to attach a TTY

        Returns:
            Exit code from container process

        Raises:
            FileNotFoundError: If a volume mount path doesn't exist
            RuntimeError: If the docker binary cannot be executed
        """
        ...

    @abstractmethod
    def run_and_capture(
        self,
        image_tag: str,
        volumes: dict[str, str],
        command: list[str],
    ) -> str | None:
        """Run a container and return its stdout.

        Returns:
            Standard output, or None if the container exited non-zero
        """
        ...

    @abstractmethod
    def list_images(self, reference: str) -> list[ImageSummary]:
        """List local images matching a reference pattern (e.g. "yamlrun/runtime-*").

        Raises:
            RuntimeError: If `docker images` fails
        """
        ...
