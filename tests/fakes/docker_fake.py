"""Fake Docker operations for testing without Docker daemon.

This module provides an in-memory fake implementation of Docker for unit
testing. No actual Docker operations are performed - all calls are recorded
for verification in tests.
"""

from pathlib import Path

from yamlrun.ops.docker import Docker, ImageSummary


class FakeDocker(Docker):
    """In-memory fake Docker operations for unit testing.

    Records all calls for verification in tests. All operations succeed by
    default - configure failures through constructor arguments.

    Attributes:
        run_calls: List of (image_tag, volumes, env_vars, command, user, workdir, interactive)
        capture_calls: List of (image_tag, volumes, command)
        list_calls: List of references passed to list_images()

    Example:
        fake = FakeDocker(exit_code=1)
        code = fake.run_container("yamlrun/builder-static", {}, {}, ["/buildutils/x.sh"])
        assert code == 1
        assert len(fake.run_calls) == 1
    """

    def __init__(
        self,
        *,
        daemon_running: bool = True,
        exit_code: int = 0,
        images: list[ImageSummary] | None = None,
        capture_outputs: dict[str, str | None] | None = None,
        list_images_error: str | None = None,
    ) -> None:
        """Initialize fake with predetermined results.

        Args:
            daemon_running: Value returned by is_daemon_running()
            exit_code: Exit code returned by run_container()
            images: Images returned by list_images()
            capture_outputs: Image tag -> stdout returned by run_and_capture();
                None or a missing tag means the container failed
            list_images_error: If set, list_images() raises RuntimeError with
                this message, like a failing `docker images`
        """
        self.daemon_running = daemon_running
        self.exit_code = exit_code
        self._images = images or []
        self._capture_outputs = capture_outputs or {}
        self._list_images_error = list_images_error
        self.run_calls: list[
            tuple[str, dict[str, str], dict[str, str], list[str], str | None, str | None, bool]
        ] = []
        self.capture_calls: list[tuple[str, dict[str, str], list[str]]] = []
        self.list_calls: list[str] = []

    def is_daemon_running(self) -> bool:
        return self.daemon_running

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
        """Record run_container call and return configured exit code.

        LBYL checks (same as real implementation):
        - Validates volume mount paths exist on host

        Raises:
            FileNotFoundError: If volume mount paths don't exist
        """
        for host_path_str in volumes.keys():
            host_path = Path(host_path_str)
            if not host_path.exists():
                raise FileNotFoundError(f"Volume mount path not found: {host_path}")

        self.run_calls.append((image_tag, volumes, env_vars, command, user, workdir, interactive))
        return self.exit_code

    def run_and_capture(
        self,
        image_tag: str,
        volumes: dict[str, str],
        command: list[str],
    ) -> str | None:
        self.capture_calls.append((image_tag, volumes, command))
        return self._capture_outputs.get(image_tag)

    def list_images(self, reference: str) -> list[ImageSummary]:
        self.list_calls.append(reference)
        if self._list_images_error is not None:
            raise RuntimeError(self._list_images_error)
        return list(self._images)
