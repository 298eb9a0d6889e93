"""Real Docker operations using subprocess to call Docker CLI.

All operations follow LBYL philosophy: check conditions before acting,
let exceptions bubble to error boundaries.
"""

import logging
import subprocess
from pathlib import Path

from yamlrun.core.subprocess import run_subprocess_with_context
from yamlrun.ops.docker import Docker, ImageSummary

logger = logging.getLogger(__name__)

IMAGE_FORMAT = "{{.Repository}}\t{{.Tag}}\t{{.ID}}\t{{.CreatedAt}}\t{{.Size}}"


def _volume_args(volumes: dict[str, str]) -> list[str]:
    args: list[str] = []
    for host_path, container_path in volumes.items():
        args.extend(["-v", f"{host_path}:{container_path}"])
    return args


def parse_image_lines(output: str) -> list[ImageSummary]:
    """Parse tab-separated `docker images` output produced with IMAGE_FORMAT."""
    images: list[ImageSummary] = []
    for line in output.splitlines():
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) != 5:
            logger.debug("Skipping unexpected docker images line: %r", line)
            continue
        repository, tag, image_id, created, size = fields
        images.append(
            ImageSummary(repository=repository, tag=tag, id=image_id, created=created, size=size)
        )
    return images


class RealDocker(Docker):
    """Real Docker operations using Docker CLI via subprocess.

    Example:
        docker = RealDocker()
        if not docker.is_daemon_running():
            raise RuntimeError("Docker daemon not running")
        docker.list_images("yamlrun/runtime-*")
    """

    def is_daemon_running(self) -> bool:
        """Check if Docker daemon is running.

        Returns:
            True if Docker daemon responds to `docker info`, False otherwise
        """
        try:
            result = subprocess.run(
                ["docker", "info"],
                capture_output=True,
                check=False,
                timeout=5,
            )
            return result.returncode == 0
        except (FileNotFoundError, subprocess.TimeoutExpired):
            return False

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
        """Run container and wait for it, returning its exit code.

        LBYL checks:
        - Validates volume mount paths exist on host

        Raises:
            FileNotFoundError: If volume mount paths don't exist
            RuntimeError: If the docker binary is not installed
        """
        for host_path_str in volumes.keys():
            host_path = Path(host_path_str)
            if not host_path.exists():
                raise FileNotFoundError(f"Volume mount path not found: {host_path}")

        docker_cmd = ["docker", "run", "--rm"]
        if interactive:
            docker_cmd.append("-it")
        if user is not None:
            docker_cmd.extend(["--user", user])
        if workdir is not None:
            docker_cmd.extend(["-w", workdir])
        for key, value in env_vars.items():
            docker_cmd.extend(["-e", f"{key}={value}"])
        docker_cmd.extend(_volume_args(volumes))
        docker_cmd.append(image_tag)
        docker_cmd.extend(command)

        # check=False: the exit code is the result
        result = run_subprocess_with_context(
            docker_cmd,
            f"run container {image_tag}",
            capture_output=False,
            check=False,
        )
        return result.returncode

    def run_and_capture(
        self,
        image_tag: str,
        volumes: dict[str, str],
        command: list[str],
    ) -> str | None:
        docker_cmd = ["docker", "run", "-i", "--rm", *_volume_args(volumes), image_tag, *command]
        result = run_subprocess_with_context(
            docker_cmd,
            f"run container {image_tag}",
            check=False,
            stdin=subprocess.DEVNULL,
        )
        if result.returncode != 0:
            logger.debug(
                "Container %s exited with %d: %s",
                image_tag,
                result.returncode,
                (result.stderr or "").strip(),
            )
            return None
        return result.stdout

    def list_images(self, reference: str) -> list[ImageSummary]:
        result = run_subprocess_with_context(
            ["docker", "images", "--format", IMAGE_FORMAT, reference],
            "list docker images",
        )
        return parse_image_lines(result.stdout)
