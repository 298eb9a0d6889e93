"""Build executor: runs a library's build script inside its builder image.

Contract with the builder container:
- docker/<runtime>/sources is mounted read-only at /sources; SOURCE points
  at the archive inside it
- docker/<runtime>/build is mounted writable at /build and is the working
  directory of the script
- docker/<runtime>/utils is mounted writable at /buildutils and holds the
  build scripts
- VERSION, LIBNAME and HOME=/tmp/home are set; HOME is kept away from the
  invoking user's real home
- the container runs as the invoking user, not root
"""

import logging
import os
import sys

from yamlrun.core.constants import (
    CONTAINER_BUILD_DIR,
    CONTAINER_BUILDUTILS_DIR,
    CONTAINER_HOME,
    CONTAINER_SOURCES_DIR,
    IMAGE_PREFIX,
)
from yamlrun.core.errors import BuildFailure
from yamlrun.core.layout import ProjectLayout
from yamlrun.core.registry import LibraryEntry
from yamlrun.core.user_feedback import UserFeedback
from yamlrun.ops.docker import Docker

logger = logging.getLogger(__name__)


def current_user() -> str:
    return f"{os.getuid()}:{os.getgid()}"


class BuildExecutor:
    """Invokes the containerized build for one library."""

    def __init__(
        self,
        layout: ProjectLayout,
        docker: Docker,
        feedback: UserFeedback,
        user: str | None = None,
        interactive: bool | None = None,
    ) -> None:
        self._layout = layout
        self._docker = docker
        self._feedback = feedback
        self._user = user if user is not None else current_user()
        self._interactive = interactive if interactive is not None else sys.stdin.isatty()

    def builder_image(self, lib: LibraryEntry) -> str:
        return f"{IMAGE_PREFIX}/builder-{lib.effective_build_image}"

    def run_build(self, lib: LibraryEntry) -> bool:
        """Build lib from its fetched source.

        Returns:
            True if an external build ran, False for a library without a
            build-script (nothing to compile, trivially successful)

        Raises:
            MissingFieldError: If version, runtime or source is absent
            BuildFailure: If the container exits non-zero or cannot be started
        """
        if lib.build_script is None:
            self._feedback.warning(f"No build-script for {lib.id}")
            return False

        version = lib.require("version")
        runtime = lib.require("runtime")
        lib.require("source")

        build_dir = self._layout.build_dir(runtime)
        build_dir.mkdir(parents=True, exist_ok=True)

        image = self.builder_image(lib)
        volumes = {
            str(build_dir): CONTAINER_BUILD_DIR,
            str(self._layout.utils_dir(runtime)): CONTAINER_BUILDUTILS_DIR,
            str(self._layout.sources_dir(runtime)): f"{CONTAINER_SOURCES_DIR}:ro",
        }
        env_vars = {
            "HOME": CONTAINER_HOME,
            "VERSION": version,
            "SOURCE": f"{CONTAINER_SOURCES_DIR}/{lib.source_filename}",
            "LIBNAME": lib.id,
        }
        command = [f"{CONTAINER_BUILDUTILS_DIR}/{lib.build_script}"]

        self._feedback.info(f"Building {lib.id}...")
        logger.debug("Builder image %s, volumes %s, env %s", image, volumes, env_vars)
        try:
            exit_code = self._docker.run_container(
                image,
                volumes,
                env_vars,
                command,
                user=self._user,
                workdir=CONTAINER_BUILD_DIR,
                interactive=self._interactive,
            )
        except (FileNotFoundError, RuntimeError) as e:
            raise BuildFailure(lib.id, None, str(e)) from e

        if exit_code != 0:
            raise BuildFailure(lib.id, exit_code)
        return True
