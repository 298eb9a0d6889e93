"""Build-state reconciliation.

Compares the declared version of a library with its installed record and
converges them:

    ABSENT      -- build ok   --> PRESENT(V)
    PRESENT(V)  -- same V     --> PRESENT(V)   (no build attempted)
    PRESENT(V)  -- V', ok     --> PRESENT(V')
    PRESENT(V)  -- V', failed --> ABSENT

A record is written only after the build succeeded, and removed when it
failed, so a record never claims a version that did not build.
"""

import logging
from enum import Enum

from yamlrun.core.builder import BuildExecutor
from yamlrun.core.errors import BuildFailure
from yamlrun.core.installed import InstalledRecord, read_record, remove_record, write_record
from yamlrun.core.layout import ProjectLayout
from yamlrun.core.registry import Registry
from yamlrun.core.sources import SourceFetcher
from yamlrun.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


class ReconcileOutcome(Enum):
    ALREADY_INSTALLED = "already-installed"
    BUILT = "built"
    FAILED = "failed"


class StateReconciler:
    """Decides whether a library needs a rebuild, runs it and records the result."""

    def __init__(
        self,
        registry: Registry,
        layout: ProjectLayout,
        fetcher: SourceFetcher,
        executor: BuildExecutor,
        feedback: UserFeedback,
    ) -> None:
        self._registry = registry
        self._layout = layout
        self._fetcher = fetcher
        self._executor = executor
        self._feedback = feedback

    def reconcile(self, library_id: str) -> ReconcileOutcome:
        """Bring library_id's installed record in line with the registry.

        Raises:
            NotFoundError: If library_id is not declared
            MissingFieldError: If name, version or runtime is absent; raised
                before anything is fetched or built
        """
        lib = self._registry.lookup(library_id)
        lib.require("name")
        version = lib.require("version")
        runtime = lib.require("runtime")

        self._feedback.info(f"Building {library_id}")
        if not self._fetcher.ensure_source(lib):
            logger.debug("Source fetch for %s failed, continuing to build decision", library_id)

        info_file = self._layout.info_file(runtime, library_id)
        record = read_record(info_file)
        # Plain string comparison, "1.10" and "1.10.0" are different versions
        if record is not None and record.version == version:
            self._feedback.info(f"{library_id} version {version} is already installed")
            return ReconcileOutcome.ALREADY_INSTALLED

        try:
            self._executor.run_build(lib)
        except BuildFailure as e:
            removed = remove_record(info_file)
            logger.debug("Build of %s failed, stale record removed: %s", library_id, removed)
            self._feedback.error(f"failed: {e}")
            return ReconcileOutcome.FAILED

        write_record(info_file, InstalledRecord.from_library(lib))
        self._feedback.success(f"ok, built {library_id} {version}")
        return ReconcileOutcome.BUILT
