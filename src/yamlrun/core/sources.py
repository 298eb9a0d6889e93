"""Source fetching: make sure a library's upstream archive exists locally."""

import logging
from pathlib import Path

from yamlrun.core.errors import DownloadFailure
from yamlrun.core.layout import ProjectLayout
from yamlrun.core.registry import LibraryEntry
from yamlrun.core.user_feedback import UserFeedback
from yamlrun.ops.downloader import Downloader

logger = logging.getLogger(__name__)


class SourceFetcher:
    """Downloads source archives into docker/<runtime>/sources.

    Presence is checked by filename only: an existing file is never
    re-downloaded or verified.
    """

    def __init__(
        self, layout: ProjectLayout, downloader: Downloader, feedback: UserFeedback
    ) -> None:
        self._layout = layout
        self._downloader = downloader
        self._feedback = feedback

    def ensure_source(self, lib: LibraryEntry) -> bool:
        """Download lib's source archive unless it is already present.

        Returns:
            False if a download was attempted and failed, True otherwise
            (including libraries without a source)

        Raises:
            MissingFieldError: If the library has a source but no runtime
        """
        if lib.source is None:
            logger.debug("%s has no source, nothing to fetch", lib.id)
            return True

        runtime = lib.require("runtime")
        filename = lib.source_filename
        if not filename:
            self._feedback.error(f"Cannot derive a filename from source {lib.source}")
            return False

        src_dir = self._layout.sources_dir(runtime)
        src_dir.mkdir(parents=True, exist_ok=True)
        target = src_dir / filename

        if target.exists():
            self._feedback.info(f"{filename} exists, skip")
            return True

        self._feedback.info(f"Downloading {lib.source}")
        try:
            self._download(lib.source, target)
        except DownloadFailure as e:
            logger.warning("%s", e)
            self._feedback.error(str(e))
            return False
        return True

    def _download(self, url: str, target: Path) -> None:
        if self._downloader.fetch(url, target.parent):
            return
        # wget may leave a truncated file behind
        target.unlink(missing_ok=True)
        raise DownloadFailure(url)
