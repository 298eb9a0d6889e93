"""Downloader interface for fetching upstream source archives."""

from abc import ABC, abstractmethod
from pathlib import Path


class Downloader(ABC):
    """Abstract interface for downloading a URL into a directory.

    The real implementation shells out to wget, which decides by timestamp
    whether the server copy is newer than a local one. Content is never
    verified.
    """

    @abstractmethod
    def fetch(self, url: str, dest_dir: Path) -> bool:
        """Download url into dest_dir, keeping the URL's final path segment as filename.

        Args:
            url: Source URL
            dest_dir: Existing directory to download into

        Returns:
            True if the downloader exited successfully, False otherwise
        """
        ...
