"""Fake downloader for testing without network access."""

from pathlib import Path

from yamlrun.ops.downloader import Downloader


class FakeDownloader(Downloader):
    """In-memory fake that records fetch() calls.

    Successful fetches create an empty file named after the URL's last path
    segment, like wget would.

    Examples:
        >>> downloader = FakeDownloader(failing_urls={"https://example.org/x.tar.gz"})
        >>> downloader.fetch("https://example.org/x.tar.gz", tmp_path)
        False
    """

    def __init__(
        self, *, failing_urls: set[str] | None = None, leave_partial_file: bool = False
    ) -> None:
        """Initialize fake.

        Args:
            failing_urls: URLs for which fetch() reports failure
            leave_partial_file: Whether a failing fetch still writes a file,
                like an interrupted wget
        """
        self._failing_urls = failing_urls or set()
        self._leave_partial_file = leave_partial_file
        self._fetch_calls: list[tuple[str, Path]] = []

    def fetch(self, url: str, dest_dir: Path) -> bool:
        self._fetch_calls.append((url, dest_dir))
        target = dest_dir / url.rsplit("/", 1)[-1]
        if url in self._failing_urls:
            if self._leave_partial_file:
                target.write_bytes(b"partial")
            return False
        target.write_bytes(b"")
        return True

    @property
    def fetch_calls(self) -> list[tuple[str, Path]]:
        """Get the list of (url, dest_dir) fetch() calls.

        This property is for test assertions only.
        """
        return self._fetch_calls.copy()
