"""Tests for SourceFetcher."""

from pathlib import Path

import pytest

from tests.fakes.downloader import FakeDownloader
from tests.fakes.user_feedback import FakeUserFeedback
from yamlrun.core.errors import MissingFieldError
from yamlrun.core.layout import ProjectLayout
from yamlrun.core.registry import LibraryEntry
from yamlrun.core.sources import SourceFetcher

URL = "https://example.org/dist/foo-2.0.tar.gz"


def _lib(source: str | None = URL, runtime: str | None = "static") -> LibraryEntry:
    return LibraryEntry(
        id="foo", lang="C", name="libfoo", version="2.0", runtime=runtime, source=source
    )


def _fetcher(tmp_path: Path, downloader: FakeDownloader) -> tuple[SourceFetcher, FakeUserFeedback]:
    feedback = FakeUserFeedback()
    return SourceFetcher(ProjectLayout(root=tmp_path), downloader, feedback), feedback


def test_library_without_source_is_a_noop(tmp_path: Path) -> None:
    downloader = FakeDownloader()
    fetcher, _ = _fetcher(tmp_path, downloader)

    assert fetcher.ensure_source(_lib(source=None)) is True
    assert downloader.fetch_calls == []
    assert not (tmp_path / "docker").exists()


def test_missing_source_is_downloaded_into_runtime_sources(tmp_path: Path) -> None:
    downloader = FakeDownloader()
    fetcher, _ = _fetcher(tmp_path, downloader)

    assert fetcher.ensure_source(_lib()) is True

    src_dir = tmp_path / "docker" / "static" / "sources"
    assert downloader.fetch_calls == [(URL, src_dir)]
    assert (src_dir / "foo-2.0.tar.gz").exists()


def test_download_is_reported_without_downloader_details(tmp_path: Path) -> None:
    downloader = FakeDownloader()
    fetcher, feedback = _fetcher(tmp_path, downloader)

    fetcher.ensure_source(_lib())

    assert feedback.texts("info") == [f"Downloading {URL}"]
    assert not any("wget" in text for text in feedback.texts())


def test_existing_file_is_never_downloaded_again(tmp_path: Path) -> None:
    downloader = FakeDownloader()
    fetcher, feedback = _fetcher(tmp_path, downloader)

    fetcher.ensure_source(_lib())
    fetcher.ensure_source(_lib())

    assert len(downloader.fetch_calls) == 1
    assert "foo-2.0.tar.gz exists, skip" in feedback.texts("info")


def test_failed_download_returns_false_and_removes_partial_file(tmp_path: Path) -> None:
    downloader = FakeDownloader(failing_urls={URL}, leave_partial_file=True)
    fetcher, feedback = _fetcher(tmp_path, downloader)

    assert fetcher.ensure_source(_lib()) is False

    assert not (tmp_path / "docker" / "static" / "sources" / "foo-2.0.tar.gz").exists()
    assert feedback.texts("error") == [f"Failed to download {URL}"]


def test_source_without_runtime_raises_before_download(tmp_path: Path) -> None:
    downloader = FakeDownloader()
    fetcher, _ = _fetcher(tmp_path, downloader)

    with pytest.raises(MissingFieldError, match="No runtime for foo"):
        fetcher.ensure_source(_lib(runtime=None))
    assert downloader.fetch_calls == []
