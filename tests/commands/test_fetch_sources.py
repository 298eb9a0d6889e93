"""CLI tests for the fetch-sources command."""

from pathlib import Path

from click.testing import CliRunner

from tests.fakes.downloader import FakeDownloader
from tests.test_utils.project import touch_source, write_project
from yamlrun.cli.cli import cli
from yamlrun.core.context import YamlrunContext

THREE_SOURCES = {
    "libraries": {
        "a-lib": {
            "name": "a",
            "version": "1",
            "runtime": "static",
            "source": "https://example.org/a-1.tar.gz",
        },
        "b-lib": {
            "name": "b",
            "version": "1",
            "runtime": "static",
            "source": "https://example.org/b-1.tar.gz",
        },
        "c-lib": {
            "name": "c",
            "version": "1",
            "runtime": "perl",
            "source": "https://example.org/c-1.tar.gz",
        },
    },
    "runtimes": [{"runtime": "static"}, {"runtime": "perl"}],
}


def test_fetch_all_downloads_only_missing_sources(tmp_path: Path) -> None:
    layout = write_project(tmp_path, THREE_SOURCES)
    touch_source(layout, "static", "a-1.tar.gz")
    touch_source(layout, "perl", "c-1.tar.gz")
    downloader = FakeDownloader()
    ctx = YamlrunContext.for_test(tmp_path, downloader=downloader)

    result = CliRunner().invoke(cli, ["fetch-sources"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert downloader.fetch_calls == [
        ("https://example.org/b-1.tar.gz", layout.sources_dir("static")),
    ]


def test_fetch_all_visits_libraries_in_id_order(tmp_path: Path) -> None:
    write_project(tmp_path, THREE_SOURCES)
    downloader = FakeDownloader()
    ctx = YamlrunContext.for_test(tmp_path, downloader=downloader)

    CliRunner().invoke(cli, ["fetch-sources"], obj=ctx, catch_exceptions=False)

    assert [url for url, _ in downloader.fetch_calls] == [
        "https://example.org/a-1.tar.gz",
        "https://example.org/b-1.tar.gz",
        "https://example.org/c-1.tar.gz",
    ]


def test_fetch_single_library(tmp_path: Path) -> None:
    write_project(tmp_path, THREE_SOURCES)
    downloader = FakeDownloader()
    ctx = YamlrunContext.for_test(tmp_path, downloader=downloader)

    result = CliRunner().invoke(cli, ["fetch-sources", "c-lib"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 0
    assert [url for url, _ in downloader.fetch_calls] == ["https://example.org/c-1.tar.gz"]


def test_fetch_failure_is_reported_after_all_libraries(tmp_path: Path) -> None:
    write_project(tmp_path, THREE_SOURCES)
    downloader = FakeDownloader(failing_urls={"https://example.org/a-1.tar.gz"})
    ctx = YamlrunContext.for_test(tmp_path, downloader=downloader)

    result = CliRunner().invoke(cli, ["fetch-sources"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert len(downloader.fetch_calls) == 3


def test_fetch_unknown_library_is_an_error(tmp_path: Path) -> None:
    write_project(tmp_path, THREE_SOURCES)
    downloader = FakeDownloader()
    ctx = YamlrunContext.for_test(tmp_path, downloader=downloader)

    result = CliRunner().invoke(cli, ["fetch-sources", "nope"], obj=ctx, catch_exceptions=False)

    assert result.exit_code == 1
    assert "Library nope not found" in result.output
    assert downloader.fetch_calls == []
