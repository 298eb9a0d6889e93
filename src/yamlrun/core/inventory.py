"""Inventory of runtime images and the library versions installed in them.

Each declared runtime maps to an image named yamlrun/runtime-<runtime>.
Installed versions are read by running docker/global/info.sh inside the
image, which prints one installed-record YAML document per library. That
output is cached per image id under .cache/ and never invalidated: a
rebuilt image gets a new id and therefore a new cache file.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import yaml

from yamlrun.core.constants import CONTAINER_UTILS_DIR, IMAGE_PREFIX, INFO_SCRIPT, WILDCARD_RUNTIME
from yamlrun.core.installed import InstalledRecord
from yamlrun.core.layout import ProjectLayout
from yamlrun.core.registry import Registry
from yamlrun.ops.docker import Docker, ImageSummary

logger = logging.getLogger(__name__)


def runtime_image_name(runtime: str) -> str:
    return f"{IMAGE_PREFIX}/runtime-{runtime}"


@dataclass(frozen=True)
class ImageInfo:
    """A runtime image together with the libraries installed in it."""

    summary: ImageSummary
    installed: Mapping[str, InstalledRecord]


@dataclass(frozen=True)
class LibraryRow:
    id: str
    name: str
    lang: str
    declared_version: str
    installed_version: str | None


@dataclass(frozen=True)
class RuntimeReport:
    """Inventory for one declared runtime. image is None when no image was built."""

    runtime: str
    image_name: str
    image: ImageInfo | None
    rows: list[LibraryRow]


def parse_info_documents(text: str) -> dict[str, InstalledRecord]:
    """Parse multi-document info.sh output into records keyed by library id."""
    installed: dict[str, InstalledRecord] = {}
    for doc in yaml.safe_load_all(text):
        if not isinstance(doc, dict):
            continue
        record = InstalledRecord.from_document(doc)
        installed[record.id] = record
    return installed


class InventoryReporter:
    """Collects per-runtime image metadata and installed-vs-declared versions."""

    def __init__(self, registry: Registry, layout: ProjectLayout, docker: Docker) -> None:
        self._registry = registry
        self._layout = layout
        self._docker = docker

    def collect(self) -> list[RuntimeReport]:
        images = {
            summary.repository: summary
            for summary in self._docker.list_images(runtime_image_name("*"))
        }

        reports: list[RuntimeReport] = []
        for runtime in self._registry.runtime_ids():
            image_name = runtime_image_name(runtime)
            summary = images.get(image_name)
            if summary is None:
                reports.append(
                    RuntimeReport(runtime=runtime, image_name=image_name, image=None, rows=[])
                )
                continue

            info = ImageInfo(summary=summary, installed=self.installed_libraries(summary))
            reports.append(
                RuntimeReport(
                    runtime=runtime,
                    image_name=image_name,
                    image=info,
                    rows=self._rows_for(runtime, info),
                )
            )
        return reports

    def installed_libraries(self, summary: ImageSummary) -> dict[str, InstalledRecord]:
        """Read installed records from the cache, or by introspecting the image."""
        cache_file = self._layout.image_info_cache_file(summary.id)
        if cache_file.exists():
            logger.debug("Using cached image info %s", cache_file)
            return parse_info_documents(cache_file.read_text(encoding="utf-8"))

        output = self._docker.run_and_capture(
            summary.repository,
            {str(self._layout.global_utils_dir): CONTAINER_UTILS_DIR},
            [f"{CONTAINER_UTILS_DIR}/{INFO_SCRIPT}"],
        )
        if output is None:
            logger.warning("Could not read installed libraries from %s", summary.repository)
            return {}

        try:
            installed = parse_info_documents(output)
        except yaml.YAMLError as e:
            logger.warning("Unparsable info output from %s: %s", summary.repository, e)
            return {}

        self._layout.cache_dir.mkdir(parents=True, exist_ok=True)
        cache_file.write_text(output, encoding="utf-8")
        return installed

    def _rows_for(self, runtime: str, info: ImageInfo) -> list[LibraryRow]:
        rows: list[LibraryRow] = []
        for library_id in self._registry.sorted_ids():
            lib = self._registry.libraries[library_id]
            if runtime != WILDCARD_RUNTIME and lib.runtime != runtime:
                continue
            record = info.installed.get(library_id)
            rows.append(
                LibraryRow(
                    id=library_id,
                    name=lib.name or "",
                    lang=lib.lang or "",
                    declared_version=lib.version or "",
                    installed_version=record.version if record is not None else None,
                )
            )
        return rows
