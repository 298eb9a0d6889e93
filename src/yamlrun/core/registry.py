"""Registry of declared libraries and runtimes, loaded from list.yaml."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from yamlrun.core.errors import ConfigError, MissingFieldError, NotFoundError

logger = logging.getLogger(__name__)


# Scalars with these tags stay strings, so "version: 1.10" is "1.10" and not 1.1
_TEXT_TAGS = frozenset(
    {
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:float",
        "tag:yaml.org,2002:timestamp",
    }
)


class _RegistryLoader(yaml.SafeLoader):
    """SafeLoader that keeps numbers and dates as the text written in list.yaml."""


_RegistryLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class LibraryEntry:
    """One declared third-party library."""

    id: str
    lang: str | None
    name: str | None
    version: str | None
    runtime: str | None
    source: str | None = None
    build_script: str | None = None
    build_image: str | None = None
    homepage: str | None = None

    @property
    def source_filename(self) -> str | None:
        """Final path segment of the source URL, or None without a source."""
        if self.source is None:
            return None
        return self.source.rsplit("/", 1)[-1]

    @property
    def effective_build_image(self) -> str | None:
        return self.build_image or self.runtime

    def require(self, field_name: str) -> str:
        """Return a field that must be set, raising MissingFieldError otherwise."""
        value = getattr(self, field_name.replace("-", "_"))
        if not value:
            raise MissingFieldError(self.id, field_name)
        return value


@dataclass(frozen=True)
class RuntimeEntry:
    """A named base environment that library builds are scoped to."""

    runtime: str


@dataclass(frozen=True)
class Registry:
    """Immutable catalog of libraries and runtimes.

    Loaded once at the CLI entry point and stored in YamlrunContext.
    """

    libraries: Mapping[str, LibraryEntry]
    runtimes: tuple[RuntimeEntry, ...]

    def lookup(self, library_id: str) -> LibraryEntry:
        """Return the entry for library_id.

        Raises:
            NotFoundError: If library_id is not declared
        """
        if library_id not in self.libraries:
            raise NotFoundError(library_id)
        return self.libraries[library_id]

    def sorted_ids(self) -> list[str]:
        return sorted(self.libraries)

    def runtime_ids(self) -> list[str]:
        return [item.runtime for item in self.runtimes]


def _parse_library(library_id: str, fields: Any, runtime_ids: set[str]) -> LibraryEntry:
    if not isinstance(fields, dict):
        raise ConfigError(f"Library {library_id} must be a mapping of fields")

    entry = LibraryEntry(
        id=library_id,
        lang=_optional_str(fields.get("lang")),
        name=_optional_str(fields.get("name")),
        version=_optional_str(fields.get("version")),
        runtime=_optional_str(fields.get("runtime")),
        source=_optional_str(fields.get("source")),
        build_script=_optional_str(fields.get("build-script")),
        build_image=_optional_str(fields.get("build-image")),
        homepage=_optional_str(fields.get("homepage")),
    )

    if entry.runtime is not None and entry.runtime not in runtime_ids:
        raise ConfigError(f"Library {library_id} references undeclared runtime {entry.runtime}")
    if entry.build_script is not None and entry.source is None:
        raise ConfigError(f"Library {library_id} has a build-script but no source")
    return entry


def parse_registry(data: Any, origin: str = "<registry>") -> Registry:
    """Build a Registry from already-parsed YAML data.

    Raises:
        ConfigError: If the structure is malformed or inconsistent
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Registry {origin} must be a mapping")

    raw_runtimes = data.get("runtimes") or []
    if not isinstance(raw_runtimes, list):
        raise ConfigError(f"'runtimes' in {origin} must be a list")

    runtimes: list[RuntimeEntry] = []
    for item in raw_runtimes:
        if not isinstance(item, dict) or not item.get("runtime"):
            raise ConfigError(f"Runtime entry without 'runtime' in {origin}: {item!r}")
        runtimes.append(RuntimeEntry(runtime=str(item["runtime"])))
    runtime_ids = {item.runtime for item in runtimes}

    raw_libraries = data.get("libraries") or {}
    if not isinstance(raw_libraries, dict):
        raise ConfigError(f"'libraries' in {origin} must be a mapping")

    libraries = {
        str(library_id): _parse_library(str(library_id), fields, runtime_ids)
        for library_id, fields in raw_libraries.items()
    }
    return Registry(libraries=libraries, runtimes=tuple(runtimes))


def load_registry(path: Path) -> Registry:
    """Load list.yaml.

    Raises:
        ConfigError: If the file is absent, is not valid YAML, or is inconsistent
    """
    if not path.exists():
        raise ConfigError(f"Registry not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=_RegistryLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {path}: {e}") from e

    registry = parse_registry(data, origin=str(path))
    logger.debug(
        "Loaded %d libraries and %d runtimes from %s",
        len(registry.libraries),
        len(registry.runtimes),
        path,
    )
    return registry
