"""Installed records: persisted evidence that a library build succeeded.

One YAML document per library, stored at
docker/<runtime>/build/yaml/info/<id>. Records are only created after a
successful build and are removed when a build fails.
"""

import logging
import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from yamlrun.core.registry import LibraryEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstalledRecord:
    """Library version that last built successfully."""

    id: str
    name: str
    version: str
    source: str
    homepage: str
    lang: str

    @staticmethod
    def from_library(lib: LibraryEntry) -> "InstalledRecord":
        return InstalledRecord(
            id=lib.id,
            name=lib.require("name"),
            version=lib.require("version"),
            source=lib.source or "",
            homepage=lib.homepage or "-",
            lang=lib.lang or "-",
        )

    @staticmethod
    def from_document(doc: Mapping[str, Any]) -> "InstalledRecord":
        """Parse an InstalledRecord from its YAML document form."""

        def text(key: str, default: str) -> str:
            value = doc.get(key)
            return default if value is None else str(value)

        return InstalledRecord(
            id=text("ID", ""),
            name=text("NAME", ""),
            version=text("VERSION", ""),
            source=text("SOURCE", ""),
            homepage=text("HOMEPAGE", "-"),
            lang=text("LANG", "-"),
        )

    def to_document(self) -> dict[str, str]:
        return {
            "ID": self.id,
            "NAME": self.name,
            "VERSION": self.version,
            "SOURCE": self.source,
            "HOMEPAGE": self.homepage,
            "LANG": self.lang,
        }


def read_record(path: Path) -> InstalledRecord | None:
    """Read an installed record.

    Returns:
        None if no record file exists or it is not a valid record, which
        makes the next build decision rebuild the library
    """
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            doc = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.debug("Ignoring unparsable installed record %s: %s", path, e)
        return None

    if not isinstance(doc, dict):
        logger.debug("Ignoring malformed installed record %s", path)
        return None
    return InstalledRecord.from_document(doc)


def write_record(path: Path, record: InstalledRecord) -> None:
    """Write an installed record, replacing any previous one atomically.

    The document goes to a temporary file in the same directory first, so a
    reader never sees a partially written record.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = yaml.safe_dump(
        record.to_document(),
        explicit_start=True,
        sort_keys=False,
        default_flow_style=False,
    )

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    logger.debug("Wrote installed record %s (version %s)", path, record.version)


def remove_record(path: Path) -> bool:
    """Delete an installed record if present.

    Returns:
        True if a record file was removed
    """
    if not path.exists():
        return False
    path.unlink()
    logger.debug("Removed installed record %s", path)
    return True
