"""Project layout discovery.

Discovers the project root (the directory holding list.yaml) from a given
path without requiring a full YamlrunContext, so the registry can be loaded
before the context is created.
"""

from dataclasses import dataclass
from pathlib import Path

from yamlrun.core.constants import README_FILENAME, REGISTRY_FILENAME
from yamlrun.core.errors import ConfigError


@dataclass(frozen=True)
class ProjectLayout:
    """Filesystem locations used by yamlrun, all derived from the project root.

    <root>/list.yaml                               registry
    <root>/README.md                               documentation with library table
    <root>/.cache/                                 ImageInfo cache
    <root>/docker/global/                          utilities mounted into runtime images
    <root>/docker/<runtime>/sources/               downloaded source archives
    <root>/docker/<runtime>/utils/                 build scripts
    <root>/docker/<runtime>/build/                 build output
    <root>/docker/<runtime>/build/yaml/info/<id>   installed records
    """

    root: Path

    @property
    def registry_path(self) -> Path:
        return self.root / REGISTRY_FILENAME

    @property
    def readme_path(self) -> Path:
        return self.root / README_FILENAME

    @property
    def cache_dir(self) -> Path:
        return self.root / ".cache"

    @property
    def global_utils_dir(self) -> Path:
        return self.root / "docker" / "global"

    def runtime_dir(self, runtime: str) -> Path:
        return self.root / "docker" / runtime

    def sources_dir(self, runtime: str) -> Path:
        return self.runtime_dir(runtime) / "sources"

    def utils_dir(self, runtime: str) -> Path:
        return self.runtime_dir(runtime) / "utils"

    def build_dir(self, runtime: str) -> Path:
        return self.runtime_dir(runtime) / "build"

    def info_dir(self, runtime: str) -> Path:
        return self.build_dir(runtime) / "yaml" / "info"

    def info_file(self, runtime: str, library_id: str) -> Path:
        return self.info_dir(runtime) / library_id

    def image_info_cache_file(self, image_id: str) -> Path:
        return self.cache_dir / f"{image_id}-info.yaml"


def discover_layout(cwd: Path) -> ProjectLayout:
    """Walk up from `cwd` to find the directory containing list.yaml.

    Raises:
        ConfigError: If no parent directory holds a registry file
    """
    cur = cwd.resolve()
    for parent in [cur, *cur.parents]:
        if (parent / REGISTRY_FILENAME).is_file():
            return ProjectLayout(root=parent)
    raise ConfigError(f"No {REGISTRY_FILENAME} found in {cur} or any parent directory")
