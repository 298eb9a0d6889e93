"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from yamlrun.core.builder import BuildExecutor
from yamlrun.core.inventory import InventoryReporter
from yamlrun.core.layout import ProjectLayout, discover_layout
from yamlrun.core.reconcile import StateReconciler
from yamlrun.core.registry import Registry, load_registry
from yamlrun.core.sources import SourceFetcher
from yamlrun.core.user_feedback import InteractiveFeedback, UserFeedback
from yamlrun.ops.docker import Docker
from yamlrun.ops.docker_real import RealDocker
from yamlrun.ops.downloader import Downloader
from yamlrun.ops.downloader_real import RealDownloader


@dataclass(frozen=True)
class YamlrunContext:
    """Immutable context holding all dependencies for yamlrun operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: Registry
    layout: ProjectLayout
    docker: Docker
    downloader: Downloader
    feedback: UserFeedback

    def source_fetcher(self) -> SourceFetcher:
        return SourceFetcher(self.layout, self.downloader, self.feedback)

    def build_executor(self) -> BuildExecutor:
        return BuildExecutor(self.layout, self.docker, self.feedback)

    def reconciler(self) -> StateReconciler:
        return StateReconciler(
            self.registry,
            self.layout,
            self.source_fetcher(),
            self.build_executor(),
            self.feedback,
        )

    def inventory(self) -> InventoryReporter:
        return InventoryReporter(self.registry, self.layout, self.docker)

    @staticmethod
    def for_test(
        root: Path,
        registry: Registry | None = None,
        docker: Docker | None = None,
        downloader: Downloader | None = None,
        feedback: UserFeedback | None = None,
    ) -> "YamlrunContext":
        """Create test context with fakes for every unspecified dependency.

        If registry is None it is loaded from root/list.yaml.

        Example:
            >>> docker = FakeDocker(exit_code=1)
            >>> ctx = YamlrunContext.for_test(tmp_path, docker=docker)
        """
        from tests.fakes.docker_fake import FakeDocker
        from tests.fakes.downloader import FakeDownloader
        from tests.fakes.user_feedback import FakeUserFeedback

        layout = ProjectLayout(root=root)
        return YamlrunContext(
            registry=registry if registry is not None else load_registry(layout.registry_path),
            layout=layout,
            docker=docker if docker is not None else FakeDocker(),
            downloader=downloader if downloader is not None else FakeDownloader(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
        )


def create_context(cwd: Path | None = None) -> YamlrunContext:
    """Create production context: discover the project root and load list.yaml once.

    Raises:
        ConfigError: If no registry is found or it cannot be loaded
    """
    layout = discover_layout(cwd if cwd is not None else Path.cwd())
    return YamlrunContext(
        registry=load_registry(layout.registry_path),
        layout=layout,
        docker=RealDocker(),
        downloader=RealDownloader(),
        feedback=InteractiveFeedback(),
    )
