"""Real downloader using wget."""

import logging
from pathlib import Path

from yamlrun.cli.output import user_output
from yamlrun.core.subprocess import run_subprocess_with_context
from yamlrun.ops.downloader import Downloader

logger = logging.getLogger(__name__)


class RealDownloader(Downloader):
    """Download with `wget --no-verbose --timestamping` run inside dest_dir."""

    def fetch(self, url: str, dest_dir: Path) -> bool:
        cmd = ["wget", "--no-verbose", "--timestamping", url]
        user_output(" ".join(cmd))
        try:
            result = run_subprocess_with_context(
                cmd,
                f"download {url}",
                cwd=dest_dir,
                capture_output=False,
                check=False,
            )
        except RuntimeError as e:
            # wget not installed
            logger.warning("%s", e)
            return False

        if result.returncode != 0:
            logger.debug("wget exited with %d for %s", result.returncode, url)
            return False
        return True
