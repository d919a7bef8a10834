import logging
from pathlib import Path
from typing import List
from mediaopt.config.models import ImageConfig
from mediaopt.infrastructure.runner import BoundedRunner

class ExifToolAdapter:
    """Wrapper around exiftool for metadata stripping."""

    def __init__(self, runner: BoundedRunner, config: ImageConfig):
        self.runner = runner
        self.config = config
        self.logger = logging.getLogger(__name__)

    def _build_args(self, path: Path) -> List[str]:
        return ["-overwrite_original", "-all=", str(path)]

    def strip_metadata(self, path: Path) -> bool:
        """Removes all tags in place. Failure and timeout leave the file as-is."""
        outcome = self.runner.run("exiftool", self._build_args(path), self.config.timeout_seconds)
        if not outcome.ok:
            self.logger.info(f"Metadata not stripped from {path.name}: {outcome.status.value}")
        return outcome.ok
