import logging
from pathlib import Path
from typing import List
from mediaopt.config.models import ImageConfig
from mediaopt.infrastructure.runner import BoundedRunner

class OptipngAdapter:
    """Lossless in-place PNG recompression with optipng."""

    def __init__(self, runner: BoundedRunner, config: ImageConfig):
        self.runner = runner
        self.config = config
        self.logger = logging.getLogger(__name__)

    def _build_args(self, path: Path) -> List[str]:
        return [f"-o{self.config.png_level}", "-quiet", str(path)]

    def optimize(self, path: Path) -> bool:
        outcome = self.runner.run("optipng", self._build_args(path), self.config.timeout_seconds)
        if not outcome.ok:
            self.logger.info(f"PNG not optimized {path.name}: {outcome.status.value}")
        return outcome.ok
