import logging
from pathlib import Path
from typing import Iterable

class HousekeepingService:
    """Removes intermediate files left behind by failed or interrupted runs."""

    def __init__(self, suffixes: Iterable[str]):
        self.suffixes = tuple(s.lower() for s in suffixes)
        self.logger = logging.getLogger(__name__)

    def cleanup_temp_files(self, root: Path) -> int:
        if not root.exists() or not self.suffixes:
            return 0

        removed = 0
        # Materialize first: deleting while rglob iterates is unsafe
        for path in list(root.rglob("*")):
            if not path.name.lower().endswith(self.suffixes):
                continue
            if not path.is_file() and not path.is_symlink():
                continue
            try:
                path.unlink()
                removed += 1
            except FileNotFoundError:
                continue
            self.logger.debug(f"Removed temp file {path}")

        if removed > 0:
            self.logger.info(f"Cleaned up {removed} temp files in {root}")
        return removed
