import logging
from pathlib import Path
from typing import Iterable, List
from mediaopt.domain.classifier import MediaCategory, classify
from mediaopt.domain.models import MediaFile

class FileScanner:
    """Enumerates classified media files under a directory."""

    def __init__(self, skip_suffixes: Iterable[str] = ()):
        self.skip_suffixes = tuple(s.lower() for s in skip_suffixes)
        self.logger = logging.getLogger(__name__)

    def scan(self, root: Path) -> List[MediaFile]:
        files = []
        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.is_symlink():
                continue
            if self.skip_suffixes and path.name.lower().endswith(self.skip_suffixes):
                self.logger.debug(f"Skipping leftover temp file {path}")
                continue
            category = classify(path)
            if category == MediaCategory.OTHER:
                continue
            files.append(MediaFile(path=path, category=category, size_bytes=path.stat().st_size))
        self.logger.info(f"Discovered {len(files)} media files in {root}")
        return files
