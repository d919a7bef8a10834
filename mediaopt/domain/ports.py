from pathlib import Path
from typing import Protocol
from mediaopt.domain.models import TranscodeResult

class MediaToolkit(Protocol):
    """Operations the orchestrator applies to a single file.

    Every method is a soft operation: it reports failure through its return
    value and leaves the file in its prior state instead of raising.
    """

    def strip_metadata(self, path: Path) -> bool: ...

    def optimize_jpeg(self, path: Path) -> bool: ...

    def optimize_png(self, path: Path) -> bool: ...

    def convert_heic(self, path: Path) -> bool:
        """Replaces `path` with a sibling .webp; True only if that happened."""
        ...

    def transcode_video(self, path: Path) -> TranscodeResult: ...
