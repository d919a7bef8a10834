import logging
from pathlib import Path
from mediaopt.config.models import ImageConfig
from mediaopt.infrastructure.runner import BoundedRunner

class HeicConverter:
    """Two-stage HEIC -> JPEG -> WebP conversion.

    The intermediate JPEG and the WebP share the HEIC's stem. The original
    HEIC is only removed once both stages have succeeded; on any other path
    the directory is rolled back to its prior state.
    """

    def __init__(self, runner: BoundedRunner, config: ImageConfig):
        self.runner = runner
        self.config = config
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _remove(path: Path):
        path.unlink(missing_ok=True)

    def convert(self, path: Path) -> bool:
        temp_jpg = path.with_suffix(".jpg")
        webp_out = path.with_suffix(".webp")

        # Never clobber or delete a file the user already has
        for existing in (temp_jpg, webp_out):
            if existing.exists():
                self.logger.warning(f"HEIC_SKIP: {path.name} ({existing.name} already exists)")
                return False

        self.logger.info(f"HEIC_START: {path.name} ({path.stat().st_size} bytes)")
        decoded = self.runner.run("heif-convert", [str(path), str(temp_jpg)], self.config.timeout_seconds)
        if not decoded.ok or not temp_jpg.exists():
            self.logger.warning(f"HEIC_DECODE_FAILED: {path.name} ({decoded.status.value})")
            self._remove(temp_jpg)
            return False

        encoded = self.runner.run(
            "cwebp",
            ["-q", str(self.config.webp_quality), str(temp_jpg), "-o", str(webp_out)],
            self.config.timeout_seconds,
        )
        if not encoded.ok or not webp_out.exists():
            self.logger.warning(f"HEIC_ENCODE_FAILED: {path.name} ({encoded.status.value})")
            self._remove(temp_jpg)
            self._remove(webp_out)
            return False

        self._remove(temp_jpg)
        self._remove(path)
        self.logger.info(f"HEIC_END: {path.name} -> {webp_out.name} ({webp_out.stat().st_size} bytes)")
        return True
