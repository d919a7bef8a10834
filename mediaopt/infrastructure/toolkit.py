from pathlib import Path
from typing import Optional
from mediaopt.config.models import AppConfig
from mediaopt.domain.models import TranscodeResult
from mediaopt.infrastructure.runner import BoundedRunner
from mediaopt.infrastructure.exif_tool import ExifToolAdapter
from mediaopt.infrastructure.jpegoptim import JpegoptimAdapter
from mediaopt.infrastructure.optipng import OptipngAdapter
from mediaopt.infrastructure.heic import HeicConverter
from mediaopt.infrastructure.ffmpeg import FFmpegAdapter

class ExternalToolkit:
    """MediaToolkit backed by the external command-line tools."""

    def __init__(self, config: AppConfig, runner: Optional[BoundedRunner] = None):
        runner = runner or BoundedRunner()
        self.exif = ExifToolAdapter(runner, config.images)
        self.jpegoptim = JpegoptimAdapter(runner, config.images)
        self.optipng = OptipngAdapter(runner, config.images)
        self.heic = HeicConverter(runner, config.images)
        self.ffmpeg = FFmpegAdapter(runner, config.video)

    def strip_metadata(self, path: Path) -> bool:
        return self.exif.strip_metadata(path)

    def optimize_jpeg(self, path: Path) -> bool:
        return self.jpegoptim.optimize(path)

    def optimize_png(self, path: Path) -> bool:
        return self.optipng.optimize(path)

    def convert_heic(self, path: Path) -> bool:
        return self.heic.convert(path)

    def transcode_video(self, path: Path) -> TranscodeResult:
        return self.ffmpeg.transcode(path)
