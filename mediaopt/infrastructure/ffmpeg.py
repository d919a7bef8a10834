import os
import logging
from pathlib import Path
from typing import List
from mediaopt.config.models import VideoConfig
from mediaopt.domain.models import OutcomeStatus, TranscodeResult
from mediaopt.infrastructure.runner import BoundedRunner

class FFmpegAdapter:
    """Wrapper around ffmpeg for in-place video transcoding."""

    def __init__(self, runner: BoundedRunner, config: VideoConfig):
        self.runner = runner
        self.config = config
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def temp_output_path(source: Path) -> Path:
        """clip.MOV -> clip.opt.MOV"""
        return source.with_name(f"{source.stem}.opt{source.suffix}")

    def _build_args(self, source: Path, output: Path) -> List[str]:
        """Constructs the ffmpeg command line arguments."""
        return [
            "-y",  # Overwrite a stale candidate
            "-i", str(source),
            "-c:v", self.config.codec,
            "-crf", str(self.config.crf),
            "-preset", self.config.preset,
            "-c:a", self.config.audio_codec,
            "-b:a", self.config.audio_bitrate,
            str(output),
        ]

    def transcode(self, source: Path) -> TranscodeResult:
        """Transcodes `source` and keeps the result only if it is strictly smaller."""
        output = self.temp_output_path(source)
        self.logger.info(f"FFMPEG_START: {source.name} (codec={self.config.codec}, crf={self.config.crf})")

        outcome = self.runner.run("ffmpeg", self._build_args(source, output), self.config.timeout_seconds)

        if outcome.status == OutcomeStatus.TIMED_OUT:
            output.unlink(missing_ok=True)
            self.logger.warning(f"FFMPEG_END: {source.name} status=timed_out")
            return TranscodeResult(status=OutcomeStatus.TIMED_OUT, bytes_saved=0)

        if not outcome.ok or not output.exists():
            output.unlink(missing_ok=True)
            if outcome.ok:
                error = "ffmpeg produced no output"
            else:
                error = f"ffmpeg exited with code {outcome.exit_code}"
            self.logger.error(f"FFMPEG_END: {source.name} status=failed ({error})")
            return TranscodeResult(status=OutcomeStatus.TOOL_FAILURE, bytes_saved=0, error_message=error)

        original_size = source.stat().st_size
        new_size = output.stat().st_size
        if new_size < original_size:
            os.replace(output, source)
            saved = original_size - new_size
            self.logger.info(f"FFMPEG_END: {source.name} status=replaced saved={saved} bytes")
            return TranscodeResult(status=OutcomeStatus.SUCCESS, bytes_saved=saved)

        output.unlink()
        self.logger.info(f"FFMPEG_END: {source.name} status=kept_original ({new_size} >= {original_size})")
        return TranscodeResult(status=OutcomeStatus.SUCCESS, bytes_saved=0)
