import logging
from pathlib import Path
from mediaopt.config.models import AppConfig
from mediaopt.domain.classifier import MediaCategory
from mediaopt.domain.models import MediaFile, OutcomeStatus, RunCounters, RunSummary
from mediaopt.domain.ports import MediaToolkit
from mediaopt.domain.events import (
    DiscoveryStarted, DiscoveryFinished, FileStarted, FileProcessed, FileFailed,
    RunCancelled, RunFinished
)
from mediaopt.infrastructure.event_bus import EventBus
from mediaopt.infrastructure.file_scanner import FileScanner
from mediaopt.pipeline.cancellation import CancellationToken

IMAGE_CATEGORIES = (MediaCategory.JPEG, MediaCategory.PNG, MediaCategory.HEIC)

class Orchestrator:
    """Visits every discovered file once, sequentially, applying matching operations."""

    def __init__(
        self,
        config: AppConfig,
        event_bus: EventBus,
        file_scanner: FileScanner,
        toolkit: MediaToolkit,
        cancel_token: CancellationToken
    ):
        self.config = config
        self.event_bus = event_bus
        self.file_scanner = file_scanner
        self.toolkit = toolkit
        self.cancel_token = cancel_token
        self.counters = RunCounters()
        self.logger = logging.getLogger(__name__)

    def _process_image(self, media_file: MediaFile):
        path = media_file.path
        if self.toolkit.strip_metadata(path):
            self.counters.metadata_cleaned += 1

        if media_file.category == MediaCategory.JPEG:
            if self.toolkit.optimize_jpeg(path):
                self.counters.jpg_optimized += 1
        elif media_file.category == MediaCategory.PNG:
            if self.toolkit.optimize_png(path):
                self.counters.png_optimized += 1
        elif media_file.category == MediaCategory.HEIC:
            # Size is taken now, after metadata stripping, not at discovery
            if path.stat().st_size > self.config.images.heic_min_bytes:
                self.counters.heic_found += 1
                if self.toolkit.convert_heic(path):
                    self.counters.heic_converted += 1

    def _process_video(self, media_file: MediaFile, index: int):
        self.counters.videos_found += 1
        result = self.toolkit.transcode_video(media_file.path)
        if result.status == OutcomeStatus.TOOL_FAILURE:
            # Timeouts are not errors: they only contribute zero savings
            self.counters.videos_failed += 1
            self.event_bus.publish(FileFailed(
                file=media_file, index=index,
                error_message=result.error_message or "transcode failed"
            ))
            return
        if result.bytes_saved > 0:
            self.counters.videos_optimized += 1
            self.counters.video_bytes_saved += result.bytes_saved

    def _process_file(self, media_file: MediaFile, index: int):
        if media_file.category in IMAGE_CATEGORIES:
            self._process_image(media_file)
        elif media_file.category == MediaCategory.VIDEO:
            self._process_video(media_file, index)

    def run(self, input_dir: Path) -> RunSummary:
        self.event_bus.publish(DiscoveryStarted(directory=input_dir))
        files = self.file_scanner.scan(input_dir)
        self.event_bus.publish(DiscoveryFinished(files_found=len(files)))

        processed = 0
        for index, media_file in enumerate(files):
            if self.cancel_token.cancelled:
                self.logger.info(f"Run cancelled after {processed} of {len(files)} files")
                self.event_bus.publish(RunCancelled(files_processed=processed, counters=self.counters))
                return RunSummary(
                    counters=self.counters, cancelled=True,
                    files_total=len(files), files_processed=processed
                )

            self.event_bus.publish(FileStarted(file=media_file, index=index))
            try:
                self._process_file(media_file, index)
            except OSError as e:
                self.logger.error(f"Exception processing {media_file.path}: {e}")
                self.event_bus.publish(FileFailed(file=media_file, index=index, error_message=str(e)))
            processed += 1
            self.event_bus.publish(FileProcessed(file=media_file, index=index))

        self.event_bus.publish(RunFinished(counters=self.counters))
        return RunSummary(counters=self.counters, files_total=len(files), files_processed=processed)
