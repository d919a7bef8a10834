from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, ConfigDict
from mediaopt.domain.classifier import MediaCategory

class OutcomeStatus(str, Enum):
    SUCCESS = "SUCCESS"
    TOOL_FAILURE = "TOOL_FAILURE"
    TIMED_OUT = "TIMED_OUT"

class SubprocessOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: OutcomeStatus
    exit_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS

    @classmethod
    def success(cls) -> "SubprocessOutcome":
        return cls(status=OutcomeStatus.SUCCESS, exit_code=0)

    @classmethod
    def failure(cls, exit_code: Optional[int]) -> "SubprocessOutcome":
        return cls(status=OutcomeStatus.TOOL_FAILURE, exit_code=exit_code)

    @classmethod
    def timed_out(cls) -> "SubprocessOutcome":
        return cls(status=OutcomeStatus.TIMED_OUT)

class MediaFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    category: MediaCategory
    size_bytes: int = 0

class TranscodeResult(BaseModel):
    status: OutcomeStatus
    bytes_saved: int = 0
    error_message: Optional[str] = None

class RunCounters(BaseModel):
    metadata_cleaned: int = 0
    jpg_optimized: int = 0
    png_optimized: int = 0
    heic_found: int = 0
    heic_converted: int = 0
    videos_found: int = 0
    videos_optimized: int = 0
    videos_failed: int = 0
    video_bytes_saved: int = 0

class RunSummary(BaseModel):
    counters: RunCounters
    cancelled: bool = False
    files_total: int = 0
    files_processed: int = 0
