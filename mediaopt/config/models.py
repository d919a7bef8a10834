from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_LOG_FILE = Path.home() / ".cache" / "mediaopt" / "mediaopt.log"

class ImageConfig(BaseModel):
    jpeg_max_quality: int = Field(default=60, ge=1, le=100)
    png_level: int = Field(default=7, ge=0, le=7)
    webp_quality: int = Field(default=60, ge=0, le=100)
    heic_min_bytes: int = Field(default=3 * 1024 * 1024, ge=0)
    timeout_seconds: float = Field(default=120.0, gt=0)

class VideoConfig(BaseModel):
    codec: str = "libx264"
    crf: int = Field(default=28, ge=0, le=51)
    preset: str = "medium"
    audio_codec: str = "aac"
    audio_bitrate: str = "128k"
    timeout_seconds: float = Field(default=1800.0, gt=0)

    @field_validator('audio_bitrate')
    @classmethod
    def validate_bitrate(cls, v: str) -> str:
        if not v[:-1].isdigit() or v[-1].lower() not in {"k", "m"}:
            raise ValueError(f"Invalid audio bitrate {v!r}. Expected a value like '128k'.")
        return v

class GeneralConfig(BaseModel):
    debug: bool = False
    log_file: Optional[Path] = DEFAULT_LOG_FILE
    temp_suffixes: List[str] = Field(default_factory=lambda: [".opt.mp4", ".opt.mov"])

    @field_validator('log_file')
    @classmethod
    def expand_log_file(cls, v: Optional[Path]) -> Optional[Path]:
        return v.expanduser() if v is not None else None

    @field_validator('temp_suffixes')
    @classmethod
    def normalize_suffixes(cls, v: List[str]) -> List[str]:
        suffixes = []
        for suffix in v:
            if not suffix.startswith("."):
                raise ValueError(f"Temp suffix {suffix!r} must start with '.'")
            suffixes.append(suffix.lower())
        return suffixes

class AppConfig(BaseModel):
    general: GeneralConfig = Field(default_factory=GeneralConfig)
    images: ImageConfig = Field(default_factory=ImageConfig)
    video: VideoConfig = Field(default_factory=VideoConfig)

    @model_validator(mode='after')
    def video_timeout_exceeds_image_timeout(self) -> "AppConfig":
        if self.video.timeout_seconds <= self.images.timeout_seconds:
            raise ValueError("video.timeout_seconds must be larger than images.timeout_seconds")
        return self
