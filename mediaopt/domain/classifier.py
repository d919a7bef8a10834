from enum import Enum
from pathlib import Path
from typing import Union

JPEG_EXTENSIONS = frozenset({"jpg", "jpeg"})
PNG_EXTENSIONS = frozenset({"png"})
HEIC_EXTENSIONS = frozenset({"heic"})
IMAGE_EXTENSIONS = JPEG_EXTENSIONS | PNG_EXTENSIONS | HEIC_EXTENSIONS
VIDEO_EXTENSIONS = frozenset({"mp4", "mov"})


class MediaCategory(str, Enum):
    JPEG = "JPEG"
    PNG = "PNG"
    HEIC = "HEIC"
    VIDEO = "VIDEO"
    OTHER = "OTHER"


def _extension(path: Union[str, Path]) -> str:
    """Lower-cased extension without the dot, or '' when there is none."""
    # Path('.jpg').suffix is '' so dot-files never match
    return Path(path).suffix[1:].lower()


def is_image(path: Union[str, Path]) -> bool:
    return _extension(path) in IMAGE_EXTENSIONS


def is_jpeg(path: Union[str, Path]) -> bool:
    return _extension(path) in JPEG_EXTENSIONS


def is_png(path: Union[str, Path]) -> bool:
    return _extension(path) in PNG_EXTENSIONS


def is_heic(path: Union[str, Path]) -> bool:
    return _extension(path) in HEIC_EXTENSIONS


def is_video(path: Union[str, Path]) -> bool:
    return _extension(path) in VIDEO_EXTENSIONS


def classify(path: Union[str, Path]) -> MediaCategory:
    """Maps a path to its media category using the extension only."""
    ext = _extension(path)
    if ext in JPEG_EXTENSIONS:
        return MediaCategory.JPEG
    if ext in PNG_EXTENSIONS:
        return MediaCategory.PNG
    if ext in HEIC_EXTENSIONS:
        return MediaCategory.HEIC
    if ext in VIDEO_EXTENSIONS:
        return MediaCategory.VIDEO
    return MediaCategory.OTHER
