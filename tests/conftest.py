import pytest
from pathlib import Path
from typing import Callable, List, Optional, Tuple
from mediaopt.domain.models import OutcomeStatus, TranscodeResult

def make_file(path: Path, size: int) -> Path:
    """Creates a (sparse) file of exactly `size` bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.truncate(size)
    return path

class FakeToolkit:
    """Imitates the filesystem effects of the external tools without running them."""

    def __init__(self, on_call: Optional[Callable[[str, Path], None]] = None, video_ratio: float = 0.5):
        self.calls: List[Tuple[str, str]] = []
        self.on_call = on_call
        self.video_ratio = video_ratio

    def _record(self, op: str, path: Path):
        self.calls.append((op, path.name))
        if self.on_call:
            self.on_call(op, path)

    def strip_metadata(self, path: Path) -> bool:
        self._record("strip_metadata", path)
        return True

    def optimize_jpeg(self, path: Path) -> bool:
        self._record("optimize_jpeg", path)
        return True

    def optimize_png(self, path: Path) -> bool:
        self._record("optimize_png", path)
        return True

    def convert_heic(self, path: Path) -> bool:
        self._record("convert_heic", path)
        make_file(path.with_suffix(".webp"), path.stat().st_size // 4)
        path.unlink()
        return True

    def transcode_video(self, path: Path) -> TranscodeResult:
        self._record("transcode_video", path)
        original = path.stat().st_size
        new_size = int(original * self.video_ratio)
        if new_size >= original:
            return TranscodeResult(status=OutcomeStatus.SUCCESS, bytes_saved=0)
        make_file(path, new_size)
        return TranscodeResult(status=OutcomeStatus.SUCCESS, bytes_saved=original - new_size)

    def touched(self) -> List[str]:
        return sorted({name for _, name in self.calls})

@pytest.fixture
def fake_toolkit():
    return FakeToolkit()

@pytest.fixture
def media_dir(tmp_path):
    """Tree with one file of every category plus an unrelated file."""
    d = tmp_path / "media"
    make_file(d / "photo.jpg", 10 * 1024)
    make_file(d / "icon.png", 1024)
    make_file(d / "sub" / "big.heic", 5 * 1024 * 1024)
    make_file(d / "sub" / "clip.mp4", 50 * 1024 * 1024)
    (d / "notes.txt").write_text("not media")
    return d

@pytest.fixture
def file_factory():
    return make_file

@pytest.fixture
def toolkit_factory():
    return FakeToolkit
