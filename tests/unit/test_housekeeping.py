import os
import pytest
from mediaopt.infrastructure.housekeeping import HousekeepingService
from mediaopt.config.models import AppConfig
from mediaopt.infrastructure.file_scanner import FileScanner
from mediaopt.infrastructure.disk_usage import folder_size
from mediaopt.domain.classifier import MediaCategory
from mediaopt.domain.errors import FolderSizeError

SUFFIXES = [".opt.mp4", ".opt.mov"]

def test_sweeper_removes_known_suffixes(tmp_path, file_factory):
    file_factory(tmp_path / "a.opt.mp4", 10)
    file_factory(tmp_path / "deep" / "b.OPT.MOV", 10)
    keep = [
        file_factory(tmp_path / "c.tmp", 1),
        file_factory(tmp_path / "a.mp4", 10),
        file_factory(tmp_path / "deep" / "photo.jpg", 10),
        file_factory(tmp_path / "opt.mp4", 10),
    ]

    removed = HousekeepingService(SUFFIXES).cleanup_temp_files(tmp_path)

    assert removed == 2
    assert sorted(p.name for p in tmp_path.rglob("*") if p.is_file()) == sorted(p.name for p in keep)

def test_default_suffixes_spare_user_tmp_files(tmp_path, file_factory):
    draft = file_factory(tmp_path / "Downloads" / "thesis_draft.tmp", 100)
    file_factory(tmp_path / "clip.opt.mp4", 10)

    removed = HousekeepingService(AppConfig().general.temp_suffixes).cleanup_temp_files(tmp_path)

    assert removed == 1
    assert draft.exists()

def test_sweeper_is_idempotent(tmp_path, file_factory):
    file_factory(tmp_path / "x.opt.mp4", 10)
    service = HousekeepingService(SUFFIXES)

    assert service.cleanup_temp_files(tmp_path) == 1
    assert service.cleanup_temp_files(tmp_path) == 0

def test_sweeper_ignores_directories_and_missing_root(tmp_path):
    (tmp_path / "weird.opt.mp4").mkdir()
    service = HousekeepingService(SUFFIXES)

    assert service.cleanup_temp_files(tmp_path) == 0
    assert (tmp_path / "weird.opt.mp4").is_dir()
    assert service.cleanup_temp_files(tmp_path / "absent") == 0

def test_scanner_classifies_and_sorts(media_dir, file_factory):
    file_factory(media_dir / "sub" / "clip.opt.mp4", 10)

    files = FileScanner(skip_suffixes=SUFFIXES).scan(media_dir)

    assert [f.path.relative_to(media_dir).as_posix() for f in files] == [
        "icon.png", "photo.jpg", "sub/big.heic", "sub/clip.mp4"
    ]
    assert [f.category for f in files] == [
        MediaCategory.PNG, MediaCategory.JPEG, MediaCategory.HEIC, MediaCategory.VIDEO
    ]
    assert files[1].size_bytes == 10 * 1024

def test_scanner_without_skip_suffixes_sees_leftovers(tmp_path, file_factory):
    file_factory(tmp_path / "clip.opt.mp4", 10)
    assert len(FileScanner().scan(tmp_path)) == 1

def test_folder_size(tmp_path, file_factory):
    file_factory(tmp_path / "a.bin", 1000)
    file_factory(tmp_path / "nested" / "deeper" / "b.bin", 24)
    os.symlink(tmp_path / "a.bin", tmp_path / "link.bin")

    assert folder_size(tmp_path) == 1024

def test_folder_size_empty(tmp_path):
    assert folder_size(tmp_path) == 0

def test_folder_size_not_a_directory(tmp_path, file_factory):
    with pytest.raises(FolderSizeError):
        folder_size(tmp_path / "missing")
    with pytest.raises(FolderSizeError):
        folder_size(file_factory(tmp_path / "file.bin", 1))
