import pytest
from pathlib import Path
from unittest.mock import MagicMock
from mediaopt.config.models import ImageConfig
from mediaopt.domain.models import SubprocessOutcome
from mediaopt.infrastructure.heic import HeicConverter

def fake_runner(decode=SubprocessOutcome.success(), encode=SubprocessOutcome.success(),
                write_jpg=True, write_webp=True):
    """Runner whose tools write their outputs like heif-convert and cwebp would."""
    def run(command, args, timeout):
        if command == "heif-convert":
            if write_jpg:
                Path(args[1]).write_bytes(b"jpeg-data")
            return decode
        if command == "cwebp":
            if write_webp:
                Path(args[-1]).write_bytes(b"webp")
            return encode
        raise AssertionError(f"unexpected command {command}")

    runner = MagicMock()
    runner.run.side_effect = run
    return runner

@pytest.fixture
def heic(tmp_path, file_factory):
    return file_factory(tmp_path / "IMG_0001.HEIC", 4 * 1024 * 1024)

def listing(directory: Path):
    return sorted(p.name for p in directory.iterdir())

def test_success_leaves_only_webp(heic):
    runner = fake_runner()
    assert HeicConverter(runner, ImageConfig(webp_quality=55)).convert(heic) is True

    assert listing(heic.parent) == ["IMG_0001.webp"]
    decode_call, encode_call = runner.run.call_args_list
    assert decode_call[0][:2] == ("heif-convert", [str(heic), str(heic.with_suffix(".jpg"))])
    assert encode_call[0][:2] == (
        "cwebp", ["-q", "55", str(heic.with_suffix(".jpg")), "-o", str(heic.with_suffix(".webp"))]
    )

@pytest.mark.parametrize("runner_kwargs", [
    {"decode": SubprocessOutcome.failure(1)},
    {"decode": SubprocessOutcome.timed_out()},
    {"write_jpg": False},
    {"encode": SubprocessOutcome.failure(255)},
    {"encode": SubprocessOutcome.timed_out()},
    {"write_webp": False},
])
def test_any_stage_failure_rolls_back(heic, runner_kwargs):
    size = heic.stat().st_size
    assert HeicConverter(fake_runner(**runner_kwargs), ImageConfig()).convert(heic) is False

    assert listing(heic.parent) == ["IMG_0001.HEIC"]
    assert heic.stat().st_size == size

def test_decode_failure_skips_encoding(heic):
    runner = fake_runner(decode=SubprocessOutcome.failure(1))
    HeicConverter(runner, ImageConfig()).convert(heic)
    assert runner.run.call_count == 1

@pytest.mark.parametrize("existing", ["IMG_0001.jpg", "IMG_0001.webp"])
def test_existing_sibling_is_never_overwritten(heic, existing):
    sibling = heic.parent / existing
    sibling.write_bytes(b"user file")
    runner = fake_runner()

    assert HeicConverter(runner, ImageConfig()).convert(heic) is False
    assert not runner.run.called
    assert sibling.read_bytes() == b"user file"
    assert heic.exists()
