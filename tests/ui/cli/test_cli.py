"""Tests for CLI functionality."""

from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagreader.ui.cli import CommandProcessor, main

AUDIO: bytes = b"\xff\xfb\x90\x64" + b"\x00" * 256


@pytest.fixture
def tagged_file(
    tmp_path: Path,
    id3v2_frame: Callable[..., bytes],
    id3v2_tag: Callable[..., bytes],
    utf8_body: Callable[[str], bytes],
) -> Path:
    """Write a file with an ID3v2.3 artist and numeric genre."""
    path = tmp_path / "tagged.mp3"
    frames = id3v2_frame(3, "TPE1", utf8_body("CLI Artist")) + id3v2_frame(
        3, "TCON", b"\x00(8)"
    )
    _ = path.write_bytes(id3v2_tag(3, frames) + AUDIO)
    return path


def test_main_prints_fields(tagged_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tagged_file), "--show-header"]) == 0

    out = capsys.readouterr().out
    assert "CLI Artist" in out
    assert "Jazz" in out
    assert "ID3v2.3.0" in out


def test_exit_code_on_failure(tmp_path: Path, tagged_file: Path) -> None:
    untagged = tmp_path / "untagged.mp3"
    _ = untagged.write_bytes(AUDIO)

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([str(tagged_file), str(untagged)])
    assert excinfo.value.code == 1


def test_keyboard_interrupt(tagged_file: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "tagreader.ui.cli.cli.ReadCommand.execute", side_effect=KeyboardInterrupt
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([str(tagged_file)])
    assert excinfo.value.code == 130
