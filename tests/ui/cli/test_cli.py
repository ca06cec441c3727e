"""Tests for CLI functionality."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from coverfit.features.covers import DirectoryNotFoundError, FileStatus, ProcessResult, ResizeConfig
from coverfit.ui.cli import CommandProcessor, main
from coverfit.ui.cli.args.options import ResizeArgs


@pytest.fixture
def resize_args(tmp_path: Path) -> ResizeArgs:
    return ResizeArgs(
        directory=tmp_path,
        config=ResizeConfig(),
        verbose=False,
        log_file=tmp_path / "coverfit.log",
    )


@pytest.fixture
def mock_command(mocker: MockerFixture, resize_args: ResizeArgs) -> MagicMock:
    """Patch argument processing and the resize command.

    Returns:
        MagicMock: The patched ``ResizeCommand`` class.
    """
    parser = mocker.patch("coverfit.ui.cli.cli.ArgumentParser")
    parser.process_args.return_value = resize_args
    return mocker.patch("coverfit.ui.cli.cli.ResizeCommand")


def test_successful_run_returns_normally(mock_command: MagicMock, resize_args: ResizeArgs) -> None:
    mock_command.return_value.execute.return_value = [
        ProcessResult(source_path=Path("a.mp3"), status=FileStatus.RESIZED),
        ProcessResult(source_path=Path("b.mp3"), status=FileStatus.NO_TAG),
        ProcessResult(source_path=Path("c.mp3"), status=FileStatus.NO_PICTURES),
    ]

    CommandProcessor.process_command(["-d", "music"])

    mock_command.assert_called_once_with(resize_args)


def test_failed_file_exits_with_error(mock_command: MagicMock) -> None:
    mock_command.return_value.execute.return_value = [
        ProcessResult(source_path=Path("a.mp3"), status=FileStatus.RESIZED),
        ProcessResult(source_path=Path("b.mp3"), status=FileStatus.FAILED, error_message="boom"),
    ]

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["-d", "music"])

    assert exc_info.value.code == 1


def test_missing_directory_exits_with_error(mock_command: MagicMock, tmp_path: Path) -> None:
    mock_command.return_value.execute.side_effect = DirectoryNotFoundError(tmp_path / "missing")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["-d", "missing"])

    assert exc_info.value.code == 1


def test_keyboard_interrupt_exits_130(mock_command: MagicMock) -> None:
    mock_command.return_value.execute.side_effect = KeyboardInterrupt

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["-d", "music"])

    assert exc_info.value.code == 130


def test_unexpected_error_exits_with_error(mock_command: MagicMock) -> None:
    mock_command.return_value.execute.side_effect = RuntimeError("unexpected")

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["-d", "music"])

    assert exc_info.value.code == 1


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch.object(CommandProcessor, "process_command")

    assert main() == 0
    process.assert_called_once_with()
