"""Tests for the resize command."""

from pathlib import Path

from pytest_mock import MockerFixture

from coverfit.features.covers import FileStatus, ProcessResult, ResizeConfig
from coverfit.ui.cli.args.options import ResizeArgs
from coverfit.ui.cli.commands import ResizeCommand


def _args(tmp_path: Path, verbose: bool) -> ResizeArgs:
    return ResizeArgs(
        directory=tmp_path,
        config=ResizeConfig(width=300, height=300),
        verbose=verbose,
        log_file=tmp_path / "coverfit.log",
    )


def test_execute_runs_service_and_shows_summary(tmp_path: Path, mocker: MockerFixture) -> None:
    """Verbose runs show the progress bar and the summary."""

    app = mocker.Mock()
    expected = [ProcessResult(source_path=tmp_path / "a.mp3", status=FileStatus.RESIZED)]
    command = ResizeCommand(_args(tmp_path, verbose=True), app=app)
    run = mocker.patch.object(command.progress_display, "run_with_service", return_value=expected)
    show = mocker.patch.object(command.result_display, "show_results")

    results = command.execute()

    assert results == expected
    request = run.call_args.args[1]
    assert request.directory == tmp_path
    assert request.config.size == (300, 300)
    assert run.call_args.kwargs["show_progress"] is True
    show.assert_called_once_with(expected, quiet=False)


def test_quiet_run_hides_progress_and_summary(tmp_path: Path, mocker: MockerFixture) -> None:
    command = ResizeCommand(_args(tmp_path, verbose=False), app=mocker.Mock())
    run = mocker.patch.object(command.progress_display, "run_with_service", return_value=[])
    show = mocker.patch.object(command.result_display, "show_results")

    _ = command.execute()

    assert run.call_args.kwargs["show_progress"] is False
    show.assert_called_once_with([], quiet=True)
