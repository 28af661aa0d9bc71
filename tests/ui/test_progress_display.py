"""
Tests for the progress_display module using pytest.

Tests cover:
- RichProgressDisplay: context management and the start/update/complete lifecycle
- NoOpProgressDisplay: accepts every call and does nothing
"""

from unittest.mock import MagicMock

import pytest

from ui.progress import ProgressState
from ui.progress_display import NoOpProgressDisplay, RichProgressDisplay


@pytest.fixture
def mock_progress(mocker):
    progress = MagicMock()
    mocker.patch("ui.progress_display.create_progress", return_value=progress)
    return progress


@pytest.fixture
def mock_task_id(mocker):
    task_id = MagicMock()
    mocker.patch("ui.progress_display.create_task", return_value=task_id)
    return task_id


# ============================================================================
# Tests for RichProgressDisplay context management
# ============================================================================


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_enter_creates_progress(mocker):
    progress = MagicMock()
    mock_create = mocker.patch(
        "ui.progress_display.create_progress", return_value=progress
    )
    console = MagicMock()

    display = RichProgressDisplay(console)
    with display as entered:
        assert entered is display

    mock_create.assert_called_once_with(console)
    progress.__enter__.assert_called_once()
    progress.__exit__.assert_called_once_with(None, None, None)


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_exit_passes_exception(mock_progress):
    error = ValueError("boom")

    with pytest.raises(ValueError):
        with RichProgressDisplay():
            raise error

    exc_type, exc_val, _ = mock_progress.__exit__.call_args[0]
    assert exc_type is ValueError
    assert exc_val is error


@pytest.mark.unit
def test_rich_progress_display_exit_without_enter():
    RichProgressDisplay().__exit__(None, None, None)


@pytest.mark.unit
@pytest.mark.parametrize(
    "call",
    [
        lambda d: d.on_start("Searching", total=1),
        lambda d: d.on_update(advance=1),
        lambda d: d.on_complete("Done", completed=1),
    ],
)
def test_rich_progress_display_requires_context(call):
    with pytest.raises(RuntimeError, match="must be used as a context manager"):
        call(RichProgressDisplay())


# ============================================================================
# Tests for RichProgressDisplay lifecycle
# ============================================================================


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_start(mock_progress, mocker):
    mock_create_task = mocker.patch("ui.progress_display.create_task")

    display = RichProgressDisplay()
    with display:
        display.on_start("Searching for token occurrences...", total=12)

    mock_create_task.assert_called_once_with(
        mock_progress, "Searching for token occurrences...", total=12
    )
    assert display._task is mock_create_task.return_value


@pytest.mark.unit
@pytest.mark.mock
@pytest.mark.parametrize("method", ["on_update", "on_complete"])
def test_rich_progress_display_requires_on_start(mock_progress, method):
    display = RichProgressDisplay()
    with display:
        with pytest.raises(RuntimeError, match="on_start"):
            if method == "on_update":
                display.on_update(advance=1)
            else:
                display.on_complete("Done", completed=1)


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_update(mock_progress, mock_task_id, mocker):
    mock_update = mocker.patch("ui.progress_display.update_progress")

    display = RichProgressDisplay()
    with display:
        display.on_start("Searching", total=10)
        display.on_update(advance=1)
        display.on_update(advance=1, description="Searching app/person.rb")

    assert mock_update.call_args_list[0] == mocker.call(
        mock_progress, mock_task_id, advance=1
    )
    assert mock_update.call_args_list[1] == mocker.call(
        mock_progress,
        mock_task_id,
        ProgressState.IN_PROGRESS,
        advance=1,
        description="Searching app/person.rb",
    )


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_update_without_params(mock_progress, mock_task_id):
    display = RichProgressDisplay()
    with display:
        display.on_start("Searching", total=10)
        with pytest.raises(ValueError, match="At least one of"):
            display.on_update()


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_complete(mock_progress, mock_task_id, mocker):
    mock_update = mocker.patch("ui.progress_display.update_progress")

    display = RichProgressDisplay()
    with display:
        display.on_start("Searching", total=10)
        display.on_complete("Searched 10 files", completed=10, total=10)

    mock_update.assert_called_once_with(
        mock_progress,
        mock_task_id,
        ProgressState.COMPLETE,
        completed=10,
        total=10,
        description="Searched 10 files",
    )


# ============================================================================
# Tests for NoOpProgressDisplay
# ============================================================================


@pytest.mark.unit
def test_noop_progress_display_full_lifecycle():
    display = NoOpProgressDisplay()

    with display as entered:
        assert entered is display
        assert display.on_start("Searching", total=3) is None
        assert display.on_update(advance=1) is None
        assert display.on_update(description="x") is None
        assert display.on_complete("Done", completed=3, total=3) is None
