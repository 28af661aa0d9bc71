"""
Rich progress bar helpers.

Bars are drawn on stderr and vanish once finished, so nothing is left between
the report lines or mixed into `--json` output. A task's description is
wrapped in the markup colour of its ProgressState.
"""

from enum import StrEnum
from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
)


class ProgressState(StrEnum):
    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    WARNING = "yellow"
    ERROR = "red"


def create_progress(console: Optional[Console] = None) -> Progress:
    """
    Build a spinner, label, bar and percentage progress display.

    Args:
        console: Console to draw on. A stderr console when omitted.
    """
    if console is None:
        console = Console(stderr=True)
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        transient=True,
    )


def _styled(state: ProgressState, description: str) -> str:
    return f"[{state}]{description}"


def create_task(progress: Progress, description: str, total: Optional[int]) -> TaskID:
    return progress.add_task(
        _styled(ProgressState.IN_PROGRESS, description), total=total
    )


def update_progress(
    progress: Progress,
    task: TaskID,
    progress_state: Optional[ProgressState] = None,
    total: Optional[float] = None,
    completed: Optional[float] = None,
    advance: Optional[float] = None,
    description: Optional[str] = None,
) -> None:
    """
    Move a task forward and optionally relabel it.

    A new description is only accepted together with the state it is drawn
    in, and the other way round.

    Raises:
        ValueError: If only one of progress_state and description is given.
    """
    if (progress_state is None) != (description is None):
        raise ValueError("progress_state and description must be provided together.")

    progress.update(
        task,
        total=total,
        completed=completed,
        advance=advance,
        description=(
            _styled(progress_state, description) if description is not None else None
        ),
    )
