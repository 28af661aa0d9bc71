"""
Progress reporting for the occurrence search.

`core.search` only talks to the ProgressDisplay protocol. The CLI supplies a
Rich-backed display drawn on stderr, or a no-op one under `--no-progress`.
Nothing reported here feeds back into the results.
"""

from types import TracebackType
from typing import Protocol

from rich.console import Console
from rich.progress import Progress, TaskID
from ui.progress import (
    ProgressState,
    create_progress,
    create_task,
    update_progress,
)


class ProgressDisplay(Protocol):
    """
    A context manager receiving search progress.

    Inside the context: `on_start` once, `on_update` once per searched file,
    then `on_complete` once.
    """

    def __enter__(self) -> "ProgressDisplay": ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    def on_start(self, description: str, total: int | None) -> None:
        """
        Args:
            description: Label shown next to the bar.
            total: Number of files to be searched, or None when unknown.
        """

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        """Move the bar forward by `advance` and/or relabel it."""

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        """Show the final count with a completion label."""


class RichProgressDisplay:
    """ProgressDisplay drawing a transient Rich progress bar."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress(self._console)
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._progress is not None:
            self._progress.__exit__(exc_type, exc_val, exc_tb)

    def _active(self, needs_task: str | None = None) -> Progress:
        if self._progress is None:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager "
                "(with RichProgressDisplay(...) as display:)"
            )
        if needs_task and self._task is None:
            raise RuntimeError(f"{needs_task}() called before on_start()")
        return self._progress

    def on_start(self, description: str, total: int | None) -> None:
        progress = self._active()
        self._task = create_task(progress, description, total=total)

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        """
        Raises:
            RuntimeError: Outside the context, or before on_start().
            ValueError: If neither keyword is given.
        """
        progress = self._active("on_update")
        if not advance and not description:
            raise ValueError("At least one of advance or description is required")

        if description:
            update_progress(
                progress,
                self._task,
                ProgressState.IN_PROGRESS,
                advance=advance,
                description=description,
            )
            return
        update_progress(progress, self._task, advance=advance)

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        progress = self._active("on_complete")
        update_progress(
            progress,
            self._task,
            ProgressState.COMPLETE,
            completed=completed,
            total=total,
            description=description,
        )


class NoOpProgressDisplay:
    """ProgressDisplay that reports nothing."""

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        return None

    def on_start(self, description: str, total: int | None) -> None:
        return None

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        return None

    def on_complete(
        self, description: str, completed: int, total: int | None = None
    ) -> None:
        return None
