"""
Console factories.

Reports go to stdout through a console built from the run's RenderConfig.
Errors, warnings and progress go to stderr so that `--json` output can be piped.
"""

from rich.console import Console

from core.models import RenderConfig

err_console: Console = Console(stderr=True, highlight=False)


def create_console(render: RenderConfig) -> Console:
    return Console(no_color=not render.color, highlight=False, soft_wrap=True)
