"""
Rendering of analysis results.

Results are printed either as JSON (see core.serialization) or as a coloured
text report followed by a run summary. Rendering only reads the results and
configuration it is given.
"""

from rich.console import Console
from rich.markup import escape

from core.models import (
    AnalysisFilter,
    ProjectConfiguration,
    RenderConfig,
    SearchConfig,
    TokenAnalysisResult,
)
from core.serialization import serialize_results
from models import UsageLikelihoodStatus
from ui.console import create_console

STATUS_STYLES: dict[UsageLikelihoodStatus, str] = {
    UsageLikelihoodStatus.HIGH: "red",
    UsageLikelihoodStatus.MEDIUM: "yellow",
    UsageLikelihoodStatus.LOW: "green",
}


def present(
    results: list[TokenAnalysisResult],
    search_config: SearchConfig,
    analysis_filter: AnalysisFilter,
    profile: ProjectConfiguration,
    render: RenderConfig,
    console: Console | None = None,
) -> None:
    """
    Print the filtered results in the requested format.

    Args:
        results: Filtered and ordered analysis results.
        search_config: The search configuration used for the run.
        analysis_filter: The filter applied to the results.
        profile: The selected project profile.
        render: Output format and colour settings.
        console: Optional console to print to. Defaults to stdout.
    """
    console = console if console is not None else create_console(render)

    if render.json:
        console.out(serialize_results(results), highlight=False)
        return

    for result in results:
        render_result(console, result)
    render_summary(console, results, search_config, analysis_filter, profile)


def render_result(console: Console, result: TokenAnalysisResult) -> None:
    style = STATUS_STYLES[result.usage_likelihood.status]
    defined = sorted(result.token.defined_paths)
    occurred = result.occurred_paths

    console.print(f"[{style}]{escape(result.token.spelling)}[/{style}]")
    console.print(f"   Reason: [cyan]{escape(result.usage_likelihood.reason)}[/cyan]")
    console.print(f"   Defined in: ([yellow]{len(defined)}[/yellow])")
    for path in defined:
        console.print(f"   * [yellow]{escape(path)}[/yellow]")

    if occurred:
        console.print(f"   Found in: ([yellow]{len(occurred)}[/yellow])")
        for path in occurred:
            console.print(f"   * [yellow]{escape(path)}[/yellow]")

    console.print()


def render_summary(
    console: Console,
    results: list[TokenAnalysisResult],
    search_config: SearchConfig,
    analysis_filter: AnalysisFilter,
    profile: ProjectConfiguration,
) -> None:
    tokens = {r.token.spelling for r in results}
    files = {path for r in results for path in r.occurrences}

    console.print()
    console.print("[white]== UNUSED SUMMARY ==[/white]")
    console.print(f"   Tokens found: {_colorize_total(len(tokens))}")
    console.print(f"   Files found: {_colorize_total(len(files))}")
    console.print(
        f"   Applied language filters: [cyan]{escape(str(search_config.language_restriction))}[/cyan]"
    )
    console.print(f"   Sort order: [cyan]{analysis_filter.sort_description}[/cyan]")
    console.print(
        f"   Usage likelihood: [cyan]{analysis_filter.likelihood_description}[/cyan]"
    )
    console.print(f"   Configuration setting: [cyan]{escape(profile.name)}[/cyan]")
    console.print()


def _colorize_total(amount: int) -> str:
    style = "green" if amount == 0 else "red"
    return f"[{style}]{amount}[/{style}]"
