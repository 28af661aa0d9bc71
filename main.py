"""
unused CLI Entry Point.

This module implements the command-line interface for unused, a tool that
lists source-code symbols which are likely unused. It reads the definitions a
project was indexed into by Universal Ctags, searches the project for other
occurrences of each symbol, and classifies how likely each one is to be dead.

The pipeline runs as a single batch pass:

1.  **Validation**: Flag values (likelihoods, sort field, file extensions) are
    validated before anything else runs.
2.  **Tokens**: Tag entries are read from the tags file and grouped into tokens
    by canonical spelling. A missing tags file simply yields no tokens.
3.  **Search**: Every project file is scanned for the token spellings.
4.  **Classification**: The `Rails` profile from `~/.unused.yml` (or the default
    profile) is selected and each token is given a usage likelihood.
5.  **Presentation**: Results are filtered, sorted and rendered as text or JSON.

Usage:
    $ ctags -R -f .git/tags .
    $ unused --likelihood high,medium --sort-order file

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal colours, progress visualization and error output.
    - PyYAML: Reading the profile store.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from constants import EXIT_TAGS_UNAVAILABLE, EXTENSION_LANGUAGES
from core.analysis import analyze
from core.configuration import build_analysis_filter, build_search_config
from core.exceptions import TagsError
from core.filtering import apply_filter
from core.models import RenderConfig
from core.profiles import select_profile
from core.search import search_tokens
from core.serialization import serialize_tag_entry
from core.tags import load_tag_entries
from core.tokens import all_tokens
from models import Language, SortField, UsageLikelihoodStatus
from ui.console import err_console
from ui.report import present

app = typer.Typer(help="A command line tool to identify potentially unused code")
tags_app = typer.Typer(help="Print the entries of the project's tags file as JSON")

_FILETYPE_HELP = ", ".join(sorted(EXTENSION_LANGUAGES))


@app.command()
def main(
    path: Annotated[
        Path,
        typer.Option(
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Project root containing the tags file",
        ),
    ] = Path.cwd(),
    no_color: Annotated[
        bool, typer.Option("--no-color", help="Disable color output")
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", help="Render output as JSON")
    ] = False,
    no_progress: Annotated[
        bool, typer.Option("--no-progress", "-P", help="Hide progress bar")
    ] = False,
    all_likelihoods: Annotated[
        bool,
        typer.Option(
            "--all-likelihoods",
            "-a",
            help="Include tokens that fall into any likelihood category",
        ),
    ] = False,
    likelihood: Annotated[
        str,
        typer.Option(
            "--likelihood",
            "-l",
            help="Comma-delimited likelihood(s) to show: high, medium, low",
        ),
    ] = "high",
    sort_order: Annotated[
        SortField,
        typer.Option("--sort-order", case_sensitive=False, help="Sort output"),
    ] = SortField.TOKEN,
    reverse: Annotated[
        bool, typer.Option("--reverse", help="Reverse sort order")
    ] = False,
    only_filetypes: Annotated[
        str | None,
        typer.Option(
            "--only-filetypes",
            help=f"Limit tokens to those defined in these file extension(s): {_FILETYPE_HELP}",
        ),
    ] = None,
    except_filetypes: Annotated[
        str | None,
        typer.Option(
            "--except-filetypes",
            help=f"Limit tokens to those not defined in these file extension(s): {_FILETYPE_HELP}",
        ),
    ] = None,
):
    """
    Identify tokens that are likely unused in the project at PATH.

    Raises:
        typer.BadParameter: If a likelihood or file extension is not recognised.
        typer.Exit: With code 1 on an unexpected error.
    """
    try:
        likelihoods = parse_likelihoods(likelihood)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--likelihood") from e
    try:
        only = parse_filetypes(only_filetypes)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--only-filetypes") from e
    try:
        excluded = parse_filetypes(except_filetypes)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--except-filetypes") from e

    if only and excluded:
        err_console.print(
            "[yellow]Warning:[/yellow] --only-filetypes and --except-filetypes "
            "both given; using --only-filetypes."
        )

    render = RenderConfig(color=not no_color, json=json_output)
    search_config = build_search_config(no_progress, only, excluded)
    analysis_filter = build_analysis_filter(
        likelihoods, all_likelihoods, sort_order, reverse
    )

    try:
        tokens = all_tokens(path)
        results = search_tokens(path, tokens, search_config)
        profile = select_profile()
        outcome = analyze(results, profile)
        present(
            apply_filter(outcome, analysis_filter),
            search_config,
            analysis_filter,
            profile,
            render,
        )
    except Exception as e:  # noqa: BLE001
        # Anything not handled by the pipeline itself
        print_unexpected_err(e)


@tags_app.command()
def read_ctags(
    path: Annotated[
        Path,
        typer.Option(
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
            help="Project root containing the tags file",
        ),
    ] = Path.cwd(),
):
    """
    Print every entry of the project's tags file as a JSON array.

    Raises:
        typer.Exit: With code 1 if the tags file is missing or unreadable.
    """
    try:
        entries = load_tag_entries(path)
    except TagsError as e:
        print_tags_err(e)

    typer.echo(json.dumps([serialize_tag_entry(entry) for entry in entries]))


def parse_likelihoods(value: str | None) -> list[UsageLikelihoodStatus]:
    """
    Parse a comma-delimited list of likelihood names (case-insensitive).

    Raises:
        ValueError: If any item is not high, medium or low.
    """
    statuses: list[UsageLikelihoodStatus] = []
    for item in _split_list(value):
        try:
            statuses.append(UsageLikelihoodStatus(item.lower()))
        except ValueError as e:
            choices = ", ".join(UsageLikelihoodStatus)
            raise ValueError(
                f"Not a valid likelihood: {item} (choose from {choices})"
            ) from e
    return statuses


def parse_filetypes(value: str | None) -> set[Language]:
    """
    Parse a comma-delimited list of file extensions into languages.

    A leading dot is accepted ("rb" and ".rb" are the same).

    Raises:
        ValueError: If any extension does not belong to a supported language.
    """
    languages: set[Language] = set()
    for item in _split_list(value):
        extension = item.lower().lstrip(".")
        language = EXTENSION_LANGUAGES.get(extension)
        if language is None:
            raise ValueError(f"Not a supported file extension: {item}")
        languages.add(language)
    return languages


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def print_tags_err(e: TagsError) -> None:
    """
    Displays an error for a missing or unreadable tags file on stderr.

    Raises:
        typer.Exit: Always, with EXIT_TAGS_UNAVAILABLE.
    """
    err_console.print("❌ [bold red]Tags Error[/bold red]")
    err_console.print(escape(e.message))
    err_console.print(
        "\n[yellow]Quick Fix:[/yellow] Generate a tags file, e.g. `ctags -R -f .git/tags .`"
    )
    if e.original_exception:
        err_console.print(f"\nTechnical details: {escape(str(e.original_exception))}")
    raise typer.Exit(code=EXIT_TAGS_UNAVAILABLE) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    err_console.print("❌ [bold red]Unexpected Error[/bold red]")
    err_console.print("An unexpected error occurred while analysing the project.")
    err_console.print(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    err_console.print(f"[yellow]Error Message:[/yellow] {escape(str(e))}")

    err_console.print("\n--- PLEASE REPORT THIS ---")
    if e.__cause__:
        err_console.print(f"Caused by: {escape(str(e.__cause__))}")

    raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
