"""
Occurrence search.

Scans every project file for the spellings of the tokens taken from the tags
file and counts, per token, how often it appears in each file. Matching is
textual: a spelling counts wherever it is not directly preceded or followed by
an identifier character, so `name` matches in `user.name` and `"#name"` but not
in `username`.
"""

import os
import re
from collections import Counter
from pathlib import Path
from typing import Iterable

from adapters.git import GitClient
from constants import IDENTIFIER_CHARS, TAGS_FILE_CANDIDATES
from core.exceptions import FileReadError
from core.file_io import FileReader, FilesystemFileReader
from core.models import SearchConfig, Token, TokenSearchResult
from ui.console import err_console
from ui.progress_display import (
    NoOpProgressDisplay,
    ProgressDisplay,
    RichProgressDisplay,
)


def search_tokens(
    root: Path,
    tokens: list[Token],
    config: SearchConfig,
    file_reader: FileReader | None = None,
    git_client: GitClient | None = None,
    progress_display: ProgressDisplay | None = None,
) -> list[TokenSearchResult]:
    """
    Count occurrences of every allowed token across the project.

    Tokens are first narrowed by the configured language restriction. Each
    candidate file is read once and matched against all spellings at once.
    Binary and unreadable files are skipped.

    Args:
        root: The project root directory.
        tokens: Tokens to search for.
        config: Search configuration (language restriction, progress).
        file_reader: Optional reader for project files.
        git_client: Optional git client used to list files. Defaults to a
            GitClient for root; when root is not a repository the directory
            tree is walked instead.
        progress_display: Optional progress display. If None, a Rich display
            is used when config.display_progress is set, otherwise a no-op.

    Returns:
        list[TokenSearchResult]: One result per allowed token, in token order.
    """
    allowed = [t for t in tokens if config.language_restriction.allows(t)]
    pattern = build_search_pattern(t.spelling for t in allowed)
    reader = file_reader if file_reader is not None else FilesystemFileReader()
    files = list_project_files(root, git_client) if pattern is not None else []

    if progress_display is None:
        progress_display = (
            RichProgressDisplay(console=err_console)
            if config.display_progress
            else NoOpProgressDisplay()
        )

    counts: dict[str, dict[str, int]] = {t.spelling: {} for t in allowed}

    with progress_display as display:
        display.on_start("Searching for token occurrences...", len(files))
        for rel_path in files:
            try:
                content = reader.read_file(root / rel_path)
            except FileReadError:
                content = ""
            if content:
                for spelling, count in count_occurrences(pattern, content).items():
                    counts[spelling][rel_path] = count
            display.on_update(advance=1)
        display.on_complete(
            f"Searched {len(files)} files for {len(allowed)} tokens.",
            completed=len(files),
            total=len(files),
        )

    return [TokenSearchResult(token, counts[token.spelling]) for token in allowed]


def build_search_pattern(spellings: Iterable[str]) -> re.Pattern[str] | None:
    """
    Compile one pattern matching any of the spellings as a whole identifier.

    Longer spellings are tried first so that `name_was` is not cut short by
    `name`. Empty spellings are ignored.

    Returns:
        Optional[re.Pattern]: The pattern, or None if there is nothing to search.
    """
    unique = sorted({s for s in spellings if s}, key=lambda s: (-len(s), s))
    if not unique:
        return None
    alternation = "|".join(re.escape(s) for s in unique)
    return re.compile(
        rf"(?<![{IDENTIFIER_CHARS}])(?:{alternation})(?![{IDENTIFIER_CHARS}])"
    )


def count_occurrences(pattern: re.Pattern[str], content: str) -> Counter[str]:
    return Counter(match.group(0) for match in pattern.finditer(content))


def list_project_files(root: Path, git_client: GitClient | None = None) -> list[str]:
    """
    List the files to search, as POSIX paths relative to root.

    Uses `git ls-files` when root is a repository, otherwise walks the tree
    skipping hidden directories. Tags files are never searched.
    """
    client = git_client if git_client is not None else GitClient(root)
    if client.is_repo():
        paths = [p.as_posix() for p in client.stream_file_paths()]
    else:
        paths = _walk_files(root)

    excluded = set(TAGS_FILE_CANDIDATES)
    return sorted(p for p in paths if p not in excluded)


def _walk_files(root: Path) -> list[str]:
    results: list[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if not d.startswith(".")]
        for name in filenames:
            results.append((Path(dirpath) / name).relative_to(root).as_posix())
    return results
