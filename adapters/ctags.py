"""
Tags file location.

This module finds the tags file a project was indexed into. The tool never runs
ctags itself; it expects the user (or an editor plugin, or a git hook) to have
generated one at a well-known location.
"""

from pathlib import Path

from constants import TAGS_FILE_CANDIDATES


def tags_file_candidates(root: Path) -> list[Path]:
    """
    List the locations searched for a tags file, in priority order.

    Args:
        root: The project root directory.

    Returns:
        list[Path]: Absolute candidate paths (".git/tags", "tags", "tmp/tags").
    """
    return [root / candidate for candidate in TAGS_FILE_CANDIDATES]


def get_tags_path(root: Path) -> Path:
    """
    Locate the tags file for a project.

    Returns:
        Path: The first existing candidate.

    Raises:
        FileNotFoundError: If none of the candidates exist.
    """
    for candidate in tags_file_candidates(root):
        if candidate.is_file():
            return candidate

    searched = ", ".join(TAGS_FILE_CANDIDATES)
    raise FileNotFoundError(f"No tags file found in {root} (looked for {searched})")
