"""
Token grouping.

A tags file lists one entry per definition site. The same logical symbol can be
defined in several places (a method and its RSpec "#method" entry, a
reopened class, an overridden method), so entries are canonicalized and grouped
into Tokens before searching.
"""

from itertools import groupby
from pathlib import Path
from typing import Iterable

from constants import CANONICAL_PUNCTUATION
from core.exceptions import TagsError
from core.file_io import FileReader
from core.models import TagEntry, Token
from core.tags import load_tag_entries


def canonicalize(name: str) -> str:
    """
    Strip the leading "#" / "." run some tag generators use for instance members.

    Total and idempotent: canonicalize(canonicalize(x)) == canonicalize(x).
    A name made only of those characters canonicalizes to "".
    """
    return name.lstrip(CANONICAL_PUNCTUATION)


def build_tokens(entries: Iterable[TagEntry]) -> list[Token]:
    """
    Group tag entries into Tokens by canonical spelling.

    Entries are stable-sorted by canonical spelling (code point order), so the
    output is independent of the input order except among entries sharing a
    spelling, which keep their original relative order.

    Args:
        entries: Tag entries in any order.

    Returns:
        list[Token]: One token per distinct spelling, sorted by spelling.
    """
    ordered = sorted(entries, key=lambda entry: canonicalize(entry.name))
    return [
        Token(spelling=spelling, definitions=tuple(group))
        for spelling, group in groupby(
            ordered, key=lambda entry: canonicalize(entry.name)
        )
    ]


def all_tokens(root: Path, file_reader: FileReader | None = None) -> list[Token]:
    """
    Load and group every token defined in the project's tags file.

    Never fails: a missing, unreadable or unparsable tags file yields an empty
    list and the run simply reports nothing.
    """
    try:
        entries = load_tag_entries(root, file_reader=file_reader)
    except (TagsError, OSError):
        return []
    return build_tokens(entries)
