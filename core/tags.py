"""
Module for reading symbol definitions from a ctags tags file.

This module provides functionality to:
- Locate the project's tags file and read it
- Parse tags file lines (`name<TAB>file<TAB>address;"<TAB>fields...`) into
  TagEntry records
- Decode ctags kinds and languages into the application's enums

The main entry point is `load_tag_entries()`. It raises TagsError subclasses
on failure; callers that must never fail (token grouping) absorb them.
"""

from pathlib import Path, PurePosixPath

from adapters.ctags import get_tags_path
from constants import CTAGS_KIND_LETTERS, EXTENSION_LANGUAGES, TAGS_HEADER_PREFIX
from core.exceptions import (
    FileReadError,
    TagsFileNotFoundError,
    TagsParseError,
    TagsReadError,
)
from core.file_io import FileReader, FilesystemFileReader
from core.models import TagEntry
from models import Language, TokenKind

# Terminates the ex-command address when extension fields follow it
_ADDRESS_TERMINATOR = ';"'


def load_tag_entries(
    root: Path, file_reader: FileReader | None = None
) -> list[TagEntry]:
    """
    Locate, read and parse the tags file of a project.

    Args:
        root: The project root directory.
        file_reader: Optional reader used to load the tags file. Defaults to
            FilesystemFileReader.

    Returns:
        list[TagEntry]: Entries in the order they appear in the file.

    Raises:
        TagsFileNotFoundError: If no tags file exists at a well-known location.
        TagsReadError: If the tags file cannot be read.
        TagsParseError: If the tags file has content but no valid tag line.
    """
    try:
        tags_path = get_tags_path(root)
    except FileNotFoundError as e:
        raise TagsFileNotFoundError(
            message=str(e), file_path=str(root), original_exception=e
        ) from e

    reader = file_reader if file_reader is not None else FilesystemFileReader()
    try:
        contents = reader.read_file(tags_path)
    except FileReadError as e:
        raise TagsReadError(
            message=f"Unable to read tags file: {tags_path}",
            file_path=str(tags_path),
            original_exception=e,
        ) from e

    return parse_tags(contents, source=str(tags_path))


def parse_tags(contents: str, source: str | None = None) -> list[TagEntry]:
    """
    Parse the contents of a tags file.

    Header lines ("!_TAG_...") and blank lines are skipped. Malformed lines are
    dropped individually; the parse only fails when nothing at all could be
    read from a non-empty file.

    Args:
        contents: The full text of the tags file.
        source: Path of the file, used in error messages.

    Returns:
        list[TagEntry]: The parsed entries.

    Raises:
        TagsParseError: If there were tag lines but none of them parsed.
    """
    entries: list[TagEntry] = []
    tag_lines = 0

    for line in contents.splitlines():
        if not line.strip() or line.startswith(TAGS_HEADER_PREFIX):
            continue
        tag_lines += 1
        entry = _parse_tag_line(line)
        if entry is not None:
            entries.append(entry)

    if tag_lines and not entries:
        raise TagsParseError(
            message=f"Unable to parse tags file: {source or '<input>'}",
            file_path=source,
        )

    return entries


def _parse_tag_line(line: str) -> TagEntry | None:
    """
    Parse a single tags file line into a TagEntry.

    Returns:
        Optional[TagEntry]: The entry, or None if the line is malformed (fewer
            than three columns or an empty file column).
    """
    columns = line.split("\t")
    if len(columns) < 3:
        return None

    name, file_path = columns[0], columns[1]
    if not file_path:
        return None

    # Search patterns may contain literal tabs, so split on the terminator
    # instead of trusting the column count.
    rest = "\t".join(columns[2:])
    fields: list[str] = []
    if f"{_ADDRESS_TERMINATOR}\t" in rest:
        _, _, field_str = rest.partition(f"{_ADDRESS_TERMINATOR}\t")
        fields = [f for f in field_str.split("\t") if f]

    kind = TokenKind.UNDEFINED
    language: Language | None = None
    tags: dict[str, str] = {}

    for item in fields:
        key, sep, value = item.partition(":")
        if not sep:
            kind = decode_kind(item)
        elif key == "kind":
            kind = decode_kind(value)
        elif key == "language":
            language = decode_language(value)
        else:
            tags[key] = value

    if language is None:
        language = language_for_path(file_path)

    return TagEntry(
        name=name, file_path=file_path, language=language, kind=kind, tags=tags
    )


def decode_kind(raw: str) -> TokenKind:
    """
    Decode a ctags kind, either a single letter ("c") or a long name ("class").

    Long names are matched case-insensitively with underscores ignored, so
    "singletonMethod" decodes to SINGLETON_METHOD.
    """
    if raw in CTAGS_KIND_LETTERS:
        return CTAGS_KIND_LETTERS[raw]

    normalized = raw.replace("_", "").lower()
    for kind in TokenKind:
        if kind.value.replace("_", "") == normalized:
            return kind
    return TokenKind.UNDEFINED


def decode_language(raw: str) -> Language | None:
    normalized = raw.strip().lower()
    for lang in Language:
        if lang.value.lower() == normalized:
            return lang
    return None


def language_for_path(file_path: str) -> Language | None:
    """Infer a language from a file extension ("app/models/user.rb" -> Ruby)."""
    suffix = PurePosixPath(file_path).suffix.lower().lstrip(".")
    return EXTENSION_LANGUAGES.get(suffix)
