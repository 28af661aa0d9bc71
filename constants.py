"""
Application-wide constants and lookup tables.

This module defines the fixed data the unused CLI relies on: where tags files
are looked for, which characters are stripped when canonicalizing a token, where
the user profile store lives, and the language/kind tables used to decode ctags
output.
"""

from typing import Final, Mapping
from models import Language, TokenKind


# Tags files are looked up relative to the project root, first match wins.
# They are also excluded from the occurrence search since they list every token.
TAGS_FILE_CANDIDATES: Final[tuple[str, ...]] = (".git/tags", "tags", "tmp/tags")

# Header lines written by ctags ("!_TAG_FILE_FORMAT", "!_TAG_PROGRAM_NAME", ...)
TAGS_HEADER_PREFIX: Final[str] = "!_TAG_"

# Some tag generators prefix instance-scoped members ("#name", ".name").
CANONICAL_PUNCTUATION: Final[str] = "#."

# Characters that continue an identifier. An occurrence must not be surrounded by them.
IDENTIFIER_CHARS: Final[str] = "A-Za-z0-9_$"

PROFILE_FILE_NAME: Final[str] = ".unused.yml"
PROFILE_NAME: Final[str] = "Rails"
DEFAULT_PROFILE_NAME: Final[str] = "default"

DEFAULT_TEST_PATH_PREFIXES: Final[tuple[str, ...]] = (
    "test/",
    "tests/",
    "spec/",
    "__tests__/",
)
# Matched against the file name only (e.g. "person_spec.rb", "app.test.ts").
TEST_FILE_MARKERS: Final[tuple[str, ...]] = ("_test.", "_spec.", ".test.", ".spec.")

EXIT_TAGS_UNAVAILABLE: Final[int] = 1


LANGUAGE_EXTENSIONS: Final[Mapping[Language, frozenset[str]]] = {
    Language.C: frozenset({"c", "h"}),
    Language.COFFEESCRIPT: frozenset({"coffee"}),
    Language.CPP: frozenset({"cc", "cpp", "cxx", "hpp", "hh"}),
    Language.CSHARP: frozenset({"cs"}),
    Language.ELIXIR: frozenset({"ex", "exs"}),
    Language.ELM: frozenset({"elm"}),
    Language.GO: frozenset({"go"}),
    Language.HASKELL: frozenset({"hs", "lhs"}),
    Language.JAVA: frozenset({"java"}),
    Language.JAVASCRIPT: frozenset({"js", "jsx", "mjs", "cjs"}),
    Language.KOTLIN: frozenset({"kt", "kts"}),
    Language.PHP: frozenset({"php"}),
    Language.PYTHON: frozenset({"py", "pyi"}),
    Language.RUBY: frozenset({"rb", "rake"}),
    Language.RUST: frozenset({"rs"}),
    Language.SWIFT: frozenset({"swift"}),
    Language.TYPESCRIPT: frozenset({"ts", "tsx"}),
}

# Reverse lookup, one language per extension.
EXTENSION_LANGUAGES: Final[Mapping[str, Language]] = {
    extension: language
    for language, extensions in LANGUAGE_EXTENSIONS.items()
    for extension in extensions
}

# Single-letter kinds as written by ctags without --fields=+K.
# Letters follow the Ruby/Elixir parsers where they clash across languages.
CTAGS_KIND_LETTERS: Final[Mapping[str, TokenKind]] = {
    "A": TokenKind.ACCESSOR,
    "a": TokenKind.ALIAS,
    "c": TokenKind.CLASS,
    "C": TokenKind.CONSTANT,
    "d": TokenKind.MACRO,
    "e": TokenKind.ENUMERATOR,
    "f": TokenKind.FUNCTION,
    "F": TokenKind.SINGLETON_METHOD,
    "g": TokenKind.ENUM,
    "i": TokenKind.INTERFACE,
    "m": TokenKind.MODULE,
    "p": TokenKind.PROPERTY,
    "s": TokenKind.STRUCT,
    "S": TokenKind.SINGLETON_METHOD,
    "t": TokenKind.TYPE,
    "v": TokenKind.VARIABLE,
}

# Kinds treated as "class or module" by profile rules.
CLASS_OR_MODULE_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.CLASS, TokenKind.MODULE}
)
