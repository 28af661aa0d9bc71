"""
Enumerations shared across the unused CLI application.

This module holds the closed value sets the tool works with. Anything a user can
type on the command line (likelihood names, sort fields, file extensions) is
validated against these enums at the CLI boundary, so the rest of the pipeline
only ever sees well-formed values.
"""

from enum import StrEnum


class Language(StrEnum):
    """
    Enumeration of languages recognised in a tags file.

    Values match the language names Universal Ctags writes in its `language:`
    field. The file extensions that identify each language live in
    `constants.LANGUAGE_EXTENSIONS`.
    """

    C = "C"
    COFFEESCRIPT = "CoffeeScript"
    CPP = "C++"
    CSHARP = "C#"
    ELIXIR = "Elixir"
    ELM = "Elm"
    GO = "Go"
    HASKELL = "Haskell"
    JAVA = "Java"
    JAVASCRIPT = "JavaScript"
    KOTLIN = "Kotlin"
    PHP = "PHP"
    PYTHON = "Python"
    RUBY = "Ruby"
    RUST = "Rust"
    SWIFT = "Swift"
    TYPESCRIPT = "TypeScript"


class TokenKind(StrEnum):
    """
    Enumeration of symbol kinds a tag entry can describe.

    Ctags writes kinds either as a single letter or as a long name depending on
    the output options; both forms are decoded into these values. Unknown kinds
    become UNDEFINED.
    """

    ACCESSOR = "accessor"
    ALIAS = "alias"
    CLASS = "class"
    CONSTANT = "constant"
    ENUM = "enum"
    ENUMERATOR = "enumerator"
    FIELD = "field"
    FUNCTION = "function"
    INTERFACE = "interface"
    MACRO = "macro"
    METHOD = "method"
    MODULE = "module"
    PROPERTY = "property"
    SINGLETON_METHOD = "singleton_method"
    STRUCT = "struct"
    TYPE = "type"
    VARIABLE = "variable"
    UNDEFINED = "undefined"


class UsageLikelihoodStatus(StrEnum):
    """
    How likely a token is to be unused.

    HIGH means the token is very probably dead, LOW means it is almost certainly
    in use.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SortField(StrEnum):
    """Fields the analysis results can be ordered by."""

    TOKEN = "token"
    FILE = "file"
    LIKELIHOOD = "likelihood"
    OCCURRENCES = "occurrences"
