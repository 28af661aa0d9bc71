"""
Core data models for the token analysis pipeline.

This module defines the records that flow between the pipeline stages: tag
entries read from a tags file, tokens grouped from them, the search and filter
configuration built from CLI policy, project profiles, and the per-token search
and analysis results. Every record is frozen once built.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import PurePosixPath
from typing import Callable, Mapping

from constants import (
    CLASS_OR_MODULE_KINDS,
    DEFAULT_PROFILE_NAME,
    DEFAULT_TEST_PATH_PREFIXES,
    LANGUAGE_EXTENSIONS,
    TEST_FILE_MARKERS,
)
from models import Language, SortField, TokenKind, UsageLikelihoodStatus


@dataclass(frozen=True)
class TagEntry:
    """
    A single symbol definition site read from a tags file.

    Attributes:
        name: The raw symbol name as written by the tag generator (may carry
            a leading "#" or "." for instance-scoped members).
        file_path: Path of the defining file, relative to the project root.
        language: The language of the defining file, if known.
        kind: The decoded symbol kind.
        tags: Any remaining extension fields (e.g. "line", "class").
    """

    name: str
    file_path: str
    language: Language | None = None
    kind: TokenKind = TokenKind.UNDEFINED
    tags: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Token:
    """
    All definition sites sharing one canonical spelling.

    Tokens are built by `core.tokens.build_tokens`; the spelling is the
    canonicalized form of every definition's raw name.
    """

    spelling: str
    definitions: tuple[TagEntry, ...]

    def __post_init__(self):
        if not self.definitions:
            raise ValueError(f"Token '{self.spelling}' needs at least one definition")

    @property
    def defined_paths(self) -> frozenset[str]:
        return frozenset(d.file_path for d in self.definitions)

    @property
    def languages(self) -> list[Language]:
        return [d.language for d in self.definitions if d.language is not None]

    @property
    def first_path(self) -> str:
        """The lexicographically smallest defining path."""
        return min(self.defined_paths)

    def only_definitions(self, check: Callable[[TagEntry], bool]) -> bool:
        return all(check(d) for d in self.definitions)


class RestrictionMode(StrEnum):
    ALL = "all"
    ONLY = "only"
    EXCEPT = "except"


@dataclass(frozen=True)
class LanguageRestriction:
    """
    Which tokens take part in the search, judged by their definitions' languages.

    ONLY keeps tokens with at least one definition in the given languages;
    EXCEPT drops them. A token whose definitions carry no language is never
    matched by the set.
    """

    mode: RestrictionMode = RestrictionMode.ALL
    languages: frozenset[Language] = frozenset()

    @classmethod
    def all(cls) -> "LanguageRestriction":
        return cls()

    @classmethod
    def only(cls, languages) -> "LanguageRestriction":
        return cls(RestrictionMode.ONLY, frozenset(languages))

    @classmethod
    def excluding(cls, languages) -> "LanguageRestriction":
        return cls(RestrictionMode.EXCEPT, frozenset(languages))

    def allows(self, token: Token) -> bool:
        if self.mode == RestrictionMode.ALL:
            return True
        matched = any(lang in self.languages for lang in token.languages)
        if self.mode == RestrictionMode.ONLY:
            return matched
        return not matched

    def __str__(self) -> str:
        if self.mode == RestrictionMode.ALL:
            return str(self.mode)
        # Extension spelling, as passed to --only-filetypes
        extensions = sorted(
            ext for lang in self.languages for ext in LANGUAGE_EXTENSIONS[lang]
        )
        return f"{self.mode}: " + ", ".join(extensions)


@dataclass(frozen=True)
class SearchConfig:
    display_progress: bool = True
    language_restriction: LanguageRestriction = field(
        default_factory=LanguageRestriction.all
    )


@dataclass(frozen=True)
class AnalysisFilter:
    """
    Which analysis results are shown and in what order.

    Attributes:
        likelihood_filter: Statuses to keep.
        sort_field: Field to order by. None keeps the incoming order.
        sort_descending: Reverse the order given by sort_field.
    """

    likelihood_filter: frozenset[UsageLikelihoodStatus] = frozenset(
        {UsageLikelihoodStatus.HIGH}
    )
    sort_field: SortField | None = None
    sort_descending: bool = False

    @property
    def sort_description(self) -> str:
        if self.sort_field is None:
            return "none"
        direction = "descending" if self.sort_descending else "ascending"
        return f"{self.sort_field} ({direction})"

    @property
    def likelihood_description(self) -> str:
        # Listed in severity order, not set order
        return ", ".join(
            str(s) for s in UsageLikelihoodStatus if s in self.likelihood_filter
        )


@dataclass(frozen=True)
class LowLikelihoodRule:
    """
    A profile rule marking matching tokens as almost certainly in use.

    Every matcher that is set must hold. Path matchers are checked against
    every definition of the token.
    """

    name: str
    path_starts_with: str | None = None
    path_ends_with: str | None = None
    token_starts_with: str | None = None
    token_ends_with: str | None = None
    token_equals: tuple[str, ...] = ()
    class_or_module: bool = False

    def matches(self, token: Token) -> bool:
        spelling = token.spelling
        if self.token_starts_with is not None and not spelling.startswith(
            self.token_starts_with
        ):
            return False
        if self.token_ends_with is not None and not spelling.endswith(
            self.token_ends_with
        ):
            return False
        if self.token_equals and spelling not in self.token_equals:
            return False
        if self.path_starts_with is not None and not token.only_definitions(
            lambda d: d.file_path.startswith(self.path_starts_with)
        ):
            return False
        if self.path_ends_with is not None and not token.only_definitions(
            lambda d: d.file_path.endswith(self.path_ends_with)
        ):
            return False
        if self.class_or_module and not token.only_definitions(
            lambda d: d.kind in CLASS_OR_MODULE_KINDS
        ):
            return False
        return True


@dataclass(frozen=True)
class ProjectConfiguration:
    """A named set of classification rules loaded from the profile store."""

    name: str
    test_path_prefixes: tuple[str, ...] = DEFAULT_TEST_PATH_PREFIXES
    low_likelihood: tuple[LowLikelihoodRule, ...] = ()

    @classmethod
    def default(cls) -> "ProjectConfiguration":
        return cls(name=DEFAULT_PROFILE_NAME)

    def is_test_path(self, path: str) -> bool:
        if any(path.startswith(prefix) for prefix in self.test_path_prefixes):
            return True
        file_name = PurePosixPath(path).name
        return file_name.startswith("test_") or any(
            marker in file_name for marker in TEST_FILE_MARKERS
        )

    def matching_rule(self, token: Token) -> LowLikelihoodRule | None:
        for rule in self.low_likelihood:
            if rule.matches(token):
                return rule
        return None


@dataclass(frozen=True)
class UsageLikelihood:
    status: UsageLikelihoodStatus
    reason: str


@dataclass(frozen=True)
class TokenSearchResult:
    """Occurrence counts of one token, keyed by file path."""

    token: Token
    occurrences: Mapping[str, int] = field(default_factory=dict)

    @property
    def occurred_paths(self) -> list[str]:
        return sorted(self.occurrences)

    @property
    def total_occurrences(self) -> int:
        return sum(self.occurrences.values())


@dataclass(frozen=True)
class TokenAnalysisResult:
    token: Token
    occurrences: Mapping[str, int]
    usage_likelihood: UsageLikelihood

    @property
    def occurred_paths(self) -> list[str]:
        return sorted(self.occurrences)

    @property
    def total_occurrences(self) -> int:
        return sum(self.occurrences.values())


@dataclass(frozen=True)
class RenderConfig:
    """How results are rendered: colour on or off, JSON or text."""

    color: bool = True
    json: bool = False
