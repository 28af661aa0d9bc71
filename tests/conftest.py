"""
Shared fixtures for the test suite.

This module provides factories for the records that flow through the pipeline
(tag entries, tokens, search and analysis results) plus common test doubles.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.models import (
    TagEntry,
    Token,
    TokenAnalysisResult,
    TokenSearchResult,
    UsageLikelihood,
)
from models import Language, TokenKind, UsageLikelihoodStatus
from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def tag_entry_factory():
    """Factory for creating TagEntry instances."""

    def _factory(
        name="name",
        file_path="app/models/person.rb",
        language=Language.RUBY,
        kind=TokenKind.METHOD,
        tags=None,
    ):
        return TagEntry(
            name=name,
            file_path=file_path,
            language=language,
            kind=kind,
            tags=tags or {},
        )

    return _factory


@pytest.fixture
def token_factory(tag_entry_factory):
    """Factory for creating a Token defined in one or more files."""

    def _factory(spelling="name", paths=("app/models/person.rb",), kind=TokenKind.METHOD):
        return Token(
            spelling=spelling,
            definitions=tuple(
                tag_entry_factory(name=spelling, file_path=p, kind=kind) for p in paths
            ),
        )

    return _factory


@pytest.fixture
def search_result_factory(token_factory):
    """Factory for creating TokenSearchResult instances."""

    def _factory(spelling="name", paths=("app/models/person.rb",), occurrences=None, kind=TokenKind.METHOD):
        return TokenSearchResult(
            token=token_factory(spelling, paths, kind=kind),
            occurrences=occurrences or {},
        )

    return _factory


@pytest.fixture
def analysis_result_factory(token_factory):
    """Factory for creating TokenAnalysisResult instances."""

    def _factory(
        spelling="name",
        status=UsageLikelihoodStatus.HIGH,
        paths=("app/models/person.rb",),
        occurrences=None,
        reason="Only one occurrence exists",
    ):
        return TokenAnalysisResult(
            token=token_factory(spelling, paths),
            occurrences=occurrences if occurrences is not None else {paths[0]: 1},
            usage_likelihood=UsageLikelihood(status, reason),
        )

    return _factory


@pytest.fixture
def project_root(tmp_path):
    """Create a temporary project root for testing."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def non_repo_git_client():
    """Git client double that reports the root is not a repository."""
    client = MagicMock()
    client.is_repo.return_value = False
    return client


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def tracking_progress_display():
    """Progress display that tracks calls for testing."""
    mock = MagicMock()
    mock.calls = []

    def make_tracker(method_name):
        def tracker(*args, **kwargs):
            if method_name == "update":
                mock.calls.append(
                    (method_name, kwargs.get("advance"), kwargs.get("description"))
                )
            else:
                mock.calls.append((method_name, *args))

        return tracker

    mock.on_start = make_tracker("start")
    mock.on_update = make_tracker("update")
    mock.on_complete = make_tracker("complete")
    mock.__enter__ = MagicMock(return_value=mock)
    mock.__exit__ = MagicMock(return_value=None)

    return mock


@pytest.fixture
def mock_file_reader_factory():
    """Factory for creating MockFileReader instances with file content mappings."""

    def _factory(file_contents: dict[str, str]):
        """
        Args:
            file_contents: Mapping of file name to content.
        """
        from core.file_io import MockFileReader

        def read_file_side_effect(path: Path) -> str:
            return file_contents.get(path.name, "")

        return MockFileReader(read_file_fn=read_file_side_effect)

    return _factory
