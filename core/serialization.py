"""
Structured (JSON) form of tag entries and analysis results.

The JSON written by `unused --json` is a lossless rendering of the in-memory
results: `deserialize_results(serialize_results(x)) == x`.
"""

import json
from typing import Any

from core.models import (
    TagEntry,
    Token,
    TokenAnalysisResult,
    UsageLikelihood,
)
from models import Language, TokenKind, UsageLikelihoodStatus


def serialize_tag_entry(entry: TagEntry) -> dict[str, Any]:
    return {
        "name": entry.name,
        "file_path": entry.file_path,
        "language": str(entry.language) if entry.language is not None else None,
        "kind": str(entry.kind),
        "tags": dict(entry.tags),
    }


def deserialize_tag_entry(data: dict[str, Any]) -> TagEntry:
    language = data.get("language")
    return TagEntry(
        name=data["name"],
        file_path=data["file_path"],
        language=Language(language) if language is not None else None,
        kind=TokenKind(data.get("kind", TokenKind.UNDEFINED)),
        tags=dict(data.get("tags") or {}),
    )


def serialize_result(result: TokenAnalysisResult) -> dict[str, Any]:
    """
    Convert one analysis result to a JSON-compatible dictionary.

    Returns:
        dict: `{"token", "definitions", "occurrences", "usage_likelihood"}`,
            where occurrences maps file path to occurrence count.
    """
    return {
        "token": result.token.spelling,
        "definitions": [serialize_tag_entry(d) for d in result.token.definitions],
        "occurrences": dict(result.occurrences),
        "usage_likelihood": {
            "status": str(result.usage_likelihood.status),
            "reason": result.usage_likelihood.reason,
        },
    }


def deserialize_result(data: dict[str, Any]) -> TokenAnalysisResult:
    likelihood = data["usage_likelihood"]
    return TokenAnalysisResult(
        token=Token(
            spelling=data["token"],
            definitions=tuple(deserialize_tag_entry(d) for d in data["definitions"]),
        ),
        occurrences={path: int(count) for path, count in data["occurrences"].items()},
        usage_likelihood=UsageLikelihood(
            status=UsageLikelihoodStatus(likelihood["status"]),
            reason=likelihood["reason"],
        ),
    )


def serialize_results(results: list[TokenAnalysisResult]) -> str:
    return json.dumps([serialize_result(r) for r in results])


def deserialize_results(payload: str) -> list[TokenAnalysisResult]:
    """
    Parse the JSON produced by serialize_results back into results.

    Raises:
        ValueError: If the payload is not valid JSON or not a list of results.
    """
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of analysis results")
    return [deserialize_result(item) for item in data]
