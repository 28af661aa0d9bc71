"""
Filtering and ordering of analysis results.
"""

from typing import Any, Callable

from core.models import AnalysisFilter, TokenAnalysisResult
from models import SortField, UsageLikelihoodStatus

LIKELIHOOD_RANK: dict[UsageLikelihoodStatus, int] = {
    UsageLikelihoodStatus.HIGH: 0,
    UsageLikelihoodStatus.MEDIUM: 1,
    UsageLikelihoodStatus.LOW: 2,
}


def apply_filter(
    results: list[TokenAnalysisResult], analysis_filter: AnalysisFilter
) -> list[TokenAnalysisResult]:
    """
    Keep the results whose status is in the filter set, then order them.

    With no sort field the retained results keep their incoming order. With a
    sort field, ties are broken by token spelling so the order is total.

    Args:
        results: Classified results, in pipeline order.
        analysis_filter: The policy to apply.

    Returns:
        list[TokenAnalysisResult]: A new list; the input is left untouched.
    """
    retained = [
        r
        for r in results
        if r.usage_likelihood.status in analysis_filter.likelihood_filter
    ]
    if analysis_filter.sort_field is None:
        return retained

    return sorted(
        retained,
        key=sort_key(analysis_filter.sort_field),
        reverse=analysis_filter.sort_descending,
    )


_SORT_KEYS: dict[SortField, Callable[[TokenAnalysisResult], tuple[Any, ...]]] = {
    SortField.TOKEN: lambda r: (r.token.spelling,),
    SortField.FILE: lambda r: (r.token.first_path, r.token.spelling),
    SortField.LIKELIHOOD: lambda r: (
        LIKELIHOOD_RANK[r.usage_likelihood.status],
        r.token.spelling,
    ),
    SortField.OCCURRENCES: lambda r: (r.total_occurrences, r.token.spelling),
}


def sort_key(field: SortField) -> Callable[[TokenAnalysisResult], tuple[Any, ...]]:
    """Key for a sort field, with token spelling as the tie-breaker."""
    return _SORT_KEYS[field]
