"""
Builds the search and analysis configuration from user policy.

The CLI validates raw flag values into enums; these functions only resolve
precedence between them. They never fail: every combination of inputs,
including all-empty, yields a complete configuration.
"""

from typing import Iterable

from core.models import AnalysisFilter, LanguageRestriction, SearchConfig
from models import Language, SortField, UsageLikelihoodStatus


def build_search_config(
    no_progress: bool = False,
    only: Iterable[Language] = (),
    except_: Iterable[Language] = (),
) -> SearchConfig:
    """
    Resolve the search configuration.

    A non-empty `only` list restricts the search to those languages. A
    non-empty `except_` list excludes languages, unless `only` was also given,
    in which case `only` wins.

    Args:
        no_progress: Hide the progress display.
        only: Languages to restrict the search to.
        except_: Languages to exclude from the search.

    Returns:
        SearchConfig: The resolved configuration.
    """
    only_set = frozenset(only)
    except_set = frozenset(except_)

    restriction = LanguageRestriction.all()
    if only_set:
        restriction = LanguageRestriction.only(only_set)
    elif except_set:
        restriction = LanguageRestriction.excluding(except_set)

    return SearchConfig(
        display_progress=not no_progress, language_restriction=restriction
    )


def build_analysis_filter(
    likelihoods: Iterable[UsageLikelihoodStatus] = (),
    all_likelihoods: bool = False,
    sort_field: SortField | None = None,
    reverse: bool = False,
) -> AnalysisFilter:
    """
    Resolve which results are shown and how they are ordered.

    Starts from the defaults (high likelihood only, no explicit order). An
    explicit likelihood list replaces the default set, and `all_likelihoods`
    overrides both. Sort field and direction are applied as given.
    """
    likelihood_filter = frozenset({UsageLikelihoodStatus.HIGH})

    requested = frozenset(likelihoods)
    if requested:
        likelihood_filter = requested

    if all_likelihoods:
        likelihood_filter = frozenset(UsageLikelihoodStatus)

    return AnalysisFilter(
        likelihood_filter=likelihood_filter,
        sort_field=sort_field,
        sort_descending=reverse,
    )
