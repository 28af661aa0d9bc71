"""
Usage likelihood classification.

Turns the occurrence counts of each token into a verdict on how likely it is
to be unused. The heuristics are deliberately simple and err towards
reporting; the output is a list of candidates to review, not proof.
"""

from core.models import (
    ProjectConfiguration,
    TokenAnalysisResult,
    TokenSearchResult,
    UsageLikelihood,
)
from models import UsageLikelihoodStatus


def classify(
    result: TokenSearchResult, profile: ProjectConfiguration
) -> UsageLikelihood:
    """
    Classify one token's usage likelihood. The first matching rule wins:

    1. A low-likelihood rule of the profile matches -> low.
    2. At most one occurrence (the definition itself) -> high.
    3. Used outside its definitions only in tests, while defined outside
       tests -> high.
    4. Used only in the file(s) defining it -> medium.
    5. Exactly two occurrences -> medium.
    6. Otherwise -> low.

    Args:
        result: The token and its occurrence counts.
        profile: The selected project profile.

    Returns:
        UsageLikelihood: The verdict with a human-readable reason.
    """
    token = result.token

    rule = profile.matching_rule(token)
    if rule is not None:
        return UsageLikelihood(
            UsageLikelihoodStatus.LOW,
            f"Allowed by {profile.name} configuration ({rule.name})",
        )

    total = result.total_occurrences
    if total <= 1:
        return UsageLikelihood(UsageLikelihoodStatus.HIGH, "Only one occurrence exists")

    defined_paths = token.defined_paths
    external_paths = [p for p in result.occurrences if p not in defined_paths]

    if (
        external_paths
        and all(profile.is_test_path(p) for p in external_paths)
        and not token.only_definitions(lambda d: profile.is_test_path(d.file_path))
    ):
        return UsageLikelihood(UsageLikelihoodStatus.HIGH, "Only used in tests")

    if not external_paths:
        return UsageLikelihood(
            UsageLikelihoodStatus.MEDIUM,
            "Only used in the file(s) where it is defined",
        )

    if total == 2:
        return UsageLikelihood(UsageLikelihoodStatus.MEDIUM, "Used infrequently")

    return UsageLikelihood(UsageLikelihoodStatus.LOW, "Used frequently")


def analyze(
    results: list[TokenSearchResult], profile: ProjectConfiguration
) -> list[TokenAnalysisResult]:
    return [
        TokenAnalysisResult(
            token=result.token,
            occurrences=result.occurrences,
            usage_likelihood=classify(result, profile),
        )
        for result in results
    ]
