"""Match fragment spreads against fragment definitions"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from graphql.pyutils import did_you_mean, suggestion_list

from .directives import ARGUMENT_DEFINITIONS_DIRECTIVE_NAME, ARGUMENTS_DIRECTIVE_NAME
from .issues import IssueKind, IssueLevel, ValidationIssue

if TYPE_CHECKING:
    from .collector import FragmentSpreadRecord
    from .indexer import FragmentDefinitionIndex, FragmentDefinitionRecord
    from .issues import IssueCollector

__all__ = ["match_fragment_spread", "match_fragment_spreads"]

logger = logging.getLogger(__name__)


def match_fragment_spreads(
    index: FragmentDefinitionIndex,
    spreads: Iterable[FragmentSpreadRecord],
    issues: IssueCollector,
) -> None:
    """Check all fragment spreads against the indexed fragment definitions.

    Every spread is looked up exactly once. A spread of a fragment that declares
    parameters must supply arguments, and a spread of a fragment that does not declare
    parameters must not supply arguments. A spread of a fragment that has not been
    indexed at all is reported as an undefined fragment reference.
    """
    num_spreads = 0
    for spread in spreads:
        num_spreads += 1
        issue = match_fragment_spread(index.get(spread.fragment_name), spread, index)
        if issue:
            issues.add(issue)
    logger.debug(
        "Matched %d fragment spread(s) against %d fragment definition(s).",
        num_spreads,
        len(index),
    )


def match_fragment_spread(
    definition: FragmentDefinitionRecord | None,
    spread: FragmentSpreadRecord,
    index: FragmentDefinitionIndex | None = None,
) -> ValidationIssue | None:
    """Check one fragment spread against the definition of its fragment.

    Returns the issue found, or None if the spread is consistent with its definition.
    The index is only used for suggesting similar names of defined fragments.
    """
    name = spread.fragment_name
    if definition is None:
        suggestions = suggestion_list(name, index.names) if index else []
        return ValidationIssue(
            IssueLevel.ERROR,
            IssueKind.UNDEFINED_FRAGMENT_REFERENCE,
            f'Unknown fragment "{name}".' + did_you_mean(suggestions),
            name,
            spread.location,
        )
    if definition.declares_parameters and not spread.supplies_arguments:
        return ValidationIssue(
            IssueLevel.ERROR,
            IssueKind.MISSING_ARGUMENTS_AT_SPREAD,
            f'Fragment spread "...{name}" must have @{ARGUMENTS_DIRECTIVE_NAME}'
            f' directive because fragment "{name}"'
            f" defines @{ARGUMENT_DEFINITIONS_DIRECTIVE_NAME}.",
            name,
            spread.location,
        )
    if spread.supplies_arguments and not definition.declares_parameters:
        return ValidationIssue(
            IssueLevel.ERROR,
            IssueKind.UNEXPECTED_ARGUMENTS_AT_SPREAD,
            f'Fragment spread "...{name}" has @{ARGUMENTS_DIRECTIVE_NAME}'
            f' directive but fragment "{name}"'
            f" does not define @{ARGUMENT_DEFINITIONS_DIRECTIVE_NAME}.",
            name,
            spread.location,
        )
    return None
