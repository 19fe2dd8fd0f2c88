"""Fragment definition index"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, NamedTuple

from graphql.pyutils import inspect

from .directives import (
    ARGUMENT_DEFINITIONS_DIRECTIVE_NAME,
    get_node_location,
    has_directive,
)
from .issues import IssueCollector, IssueKind, IssueLevel, ValidationIssue

if TYPE_CHECKING:
    from graphql.language import FragmentDefinitionNode, SourceLocation

__all__ = ["FragmentDefinitionIndex", "FragmentDefinitionRecord"]

logger = logging.getLogger(__name__)


class FragmentDefinitionRecord(NamedTuple):
    """What the linter knows about a fragment definition."""

    name: str
    declares_parameters: bool
    location: SourceLocation | None = None


class FragmentDefinitionIndex:
    """Index of fragment definitions by fragment name.

    The index must be complete before any fragment spread is matched against it,
    because a fragment can be spread before it is defined, or in another document.

    If ``require_argument_definitions`` is set, every indexed definition that does
    not declare its parameters with ``@argumentDefinitions`` is reported as an issue.
    """

    __slots__ = "issues", "require_argument_definitions", "_records", "_checked"

    issues: IssueCollector
    require_argument_definitions: bool

    def __init__(
        self, issues: IssueCollector, require_argument_definitions: bool = True
    ) -> None:
        self.issues = issues
        self.require_argument_definitions = require_argument_definitions
        self._records: dict[str, FragmentDefinitionRecord] = {}
        self._checked = 0

    def index_definition(
        self, name: str, node: FragmentDefinitionNode
    ) -> FragmentDefinitionRecord:
        """Add the given fragment definition to the index.

        A later definition with the same name replaces the earlier record, but every
        definition is counted and checked.
        """
        if not name or not isinstance(name, str):
            raise TypeError(f"Expected a fragment name, got {inspect(name)}.")
        self._checked += 1
        location = get_node_location(node)
        declares_parameters = has_directive(
            getattr(node, "directives", None), ARGUMENT_DEFINITIONS_DIRECTIVE_NAME
        )
        if name in self._records:
            logger.debug("Fragment %r is defined more than once.", name)
        record = FragmentDefinitionRecord(name, declares_parameters, location)
        self._records[name] = record

        if self.require_argument_definitions and not declares_parameters:
            self.issues.add(
                ValidationIssue(
                    IssueLevel.ERROR,
                    IssueKind.MISSING_PARAMETER_DECLARATION,
                    f'Fragment "{name}" must have'
                    f" @{ARGUMENT_DEFINITIONS_DIRECTIVE_NAME} directive.",
                    name,
                    location,
                )
            )
        return record

    def get(self, name: str) -> FragmentDefinitionRecord | None:
        """Get the record for the fragment with the given name if it is indexed."""
        return self._records.get(name)

    @property
    def fragments_checked(self) -> int:
        """The number of fragment definitions that have been indexed."""
        return self._checked

    @property
    def names(self) -> list[str]:
        return list(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FragmentDefinitionRecord]:
        return iter(self._records.values())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self._records)} fragment(s)>"
