"""Collect fragment spreads"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, NamedTuple

from graphql.language import FieldNode, FragmentSpreadNode, InlineFragmentNode
from graphql.pyutils import inspect

from .directives import ARGUMENTS_DIRECTIVE_NAME, get_node_location, has_directive

if TYPE_CHECKING:
    from graphql.language import SelectionSetNode, SourceLocation

__all__ = [
    "FragmentSpreadCollector",
    "FragmentSpreadRecord",
    "find_fragment_spreads",
]

logger = logging.getLogger(__name__)


class FragmentSpreadRecord(NamedTuple):
    """What the linter knows about a fragment spread site."""

    fragment_name: str
    supplies_arguments: bool
    location: SourceLocation | None = None


def find_fragment_spreads(
    selection_set: SelectionSetNode | None,
) -> list[FragmentSpreadNode]:
    """Find all fragment spreads in a selection set.

    Searches through fields and inline fragments at any depth and returns the spreads
    in source order. The bodies of the spread fragments are not searched, since these
    are searched when the fragment definitions themselves are visited.
    """
    spreads: list[FragmentSpreadNode] = []
    if not selection_set or not selection_set.selections:
        return spreads
    append_spreads(spreads, selection_set)
    return spreads


def append_spreads(
    spreads: list[FragmentSpreadNode], selection_set: SelectionSetNode
) -> None:
    for selection in selection_set.selections:
        if isinstance(selection, FragmentSpreadNode):
            spreads.append(selection)
        elif isinstance(selection, (FieldNode, InlineFragmentNode)):
            sub_selection_set = selection.selection_set
            if sub_selection_set and sub_selection_set.selections:
                append_spreads(spreads, sub_selection_set)


class FragmentSpreadCollector:
    """Collector for fragment spread sites.

    Every spread site gets its own record, even if the same fragment is spread
    several times. Collecting does not validate anything.
    """

    __slots__ = ("_records",)

    def __init__(self) -> None:
        self._records: list[FragmentSpreadRecord] = []

    def collect_spread(self, node: FragmentSpreadNode) -> FragmentSpreadRecord:
        """Record the given fragment spread."""
        if not isinstance(node, FragmentSpreadNode):
            raise TypeError(f"Not a fragment spread node: {inspect(node)}.")
        record = FragmentSpreadRecord(
            node.name.value,
            has_directive(node.directives, ARGUMENTS_DIRECTIVE_NAME),
            get_node_location(node),
        )
        self._records.append(record)
        return record

    def collect_selection_set(
        self, selection_set: SelectionSetNode | None
    ) -> list[FragmentSpreadRecord]:
        """Record all fragment spreads found in the given selection set."""
        records = [
            self.collect_spread(spread)
            for spread in find_fragment_spreads(selection_set)
        ]
        logger.debug("Collected %d fragment spread(s).", len(records))
        return records

    @property
    def records(self) -> tuple[FragmentSpreadRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[FragmentSpreadRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self._records)} spread(s)>"
