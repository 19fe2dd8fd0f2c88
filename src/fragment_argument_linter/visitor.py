"""Fragment argument visitor"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from .collector import FragmentSpreadCollector
from .config import FragmentArgumentLinterConfig, get_config
from .indexer import FragmentDefinitionIndex
from .issues import IssueCollector, LintStats, ValidationIssue
from .matcher import match_fragment_spreads

if TYPE_CHECKING:
    from graphql.language import (
        FragmentDefinitionNode,
        FragmentSpreadNode,
        SelectionSetNode,
    )

    from .collector import FragmentSpreadRecord
    from .indexer import FragmentDefinitionRecord

__all__ = ["FragmentArgumentVisitor"]


class FragmentArgumentVisitor:
    """Visitor for checking the arguments of fragments.

    One visitor holds the state of one linter run, which happens in three passes:

    1. all fragment definitions are passed to :meth:`validate_fragment`,
    2. all fragment spreads are passed to :meth:`collect_fragment_spread`,
    3. :meth:`validate_fragment_spreads` matches the spreads against the definitions.

    Afterwards, the found issues and statistics can be retrieved.
    """

    config: FragmentArgumentLinterConfig
    index: FragmentDefinitionIndex
    spreads: FragmentSpreadCollector

    def __init__(
        self,
        config: FragmentArgumentLinterConfig | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self.config = config = get_config(config, **kwargs)
        self._issues = IssueCollector()
        self.index = FragmentDefinitionIndex(
            self._issues, config.require_argument_definitions
        )
        self.spreads = FragmentSpreadCollector()
        self._spreads_validated = False

    def validate_fragment(
        self, fragment_name: str, fragment_definition: FragmentDefinitionNode
    ) -> FragmentDefinitionRecord:
        """Validate and index a fragment definition."""
        return self.index.index_definition(fragment_name, fragment_definition)

    def collect_fragment_spread(
        self, fragment_spread: FragmentSpreadNode
    ) -> FragmentSpreadRecord:
        """Collect a fragment spread for later validation."""
        return self.spreads.collect_spread(fragment_spread)

    def collect_fragment_spreads(
        self, selection_set: SelectionSetNode | None
    ) -> list[FragmentSpreadRecord]:
        """Collect all fragment spreads in a selection set for later validation."""
        return self.spreads.collect_selection_set(selection_set)

    def validate_fragment_spreads(self) -> None:
        """Validate all collected fragment spreads against the fragment definitions.

        This must be called only once, after all fragment definitions have been
        validated and all fragment spreads have been collected.
        """
        if self._spreads_validated:
            raise RuntimeError("The fragment spreads have already been validated.")
        self._spreads_validated = True
        match_fragment_spreads(self.index, self.spreads, self._issues)

    def get_issues(self) -> list[ValidationIssue]:
        """Get all issues found so far, in the order they were found."""
        return list(self._issues)

    def get_stats(self) -> LintStats:
        """Get statistics about the linter run."""
        issues = self._issues
        return LintStats(
            fragments_checked=self.index.fragments_checked,
            fragments_with_issues=len(issues.fragments_with_issues),
            total_issues=issues.total_issues,
        )
