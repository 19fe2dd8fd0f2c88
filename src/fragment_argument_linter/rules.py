"""Fragment arguments validation rule"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from graphql.error import GraphQLError
from graphql.validation import ASTValidationRule

from .collector import FragmentSpreadCollector
from .indexer import FragmentDefinitionIndex
from .issues import IssueCollector
from .matcher import match_fragment_spread

if TYPE_CHECKING:
    from graphql.language import FragmentDefinitionNode, FragmentSpreadNode
    from graphql.validation import ASTValidationContext

    from .issues import ValidationIssue

__all__ = ["FragmentArgumentsRule"]


class FragmentArgumentsRule(ASTValidationRule):
    """Fragment arguments

    A GraphQL document is only valid if every spread of a fragment that defines
    arguments with ``@argumentDefinitions`` passes arguments with ``@arguments``,
    and no spread of a fragment without ``@argumentDefinitions`` passes arguments.
    Unless ``require_argument_definitions`` is switched off in a subclass, every
    fragment definition must also have an ``@argumentDefinitions`` directive.

    Note: This rule is optional and is not part of the Validation section of the
    GraphQL Specification. It only considers the fragments of the validated document.
    Use :func:`~fragment_argument_linter.lint_documents` for checking fragments that
    are spread across several documents.
    """

    require_argument_definitions = True

    def __init__(self, context: ASTValidationContext) -> None:
        super().__init__(context)
        self.issues = IssueCollector()
        self.index = FragmentDefinitionIndex(
            self.issues, self.require_argument_definitions
        )
        self.spreads = FragmentSpreadCollector()
        self.spread_nodes: list[FragmentSpreadNode] = []

    def enter_fragment_definition(
        self, node: FragmentDefinitionNode, *_args: Any
    ) -> None:
        record = self.index.index_definition(node.name.value, node)
        if self.require_argument_definitions and not record.declares_parameters:
            self.report_issue(self.issues.last_issue, node)

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args: Any) -> None:
        self.spreads.collect_spread(node)
        self.spread_nodes.append(node)

    def leave_document(self, *_args: Any) -> None:
        index = self.index
        for spread, node in zip(self.spreads, self.spread_nodes):
            definition = index.get(spread.fragment_name)
            issue = match_fragment_spread(definition, spread, index)
            if issue:
                self.issues.add(issue)
                self.report_issue(issue, node)

    def report_issue(self, issue: ValidationIssue, node: Any) -> None:
        error = GraphQLError(
            issue.message,
            node,
            extensions={
                "kind": issue.kind.name,
                "fragmentName": issue.fragment_name,
            },
        )
        if issue.location is not None:
            # the start token, not the end of the preceding line
            error.locations = [issue.location]
        self.report_error(error)
