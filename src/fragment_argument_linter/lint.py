"""Lint GraphQL documents"""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING, Any, Mapping

from graphql.language import (
    DocumentNode,
    FragmentDefinitionNode,
    OperationDefinitionNode,
)
from graphql.pyutils import inspect

from .error import FragmentArgumentLinterError
from .issues import LintResult
from .report import print_report
from .visitor import FragmentArgumentVisitor

if TYPE_CHECKING:
    from .config import FragmentArgumentLinterConfig

__all__ = ["assert_valid_documents", "lint_documents", "lint_report"]

logger = logging.getLogger(__name__)


def lint_documents(
    documents: Collection[DocumentNode | None],
    config: FragmentArgumentLinterConfig | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> LintResult:
    """Check the fragment arguments in the given documents.

    The documents are presumably from different files which together represent one
    conceptual application, so fragments may be spread in other documents than the
    ones where they are defined. Missing documents (None) are skipped.

    All issues are collected and returned together with statistics about the run.
    Running the linter twice on the same documents gives the same result.
    """
    if isinstance(documents, DocumentNode) or not isinstance(documents, Collection):
        raise TypeError("Documents must be passed as a collection.")
    document_asts: list[DocumentNode] = []
    for document in documents:
        if document is None:
            continue
        if not isinstance(document, DocumentNode):
            raise TypeError(f"You must provide a document node: {inspect(document)}.")
        document_asts.append(document)

    visitor = FragmentArgumentVisitor(config, **kwargs)

    # First pass: index all fragment definitions in all documents.
    for document_ast in document_asts:
        for definition in document_ast.definitions:
            if isinstance(definition, FragmentDefinitionNode):
                visitor.validate_fragment(definition.name.value, definition)

    # Second pass: collect all fragment spreads in all documents.
    for document_ast in document_asts:
        for definition in document_ast.definitions:
            if isinstance(
                definition, (OperationDefinitionNode, FragmentDefinitionNode)
            ):
                visitor.collect_fragment_spreads(definition.selection_set)

    # Third pass: match the fragment spreads against the definitions.
    visitor.validate_fragment_spreads()

    result = LintResult(tuple(visitor.get_issues()), visitor.get_stats())
    logger.debug(
        "Checked %d fragment(s) in %d document(s): %d issue(s) in %d fragment(s).",
        result.stats.fragments_checked,
        len(document_asts),
        result.stats.total_issues,
        result.stats.fragments_with_issues,
    )
    return result


def assert_valid_documents(
    documents: Collection[DocumentNode | None],
    config: FragmentArgumentLinterConfig | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> LintResult:
    """Assert that the fragment arguments in the given documents are valid.

    Utility function which lints the given documents and raises a
    FragmentArgumentLinterError carrying all issues and the printed report if any
    error-level issues have been found. Otherwise, the result is returned.
    """
    result = lint_documents(documents, config, **kwargs)
    if not result.is_valid:
        raise FragmentArgumentLinterError(
            result.issues, result.stats, print_report(result)
        )
    return result


def lint_report(
    documents: Collection[DocumentNode | None],
    config: FragmentArgumentLinterConfig | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str:
    """Lint the given documents and return the printed report.

    Raises a FragmentArgumentLinterError if any error-level issues have been found,
    so that a build using the linter fails.
    """
    return print_report(assert_valid_documents(documents, config, **kwargs))
