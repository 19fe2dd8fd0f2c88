"""GraphQL Fragment Argument Linter

The primary :mod:`fragment_argument_linter` package checks that Relay-style fragment
arguments are used consistently in GraphQL documents parsed with GraphQL-core.

Fragment definitions declare parameters with the ``@argumentDefinitions`` directive,
and fragment spreads supply their values with the ``@arguments`` directive. The
linter indexes all fragment definitions in a set of documents, collects all fragment
spreads, and reports every spread that is inconsistent with its definition.

This top-level package exports the general API. The sub-modules can be imported
directly for access to the individual parts of the linter:

    - :mod:`fragment_argument_linter.config`: Linter configuration
    - :mod:`fragment_argument_linter.directives`: Directive names and node helpers
    - :mod:`fragment_argument_linter.indexer`: Fragment definition index
    - :mod:`fragment_argument_linter.collector`: Fragment spread collection
    - :mod:`fragment_argument_linter.matcher`: Matching spreads against definitions
    - :mod:`fragment_argument_linter.visitor`: State of a single linter run
    - :mod:`fragment_argument_linter.lint`: Linting whole sets of documents
    - :mod:`fragment_argument_linter.report`: Printing linter reports
    - :mod:`fragment_argument_linter.rules`: Validation rule for GraphQL-core
    - :mod:`fragment_argument_linter.error`: The error raised for failed runs
"""

from .version import version, version_info

from .config import FragmentArgumentLinterConfig, get_config

from .directives import (
    ARGUMENT_DEFINITIONS_DIRECTIVE_NAME,
    ARGUMENTS_DIRECTIVE_NAME,
    get_node_location,
    has_directive,
)

from .issues import (
    FormattedValidationIssue,
    IssueCollector,
    IssueKind,
    IssueLevel,
    LintResult,
    LintStats,
    ValidationIssue,
)

from .indexer import FragmentDefinitionIndex, FragmentDefinitionRecord

from .collector import (
    FragmentSpreadCollector,
    FragmentSpreadRecord,
    find_fragment_spreads,
)

from .matcher import match_fragment_spread, match_fragment_spreads

from .visitor import FragmentArgumentVisitor

from .report import print_issue, print_report

from .lint import assert_valid_documents, lint_documents, lint_report

from .rules import FragmentArgumentsRule

from .error import FragmentArgumentLinterError

__version__ = version

__all__ = [
    "version",
    "version_info",
    "FragmentArgumentLinterConfig",
    "get_config",
    "ARGUMENT_DEFINITIONS_DIRECTIVE_NAME",
    "ARGUMENTS_DIRECTIVE_NAME",
    "get_node_location",
    "has_directive",
    "FormattedValidationIssue",
    "IssueCollector",
    "IssueKind",
    "IssueLevel",
    "LintResult",
    "LintStats",
    "ValidationIssue",
    "FragmentDefinitionIndex",
    "FragmentDefinitionRecord",
    "FragmentSpreadCollector",
    "FragmentSpreadRecord",
    "find_fragment_spreads",
    "match_fragment_spread",
    "match_fragment_spreads",
    "FragmentArgumentVisitor",
    "print_issue",
    "print_report",
    "assert_valid_documents",
    "lint_documents",
    "lint_report",
    "FragmentArgumentsRule",
    "FragmentArgumentLinterError",
]
