"""Fragment argument directives

GraphQL has no native syntax for fragment parameters. Relay-style documents use two
conventionally named directives instead: ``@argumentDefinitions`` on a fragment
definition declares its parameters, and ``@arguments`` on a fragment spread supplies
their values. Both are recognized by exact match on the directive name only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql.language import SourceLocation

if TYPE_CHECKING:
    from graphql.language import DirectiveNode, Node

__all__ = [
    "ARGUMENTS_DIRECTIVE_NAME",
    "ARGUMENT_DEFINITIONS_DIRECTIVE_NAME",
    "get_node_location",
    "has_directive",
]

ARGUMENT_DEFINITIONS_DIRECTIVE_NAME = "argumentDefinitions"

ARGUMENTS_DIRECTIVE_NAME = "arguments"


def has_directive(
    directives: tuple[DirectiveNode, ...] | list[DirectiveNode] | None, name: str
) -> bool:
    """Check whether a directive with the given name is in the list of directives."""
    if not directives:
        return False
    return any(directive.name.value == name for directive in directives)


def get_node_location(node: Node) -> SourceLocation | None:
    """Get the line and column where the given AST node starts.

    Returns None for synthetically constructed nodes and for documents that have been
    parsed without location information.
    """
    loc = getattr(node, "loc", None)
    if loc is None:
        return None
    start_token = loc.start_token
    return SourceLocation(start_token.line, start_token.column)
