from graphql import parse
from graphql.language import (
    DirectiveNode,
    FragmentDefinitionNode,
    NameNode,
    NamedTypeNode,
    SelectionSetNode,
    SourceLocation,
)

from fragment_argument_linter import (
    ARGUMENT_DEFINITIONS_DIRECTIVE_NAME,
    ARGUMENTS_DIRECTIVE_NAME,
    get_node_location,
    has_directive,
)

from .utils import dedent


def describe_directive_names():
    def uses_relay_directive_names():
        assert ARGUMENT_DEFINITIONS_DIRECTIVE_NAME == "argumentDefinitions"
        assert ARGUMENTS_DIRECTIVE_NAME == "arguments"


def describe_has_directive():
    def finds_directive_by_name():
        document = parse(
            "fragment F on User @include(if: true) @argumentDefinitions { id }"
        )
        directives = document.definitions[0].directives
        assert has_directive(directives, "argumentDefinitions") is True
        assert has_directive(directives, "include") is True
        assert has_directive(directives, "arguments") is False

    def matches_names_exactly():
        document = parse("fragment F on User @argumentDefinition @Arguments { id }")
        directives = document.definitions[0].directives
        assert has_directive(directives, "argumentDefinitions") is False
        assert has_directive(directives, "arguments") is False

    def handles_missing_directives():
        assert has_directive(None, "arguments") is False
        assert has_directive([], "arguments") is False
        assert has_directive((), "arguments") is False

    def handles_synthetic_directive_nodes():
        directive = DirectiveNode(name=NameNode(value="arguments"), arguments=())
        assert has_directive([directive], "arguments") is True


def describe_get_node_location():
    def gets_location_of_start_token():
        document = parse(
            dedent(
                """
                query GetUser {
                  user(id: "1") {
                    ...UserFields
                  }
                }
                """
            )
        )
        operation = document.definitions[0]
        assert get_node_location(operation) == (1, 1)
        spread = operation.selection_set.selections[0].selection_set.selections[0]
        location = get_node_location(spread)
        assert isinstance(location, SourceLocation)
        assert location == (3, 5)
        assert location == {"line": 3, "column": 5}

    def returns_none_without_location_info():
        document = parse("fragment F on User { id }", no_location=True)
        assert get_node_location(document.definitions[0]) is None

    def returns_none_for_synthetic_nodes():
        node = FragmentDefinitionNode(
            name=NameNode(value="F"),
            type_condition=NamedTypeNode(name=NameNode(value="User")),
            directives=(),
            selection_set=SelectionSetNode(selections=()),
        )
        assert get_node_location(node) is None
