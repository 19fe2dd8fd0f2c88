from graphql import parse

from . import nested_query


def describe_nested_query():
    def creates_flat_query_for_depth_one():
        assert nested_query(1, "...UserFields") == "query Nested { ...UserFields }"

    def nests_inner_selection_in_fields():
        assert nested_query(3, "...UserFields", "user") == (
            "query Nested { user { user { ...UserFields } } }"
        )

    def creates_parsable_deeply_nested_queries():
        document = parse(nested_query(50, "id"))
        selection_set = document.definitions[0].selection_set
        depth = 1
        while selection_set.selections[0].selection_set:
            selection_set = selection_set.selections[0].selection_set
            depth += 1
        assert depth == 50
