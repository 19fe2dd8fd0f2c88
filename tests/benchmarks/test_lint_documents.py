from graphql import parse

from fragment_argument_linter import lint_documents, print_report

from ..utils import nested_query

num_fragments = 200


def create_documents():
    documents = []
    for i in range(num_fragments):
        arguments = "@argumentDefinitions" if i % 2 else ""
        documents.append(
            parse(
                f"fragment Fragment{i} on User {arguments} {{"
                f" id friends {{ ...Fragment{(i + 1) % num_fragments} }} }}"
            )
        )
    spreads = " ".join(
        f"...Fragment{i}" + (" @arguments" if i % 2 else "")
        for i in range(num_fragments)
    )
    documents.append(parse(nested_query(20, spreads)))
    return documents


def test_lint_many_documents(benchmark):
    documents = create_documents()
    result = benchmark(lambda: lint_documents(documents))
    stats = result.stats
    assert stats.fragments_checked == num_fragments
    # even fragments lack @argumentDefinitions, odd ones are spread without @arguments
    assert stats.total_issues == num_fragments
    assert stats.fragments_with_issues == num_fragments


def test_print_report(benchmark):
    result = lint_documents(create_documents())
    report = benchmark(lambda: print_report(result))
    assert report.startswith("# GraphQL Fragment Argument Linter Report")
