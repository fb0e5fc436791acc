from precisely import assert_that, equal_to
import pytest

import bookgraph.core as g


class Query(object):
    def __init__(self, type):
        self.type = type


def test_resolver_is_dispatched_using_type_of_query():
    @g.resolver("one")
    def resolve_one(graph, query):
        return 1

    @g.resolver("two")
    def resolve_two(graph, query):
        return 2

    result = g.create_graph([resolve_one, resolve_two]).resolve(Query("two"))

    assert_that(result, equal_to(2))


def test_when_resolve_is_called_then_resolver_is_passed_the_graph():
    @g.resolver("root")
    def resolve_root(graph, query):
        return graph.resolve(Query("leaf"))

    @g.resolver("leaf")
    def resolve_leaf(graph, query):
        return 42

    result = g.create_graph([resolve_root, resolve_leaf]).resolve(Query("root"))

    assert_that(result, equal_to(42))


def test_nested_resolver_sequences_are_flattened():
    @g.resolver("one")
    def resolve_one(graph, query):
        return 1

    @g.resolver("two")
    def resolve_two(graph, query):
        return 2

    graph = g.create_graph(((resolve_one, ), [(resolve_two, )]))

    assert_that(graph.resolve(Query("two")), equal_to(2))


def test_when_no_resolver_matches_query_type_then_error_is_raised():
    graph = g.create_graph([])

    error = pytest.raises(g.GraphError, lambda: graph.resolve(Query("book")))

    assert_that(str(error.value), equal_to("could not find resolver for query of type: book"))


def test_when_two_resolvers_share_a_type_then_error_is_raised():
    @g.resolver("one")
    def resolve_first(graph, query):
        return 1

    @g.resolver("one")
    def resolve_second(graph, query):
        return 2

    error = pytest.raises(g.GraphError, lambda: g.define_graph([resolve_first, resolve_second]))

    assert_that(str(error.value), equal_to("resolver already registered for type: one"))


def test_dependencies_are_injected_into_resolvers_by_key():
    store_key = object()

    @g.resolver("root")
    @g.dependencies(store=store_key)
    def resolve_root(graph, query, *, store):
        return store

    graph = g.define_graph([resolve_root]).create_graph({store_key: "the store"})

    assert_that(graph.resolve(Query("root")), equal_to("the store"))


def test_each_graph_created_from_a_definition_has_its_own_dependencies():
    store_key = object()

    @g.resolver("root")
    @g.dependencies(store=store_key)
    def resolve_root(graph, query, *, store):
        return store

    graph_definition = g.define_graph([resolve_root])
    first = graph_definition.create_graph({store_key: 1})
    second = graph_definition.create_graph({store_key: 2})

    assert_that(first.resolve(Query("root")), equal_to(1))
    assert_that(second.resolve(Query("root")), equal_to(2))


def test_when_dependency_is_missing_then_error_is_raised():
    @g.resolver("root")
    @g.dependencies(store="store")
    def resolve_root(graph, query, *, store):
        return store

    graph = g.create_graph([resolve_root])

    error = pytest.raises(g.GraphError, lambda: graph.resolve(Query("root")))

    assert_that(str(error.value), equal_to("missing dependency: 'store'"))
