import bookgraph as g
from bookgraph.graphql import executor
from bookgraph.store import RecordStore

from . import authors, books, root


resolvers = (
    authors.resolvers,
    books.resolvers,
    root.resolvers,
)


_graph_definition = g.define_graph(resolvers=resolvers)


def create_graph(*, store):
    return _graph_definition.create_graph({
        RecordStore: store,
    })


Author = authors.Author
Book = books.Book
Mutation = root.Mutation
Query = root.Query


_execute = executor(query_type=Query, mutation_type=Mutation)


def execute(document_text, *, store, variables=None, operation_name=None):
    return _execute(
        document_text,
        graph=create_graph(store=store),
        variables=variables,
        operation_name=operation_name,
    )
