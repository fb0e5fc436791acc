import bookgraph as g
from bookgraph.store import AuthorRecord, BookRecord, RecordStore

from . import authors, books


Query = g.ObjectType(
    "Query",
    description="Root Query",
    fields=lambda: (
        g.field("book", type=g.NullableType(books.Book), description="A single book", params=(
            g.param("id", type=g.NullableType(g.Int), default=None),
        )),
        g.field("books", type=g.ListType(books.Book), description="List of books"),
        g.field("author", type=g.NullableType(authors.Author), description="A single author", params=(
            g.param("id", type=g.NullableType(g.Int), default=None),
        )),
        g.field("authors", type=g.ListType(authors.Author), description="List of authors"),
    ),
)


query_resolver = g.root_object_resolver(Query)


@query_resolver.field(Query.fields.book)
def query_resolve_book(graph, query, args):
    return graph.resolve(books.BookQuery.select_by_id(query, args.id))


@query_resolver.field(Query.fields.books)
def query_resolve_books(graph, query, args):
    return graph.resolve(books.BookQuery.select(query))


@query_resolver.field(Query.fields.author)
def query_resolve_author(graph, query, args):
    return graph.resolve(authors.AuthorQuery.select_by_id(query, args.id))


@query_resolver.field(Query.fields.authors)
def query_resolve_authors(graph, query, args):
    return graph.resolve(authors.AuthorQuery.select(query))


Mutation = g.ObjectType(
    "Mutation",
    description="Root Mutation",
    fields=lambda: (
        g.field("add_book", type=g.NullableType(books.Book), description="Adds a book", params=(
            g.param("name", type=g.String),
            g.param("author_id", type=g.Int),
        )),
        g.field("add_author", type=g.NullableType(authors.Author), description="Adds an author", params=(
            g.param("name", type=g.String),
        )),
    ),
)


mutation_resolver = g.root_object_resolver(Mutation)


@mutation_resolver.field(Mutation.fields.add_book)
@g.dependencies(store=RecordStore)
def mutation_resolve_add_book(graph, query, args, *, store):
    book = store.books.append_new(
        lambda id: BookRecord(id=id, name=args.name, author_id=args.author_id),
    )
    return graph.resolve(books.BookQuery.select_by_id(query, book.id))


@mutation_resolver.field(Mutation.fields.add_author)
@g.dependencies(store=RecordStore)
def mutation_resolve_add_author(graph, query, args, *, store):
    author = store.authors.append_new(
        lambda id: AuthorRecord(id=id, name=args.name),
    )
    return graph.resolve(authors.AuthorQuery.select_by_id(query, author.id))


resolvers = (
    query_resolver,
    mutation_resolver,
)
