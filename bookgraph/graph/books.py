import bookgraph as g
from bookgraph.schema import to_element_query
from bookgraph.store import RecordStore

from . import authors


Book = g.ObjectType(
    "Book",
    description="A book written by an author",
    fields=lambda: (
        g.field("id", type=g.Int),
        g.field("name", type=g.String),
        g.field("author_id", type=g.Int),
        g.field("author", type=g.NullableType(authors.Author)),
    ),
)


class BookQuery(object):
    @staticmethod
    def select(type_query):
        return BookQuery(type_query=type_query, where=None, unique=False)

    @staticmethod
    def select_by_id(type_query, id):
        return BookQuery(type_query=type_query, where=lambda book: book.id == id, unique=True)

    @staticmethod
    def select_by_author_id(type_query, author_id):
        return BookQuery(type_query=type_query, where=lambda book: book.author_id == author_id, unique=False)

    def __init__(self, type_query, where, unique):
        self.type = BookQuery
        self.type_query = type_query
        self.where = where
        self.unique = unique


@g.resolver(BookQuery)
@g.dependencies(store=RecordStore)
def book_resolver(graph, query, *, store):
    build_book = g.create_object_builder(to_element_query(query.type_query))

    build_book.attr(Book.fields.id, "id")
    build_book.attr(Book.fields.name, "name")
    build_book.attr(Book.fields.author_id, "author_id")

    @build_book.field(Book.fields.author)
    def resolve_author(field_query):
        return lambda book: graph.resolve(
            authors.AuthorQuery.select_by_id(field_query.type_query, book.author_id),
        )

    records = store.books.select(query.where, unique=query.unique)

    return g.build_result(query.type_query, records, build_book)


resolvers = (
    book_resolver,
)
