import bookgraph as g
from bookgraph.schema import to_element_query
from bookgraph.store import RecordStore

from . import books


Author = g.ObjectType(
    "Author",
    description="An author of books",
    fields=lambda: (
        g.field("id", type=g.Int),
        g.field("name", type=g.String),
        g.field("books", type=g.ListType(books.Book)),
    ),
)


class AuthorQuery(object):
    @staticmethod
    def select(type_query):
        return AuthorQuery(type_query=type_query, where=None, unique=False)

    @staticmethod
    def select_by_id(type_query, id):
        return AuthorQuery(type_query=type_query, where=lambda author: author.id == id, unique=True)

    def __init__(self, type_query, where, unique):
        self.type = AuthorQuery
        self.type_query = type_query
        self.where = where
        self.unique = unique


@g.resolver(AuthorQuery)
@g.dependencies(store=RecordStore)
def author_resolver(graph, query, *, store):
    build_author = g.create_object_builder(to_element_query(query.type_query))

    build_author.attr(Author.fields.id, "id")
    build_author.attr(Author.fields.name, "name")

    @build_author.field(Author.fields.books)
    def resolve_books(field_query):
        return lambda author: graph.resolve(
            books.BookQuery.select_by_author_id(field_query.type_query, author.id),
        )

    records = store.authors.select(query.where, unique=query.unique)

    return g.build_result(query.type_query, records, build_author)


resolvers = (
    author_resolver,
)
