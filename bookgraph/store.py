import threading

from .logging import get_logger


logger = get_logger(__name__)


class AuthorRecord(object):
    def __init__(self, id, name):
        self.id = id
        self.name = name

    def __eq__(self, other):
        if isinstance(other, AuthorRecord):
            return (self.id, self.name) == (other.id, other.name)
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def __repr__(self):
        return "AuthorRecord(id={!r}, name={!r})".format(self.id, self.name)


class BookRecord(object):
    def __init__(self, id, name, author_id):
        self.id = id
        self.name = name
        self.author_id = author_id

    def __eq__(self, other):
        if isinstance(other, BookRecord):
            return (self.id, self.name, self.author_id) == (other.id, other.name, other.author_id)
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    __hash__ = None

    def __repr__(self):
        return "BookRecord(id={!r}, name={!r}, author_id={!r})".format(self.id, self.name, self.author_id)


class RecordCollection(object):
    """
    An ordered, append-only sequence of records.

    Lookups are linear scans in insertion order. New ids are allocated
    under a lock so that concurrent writers never share an id.
    """

    def __init__(self, name, records=()):
        self.name = name
        self._records = list(records)
        self._lock = threading.Lock()

    def __iter__(self):
        return iter(list(self._records))

    def __len__(self):
        return len(self._records)

    def find(self, predicate):
        for record in self._records:
            if predicate(record):
                return record

        return None

    def filter(self, predicate):
        return [
            record
            for record in self._records
            if predicate(record)
        ]

    def select(self, where=None, *, unique=False):
        if where is None:
            return list(self)
        elif unique:
            record = self.find(where)
            return [] if record is None else [record]
        else:
            return self.filter(where)

    def append(self, record):
        self._records.append(record)
        logger.debug("Record appended", collection=self.name, id=record.id)
        return record

    def append_new(self, create_record):
        with self._lock:
            return self.append(create_record(len(self._records) + 1))


class RecordStore(object):
    def __init__(self, authors, books):
        self.authors = authors
        self.books = books


def seed_authors():
    return [
        AuthorRecord(id=1, name="JkRowling"),
        AuthorRecord(id=2, name="jrr tolkien"),
        AuthorRecord(id=3, name="brent weeks"),
    ]


def seed_books():
    return [
        BookRecord(id=1, name="harry potter", author_id=1),
        BookRecord(id=2, name="the fellowship of the ring", author_id=2),
        BookRecord(id=3, name="the way of shadows", author_id=3),
    ]


def create_store(*, authors=None, books=None):
    if authors is None:
        authors = seed_authors()
    if books is None:
        books = seed_books()

    return RecordStore(
        authors=RecordCollection("authors", authors),
        books=RecordCollection("books", books),
    )
