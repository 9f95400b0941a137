import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional


SEED_BOOKS = [
    {
        "id": 1,
        "title": "Srimad Bhagwat Geeta",
        "author": "Maharishi Veda Vyasa",
        "available": True,
    },
    {
        "id": 2,
        "title": "Chanakyaniti",
        "author": "Chanakya",
        "available": False,
    },
]


class BookNotFound(LookupError):
    """Raised when no book in the store carries the requested id."""

    def __init__(self, book_id):
        super().__init__(f"Book not found: {book_id!r}")
        self.book_id = book_id


def parse_checkbox(value: Any) -> bool:
    """
    Checkbox inputs are only submitted when ticked, with the value "on".
    Exactly the literal "on" is True; anything else, absence included, is False.
    """
    return value == "on"


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_book_id(raw: Any) -> Optional[int]:
    """
    Integer id from the leading digits of a path segment (so "1abc" and
    "1.5" are both 1), or None when it does not start with one.
    """
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


@dataclass
class Book:
    id: int
    title: str
    author: str
    available: bool = False

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]):
        return cls(
            id=int(d["id"]),
            title=d.get("title") or "",
            author=d.get("author") or "",
            available=bool(d.get("available", False)),
        )

    def apply_form(self, title: str, author: str, available: bool):
        self.title = title
        self.author = author
        self.available = available

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BookStore:
    """
    Ordered in-memory collection of books.

    Ids come from a counter that only moves forward, so an id freed by a
    delete is never handed out again.
    """

    def __init__(self, books: Iterable[Book] = ()):
        self._books: List[Book] = list(books)
        self._next_id = max((b.id for b in self._books), default=0) + 1

    @classmethod
    def seeded(cls, items: Iterable[Mapping[str, Any]] = SEED_BOOKS):
        return cls(Book.from_dict(raw) for raw in items)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def all(self) -> List[Book]:
        return list(self._books)

    def find(self, book_id) -> Optional[Book]:
        return next((b for b in self._books if b.id == book_id), None)

    def get(self, book_id) -> Book:
        book = self.find(book_id)
        if book is None:
            raise BookNotFound(book_id)
        return book

    def add(self, title: str, author: str, available: bool) -> Book:
        book = Book(id=self._next_id, title=title, author=author, available=available)
        self._next_id += 1
        self._books.append(book)
        return book

    def update(self, book_id, title: str, author: str, available: bool) -> Book:
        book = self.get(book_id)
        book.apply_form(title, author, available)
        return book

    def delete(self, book_id) -> bool:
        """Drop every book with this id. Returns False if there was none."""
        remaining = [b for b in self._books if b.id != book_id]
        removed = len(remaining) != len(self._books)
        self._books = remaining
        return removed
