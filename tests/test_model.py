import pytest

from catalog.model import (
    Book, BookStore, BookNotFound, SEED_BOOKS, parse_book_id, parse_checkbox,
)


@pytest.fixture
def seeded():
    return BookStore.seeded()


def test_seeded_store_holds_two_books_in_order(seeded):
    assert [b.id for b in seeded] == [1, 2]
    assert seeded.get(1).title == "Srimad Bhagwat Geeta"
    assert seeded.get(1).available is True
    assert seeded.get(2).author == "Chanakya"
    assert seeded.get(2).available is False


def test_seeding_does_not_share_records_between_stores():
    a, b = BookStore.seeded(), BookStore.seeded()
    a.update(1, "Changed", "Someone", False)
    assert b.get(1).title == SEED_BOOKS[0]["title"]


def test_add_assigns_next_id_and_appends(seeded):
    book = seeded.add("Foo", "Bar", False)
    assert book == Book(id=3, title="Foo", author="Bar", available=False)
    assert len(seeded) == 3
    assert seeded.all()[-1] is book


def test_empty_store_starts_at_one():
    store = BookStore()
    assert len(store) == 0
    assert store.all() == []
    assert store.add("", "", False).id == 1


def test_ids_are_not_reused_after_delete(seeded):
    seeded.delete(1)
    book = seeded.add("New", "Author", True)
    assert book.id == 3
    assert sorted(b.id for b in seeded) == [2, 3]


def test_deleting_the_last_book_does_not_rewind_ids(seeded):
    added = seeded.add("Foo", "Bar", False)
    seeded.delete(added.id)
    assert seeded.add("Baz", "Qux", False).id == 4


def test_get_missing_id_raises(seeded):
    with pytest.raises(BookNotFound) as exc:
        seeded.get(99)
    assert exc.value.book_id == 99


def test_get_none_raises(seeded):
    with pytest.raises(BookNotFound):
        seeded.get(None)


def test_update_changes_only_that_book(seeded):
    before = seeded.get(2).to_dict()
    seeded.update(1, "T", "A", False)
    assert seeded.get(1).to_dict() == {"id": 1, "title": "T", "author": "A", "available": False}
    assert seeded.get(2).to_dict() == before


def test_update_missing_id_leaves_store_alone(seeded):
    before = [b.to_dict() for b in seeded]
    with pytest.raises(BookNotFound):
        seeded.update(42, "T", "A", True)
    assert [b.to_dict() for b in seeded] == before


def test_delete_reports_whether_anything_was_removed(seeded):
    assert seeded.delete(1) is True
    assert [b.id for b in seeded] == [2]
    assert seeded.delete(1) is False
    assert [b.id for b in seeded] == [2]


def test_delete_removes_every_match():
    store = BookStore([Book(1, "a", "x"), Book(1, "b", "y"), Book(2, "c", "z")])
    store.delete(1)
    assert [b.title for b in store] == ["c"]


@pytest.mark.parametrize("value, expected", [
    ("on", True),
    ("On", False),
    ("true", False),
    ("", False),
    (None, False),
    (True, False),
])
def test_parse_checkbox(value, expected):
    assert parse_checkbox(value) is expected


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    (" 7 ", 7),
    ("abc", None),
    ("1.5", 1),
    ("1abc", 1),
    ("1_0", 1),
    ("-3", -3),
    ("\u0663", None),
    ("", None),
    (None, None),
])
def test_parse_book_id(raw, expected):
    assert parse_book_id(raw) == expected
