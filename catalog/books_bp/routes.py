from collections.abc import Mapping

from flask import render_template, request, redirect, url_for, current_app
from . import bp
from .. import get_store
from ..model import BookNotFound, parse_book_id, parse_checkbox


def _book_fields():
    # Forms are the normal path; JSON bodies with the same keys also work.
    data = request.get_json(silent=True) if request.is_json else request.form
    if not isinstance(data, Mapping):
        data = {}
    return dict(
        title=data.get("title") or "",
        author=data.get("author") or "",
        available=parse_checkbox(data.get("available")),
    )


@bp.errorhandler(BookNotFound)
def book_not_found(e):
    current_app.logger.warning("%s %s: no book with id %r", request.method, request.path, e.book_id)
    return "Book not found", 404, {"Content-Type": "text/plain; charset=utf-8"}


@bp.route("/")
def book_list():
    return render_template("index.html", books=get_store().all())


@bp.route("/add", methods=["GET", "POST"])
def add_book():
    store = get_store()

    if request.method == "POST":
        book = store.add(**_book_fields())
        current_app.logger.info("Added book %d: %r by %r", book.id, book.title, book.author)
        return redirect(url_for("books.book_list"))

    return render_template("add.html", books=store.all())


@bp.route("/edit/<book_id>", methods=["GET", "PUT"])
def edit_book(book_id):
    store = get_store()
    book = store.get(parse_book_id(book_id))

    if request.method == "PUT":
        store.update(book.id, **_book_fields())
        current_app.logger.info("Updated book %d", book.id)
        return redirect(url_for("books.book_list"))

    return render_template("edit.html", book=book)


@bp.route("/delete/<book_id>", methods=["DELETE"])
def delete_book(book_id):
    parsed = parse_book_id(book_id)
    if get_store().delete(parsed):
        current_app.logger.info("Deleted book %d", parsed)
    else:
        current_app.logger.debug("Delete of book %r matched nothing", book_id)
    return redirect(url_for("books.book_list"))
