import asyncio
import logging

from flask import redirect, render_template, url_for

from ..errors import CatalogError
from ..forms import BookForm, collect_errors
from ..models import Book
from ..repositories import get_repositories

logger = logging.getLogger(__name__)


async def index():
    repos = get_repositories()
    (
        num_books,
        num_book_instances,
        num_available_book_instances,
        num_authors,
        num_genres,
    ) = await asyncio.gather(
        repos.books.count(),
        repos.book_instances.count(),
        repos.book_instances.count(status="Available"),
        repos.authors.count(),
        repos.genres.count(),
    )

    return render_template(
        "home.html",
        title="Local Library Home",
        book_count=num_books,
        book_instance_count=num_book_instances,
        book_instance_available_count=num_available_book_instances,
        author_count=num_authors,
        genre_count=num_genres,
    )


async def _authors_and_genres():
    repos = get_repositories()
    return await asyncio.gather(repos.authors.list(), repos.genres.list())


async def _book_with_instances(book_id):
    repos = get_repositories()
    return await asyncio.gather(
        repos.books.get(book_id),
        repos.book_instances.list(book_id=book_id),
    )


def _book_from_form(form, genres, book_id=None):
    selected = set(form.genre.data or [])
    return Book(
        id=book_id,
        title=form.title.data,
        author_id=form.author.data,
        summary=form.summary.data,
        isbn=form.isbn.data,
        genre=[g for g in genres if g.id in selected],
    )


# ----- List / detail -----
async def book_list():
    all_books = await get_repositories().books.list()
    return render_template("book_list.html", title="Book List", book_list=all_books)


async def book_detail(id):
    book, book_instances = await _book_with_instances(id)
    if book is None:
        logger.debug("id not found on get: %s", id)
        raise CatalogError.not_found("Book not found")

    return render_template("book_detail.html", title=book.title,
                           book=book, book_instances=book_instances)


# ----- Create -----
async def book_create_get():
    authors, genres = await _authors_and_genres()
    form = BookForm()
    form.set_choices(authors, genres)
    return render_template("book_form.html", title="Create Book", form=form,
                           authors=authors, genres=genres)


async def book_create_post():
    authors, genres = await _authors_and_genres()
    form = BookForm()
    form.set_choices(authors, genres)

    if not form.validate():
        return render_template("book_form.html", title="Create Book", form=form,
                               authors=authors, genres=genres, errors=collect_errors(form))

    book = await get_repositories().books.add(_book_from_form(form, genres))
    logger.info("created book %s", book.id)
    return redirect(book.url)


# ----- Delete -----
async def book_delete_get(id):
    book, book_instances = await _book_with_instances(id)
    if book is None:
        logger.debug("id not found on delete: %s", id)
        return redirect(url_for("catalog.book_list"))

    return render_template("book_delete.html", title="Delete Book",
                           book=book, book_instances=book_instances)


async def book_delete_post(id):
    book, book_instances = await _book_with_instances(id)
    if book is None:
        return redirect(url_for("catalog.book_list"))

    if book_instances:
        logger.warning("refusing to delete book %s with %d copies", id, len(book_instances))
        return render_template("book_delete.html", title="Delete Book",
                               book=book, book_instances=book_instances)

    await get_repositories().books.remove(id)
    logger.info("deleted book %s", id)
    return redirect(url_for("catalog.book_list"))


# ----- Update -----
async def book_update_get(id):
    repos = get_repositories()
    book, authors, genres = await asyncio.gather(
        repos.books.get(id),
        repos.authors.list(),
        repos.genres.list(),
    )
    if book is None:
        logger.debug("id not found on update: %s", id)
        raise CatalogError.not_found("Book not found")

    form = BookForm.from_entity(book)
    form.set_choices(authors, genres)
    return render_template("book_form.html", title="Update Book", book=book, form=form,
                           authors=authors, genres=genres)


async def book_update_post(id):
    authors, genres = await _authors_and_genres()
    form = BookForm()
    form.set_choices(authors, genres)

    if not form.validate():
        return render_template("book_form.html", title="Update Book", form=form,
                               authors=authors, genres=genres, errors=collect_errors(form))

    # Carries the stored id so the repository updates rather than inserts
    updated = await get_repositories().books.update(_book_from_form(form, genres, book_id=id))
    if updated is None:
        raise CatalogError.not_found("Book not found")
    logger.info("updated book %s", id)
    return redirect(updated.url)
