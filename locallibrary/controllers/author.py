import asyncio
import logging

from flask import redirect, render_template, url_for

from ..errors import CatalogError
from ..forms import AuthorForm, collect_errors
from ..models import Author
from ..repositories import get_repositories

logger = logging.getLogger(__name__)


async def _author_with_books(author_id):
    repos = get_repositories()
    return await asyncio.gather(
        repos.authors.get(author_id),
        repos.books.list(author_id=author_id),
    )


def _author_from_form(form, author_id=None):
    return Author(
        id=author_id,
        first_name=form.first_name.data,
        family_name=form.family_name.data,
        date_of_birth=form.date_of_birth.data,
        date_of_death=form.date_of_death.data,
    )


# ----- List / detail -----
async def author_list():
    all_authors = await get_repositories().authors.list()
    return render_template("author_list.html", title="Author List", author_list=all_authors)


async def author_detail(id):
    author, author_books = await _author_with_books(id)
    if author is None:
        logger.debug("id not found on get: %s", id)
        raise CatalogError.not_found("Author not found")

    return render_template("author_detail.html", title="Author Detail",
                           author=author, author_books=author_books)


# ----- Create -----
async def author_create_get():
    return render_template("author_form.html", title="Create Author", form=AuthorForm())


async def author_create_post():
    form = AuthorForm()
    if not form.validate():
        return render_template("author_form.html", title="Create Author", form=form,
                               errors=collect_errors(form))

    author = await get_repositories().authors.add(_author_from_form(form))
    logger.info("created author %s", author.id)
    return redirect(author.url)


# ----- Delete -----
async def author_delete_get(id):
    author, author_books = await _author_with_books(id)
    if author is None:
        logger.debug("id not found on delete: %s", id)
        return redirect(url_for("catalog.author_list"))

    return render_template("author_delete.html", title="Delete Author",
                           author=author, author_books=author_books)


async def author_delete_post(id):
    author, author_books = await _author_with_books(id)
    if author is None:
        return redirect(url_for("catalog.author_list"))

    if author_books:
        logger.warning("refusing to delete author %s with %d books", id, len(author_books))
        return render_template("author_delete.html", title="Delete Author",
                               author=author, author_books=author_books)

    await get_repositories().authors.remove(id)
    logger.info("deleted author %s", id)
    return redirect(url_for("catalog.author_list"))


# ----- Update -----
async def author_update_get(id):
    author = await get_repositories().authors.get(id)
    if author is None:
        logger.debug("id not found on update: %s", id)
        raise CatalogError.not_found("Author not found")

    return render_template("author_form.html", title="Update Author",
                           author=author, form=AuthorForm.from_entity(author))


async def author_update_post(id):
    form = AuthorForm()
    # Carries the stored id so the repository updates rather than inserts
    author = _author_from_form(form, author_id=id)

    if not form.validate():
        return render_template("author_form.html", title="Update Author", author=author,
                               form=form, errors=collect_errors(form))

    updated = await get_repositories().authors.update(author)
    if updated is None:
        raise CatalogError.not_found("Author not found")
    logger.info("updated author %s", id)
    return redirect(updated.url)
