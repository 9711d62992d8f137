import asyncio
import logging

from flask import redirect, render_template, url_for

from ..errors import CatalogError
from ..forms import BookInstanceForm, collect_errors
from ..models import BookInstance
from ..repositories import get_repositories

logger = logging.getLogger(__name__)


def _book_instance_from_form(form, book_instance_id=None):
    return BookInstance(
        id=book_instance_id,
        book_id=form.book.data,
        imprint=form.imprint.data,
        status=form.status.data or "Maintenance",
        due_back=form.due_back.data,
    )


# ----- List / detail -----
async def bookinstance_list():
    all_book_instances = await get_repositories().book_instances.list()
    return render_template("bookinstance_list.html", title="Book Instance List",
                           bookinstance_list=all_book_instances)


async def bookinstance_detail(id):
    book_instance = await get_repositories().book_instances.get(id)
    if book_instance is None:
        logger.debug("id not found on get: %s", id)
        raise CatalogError.not_found("Book copy not found")

    return render_template("bookinstance_detail.html", title="Book:",
                           bookinstance=book_instance)


# ----- Create -----
async def bookinstance_create_get():
    all_books = await get_repositories().books.list()
    form = BookInstanceForm()
    form.set_choices(all_books)
    return render_template("bookinstance_form.html", title="Create BookInstance",
                           form=form, book_list=all_books)


async def bookinstance_create_post():
    # Books are needed both to check the selection and to re-render the dropdown
    all_books = await get_repositories().books.list()
    form = BookInstanceForm()
    form.set_choices(all_books)

    if not form.validate():
        return render_template("bookinstance_form.html", title="Create BookInstance",
                               form=form, book_list=all_books, selected_book=form.book.data,
                               errors=collect_errors(form))

    book_instance = await get_repositories().book_instances.add(_book_instance_from_form(form))
    logger.info("created book instance %s", book_instance.id)
    return redirect(book_instance.url)


# ----- Delete -----
async def bookinstance_delete_get(id):
    book_instance = await get_repositories().book_instances.get(id)
    if book_instance is None:
        logger.debug("id not found on delete: %s", id)
        return redirect(url_for("catalog.bookinstance_list"))

    return render_template("bookinstance_delete.html", title="Delete Book Instance",
                           bookinstance=book_instance)


async def bookinstance_delete_post(id):
    book_instance = await get_repositories().book_instances.get(id)
    if book_instance is not None:
        await get_repositories().book_instances.remove(id)
        logger.info("deleted book instance %s", id)
    return redirect(url_for("catalog.bookinstance_list"))


# ----- Update -----
async def bookinstance_update_get(id):
    repos = get_repositories()
    book_instance, all_books = await asyncio.gather(
        repos.book_instances.get(id),
        repos.books.list(),
    )
    if book_instance is None:
        logger.debug("id not found on update: %s", id)
        raise CatalogError.not_found("Book copy not found")

    form = BookInstanceForm.from_entity(book_instance)
    form.set_choices(all_books)
    return render_template("bookinstance_form.html", title="Update Book Instance",
                           bookinstance=book_instance, form=form, book_list=all_books)


async def bookinstance_update_post(id):
    all_books = await get_repositories().books.list()
    form = BookInstanceForm()
    form.set_choices(all_books)
    # Carries the stored id so the repository updates rather than inserts
    book_instance = _book_instance_from_form(form, book_instance_id=id)

    if not form.validate():
        return render_template("bookinstance_form.html", title="Update Book Instance",
                               bookinstance=book_instance, form=form, book_list=all_books,
                               errors=collect_errors(form))

    updated = await get_repositories().book_instances.update(book_instance)
    if updated is None:
        raise CatalogError.not_found("Book copy not found")
    logger.info("updated book instance %s", id)
    return redirect(updated.url)
