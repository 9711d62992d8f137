import asyncio
import logging

from flask import redirect, render_template, url_for

from ..errors import CatalogError
from ..forms import FieldError, GenreForm, collect_errors
from ..models import Genre
from ..repositories import get_repositories

logger = logging.getLogger(__name__)


async def _genre_with_books(genre_id):
    repos = get_repositories()
    return await asyncio.gather(
        repos.genres.get(genre_id),
        repos.books.list_by_genre(genre_id),
    )


# ----- List / detail -----
async def genre_list():
    all_genres = await get_repositories().genres.list()
    return render_template("genre_list.html", title="Genre List", genre_list=all_genres)


async def genre_detail(id):
    genre, genre_books = await _genre_with_books(id)
    if genre is None:
        logger.debug("id not found on get: %s", id)
        raise CatalogError.not_found("Genre not found")

    return render_template("genre_detail.html", title="Genre Detail",
                           genre=genre, genre_books=genre_books)


# ----- Create -----
async def genre_create_get():
    return render_template("genre_form.html", title="Create Genre", form=GenreForm())


async def genre_create_post():
    form = GenreForm()
    if not form.validate():
        return render_template("genre_form.html", title="Create Genre", form=form,
                               errors=collect_errors(form))

    repos = get_repositories()
    existing = await repos.genres.find_by_name(form.name.data)
    if existing is not None:
        # Genre exists, redirect to its detail page
        logger.debug("genre %r already exists as %s", form.name.data, existing.id)
        return redirect(existing.url)

    genre = await repos.genres.add(Genre(name=form.name.data))
    logger.info("created genre %s", genre.id)
    return redirect(genre.url)


# ----- Delete -----
async def genre_delete_get(id):
    genre, genre_books = await _genre_with_books(id)
    if genre is None:
        logger.debug("id not found on delete: %s", id)
        return redirect(url_for("catalog.genre_list"))

    return render_template("genre_delete.html", title="Delete Genre",
                           genre=genre, genre_books=genre_books)


async def genre_delete_post(id):
    genre, genre_books = await _genre_with_books(id)
    if genre is None:
        return redirect(url_for("catalog.genre_list"))

    if genre_books:
        logger.warning("refusing to delete genre %s with %d books", id, len(genre_books))
        return render_template("genre_delete.html", title="Delete Genre",
                               genre=genre, genre_books=genre_books)

    await get_repositories().genres.remove(id)
    logger.info("deleted genre %s", id)
    return redirect(url_for("catalog.genre_list"))


# ----- Update -----
async def genre_update_get(id):
    genre = await get_repositories().genres.get(id)
    if genre is None:
        logger.debug("id not found on update: %s", id)
        raise CatalogError.not_found("Genre not found")

    return render_template("genre_form.html", title="Update Genre",
                           genre=genre, form=GenreForm.from_entity(genre))


async def genre_update_post(id):
    form = GenreForm()
    genre = Genre(id=id, name=form.name.data)

    if not form.validate():
        return render_template("genre_form.html", title="Update Genre", genre=genre,
                               form=form, errors=collect_errors(form))

    repos = get_repositories()
    existing = await repos.genres.find_by_name(form.name.data)
    if existing is not None and existing.id != id:
        errors = [FieldError("name", "A genre with this name already exists")]
        return render_template("genre_form.html", title="Update Genre", genre=genre,
                               form=form, errors=errors)

    updated = await repos.genres.update(genre)
    if updated is None:
        raise CatalogError.not_found("Genre not found")
    logger.info("updated genre %s", id)
    return redirect(updated.url)
