"""
Data access for the catalog.

Handlers never touch the models' query API directly; they go through the
``Repositories`` container attached to the app, so tests can swap in their
own implementations. Methods are coroutines so handlers can issue independent
reads together with ``asyncio.gather``.
"""
import logging
from dataclasses import dataclass

from flask import current_app
from sqlalchemy import func
from sqlalchemy.orm import joinedload, selectinload

from .extensions import db
from .models import Author, Book, BookInstance, Genre

logger = logging.getLogger(__name__)

EXTENSION_KEY = "locallibrary.repositories"


class SqlAlchemyRepository:
    model = None
    order_by = ()
    # Relationships resolved inline on every read
    populate = ()

    def _query(self):
        query = self.model.query
        if self.populate:
            query = query.options(*self.populate)
        return query

    async def list(self, **criteria):
        query = self._query().filter_by(**criteria)
        if self.order_by:
            query = query.order_by(*self.order_by)
        return query.all()

    async def get(self, entity_id):
        return db.session.get(self.model, entity_id, options=list(self.populate))

    async def count(self, **criteria):
        return self.model.query.filter_by(**criteria).count()

    async def add(self, entity):
        db.session.add(entity)
        db.session.commit()
        logger.debug("added %r", entity)
        return entity

    async def update(self, entity):
        """Apply ``entity`` over the stored row with the same id.

        Returns the persisted instance, or None when that id no longer exists.
        """
        if entity.id is None:
            raise ValueError(f"{self.model.__name__} update needs the original id")
        if db.session.get(self.model, entity.id) is None:
            return None
        merged = db.session.merge(entity)
        db.session.commit()
        logger.debug("updated %r", merged)
        return merged

    async def remove(self, entity_id):
        entity = db.session.get(self.model, entity_id)
        if entity is None:
            return False
        db.session.delete(entity)
        db.session.commit()
        logger.debug("removed %s %s", self.model.__name__, entity_id)
        return True


class AuthorRepository(SqlAlchemyRepository):
    model = Author
    order_by = (Author.family_name, Author.first_name)


class GenreRepository(SqlAlchemyRepository):
    model = Genre
    order_by = (Genre.name,)

    async def find_by_name(self, name):
        return Genre.query.filter(func.lower(Genre.name) == name.lower()).first()


class BookRepository(SqlAlchemyRepository):
    model = Book
    order_by = (Book.title,)
    populate = (joinedload(Book.author), selectinload(Book.genre))

    async def list_by_genre(self, genre_id):
        return (
            self._query()
            .filter(Book.genre.any(Genre.id == genre_id))
            .order_by(*self.order_by)
            .all()
        )


class BookInstanceRepository(SqlAlchemyRepository):
    model = BookInstance
    order_by = (BookInstance.id,)
    populate = (joinedload(BookInstance.book),)


@dataclass
class Repositories:
    authors: AuthorRepository
    books: BookRepository
    genres: GenreRepository
    book_instances: BookInstanceRepository

    @classmethod
    def default(cls):
        return cls(
            authors=AuthorRepository(),
            books=BookRepository(),
            genres=GenreRepository(),
            book_instances=BookInstanceRepository(),
        )


def init_app(app, repositories=None):
    app.extensions[EXTENSION_KEY] = repositories or Repositories.default()


def get_repositories() -> Repositories:
    return current_app.extensions[EXTENSION_KEY]
