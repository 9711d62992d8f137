import pytest
from flask import template_rendered

from locallibrary import create_app
from locallibrary.config import TestingConfig
from locallibrary.extensions import db
from locallibrary.models import Author, Book, BookInstance, Genre


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def rendered(app):
    """Record (template name, context) for every template the app renders."""
    records = []

    def record(sender, template, context, **extra):
        records.append((template.name, context))

    template_rendered.connect(record, app)
    yield records
    template_rendered.disconnect(record, app)


@pytest.fixture
def author_factory(app):
    def make(first_name="Jane", family_name="Austen", **kwargs):
        author = Author(first_name=first_name, family_name=family_name, **kwargs)
        db.session.add(author)
        db.session.commit()
        return author
    return make


@pytest.fixture
def genre_factory(app):
    def make(name="Fantasy"):
        genre = Genre(name=name)
        db.session.add(genre)
        db.session.commit()
        return genre
    return make


@pytest.fixture
def book_factory(app, author_factory):
    def make(title="Emma", author=None, genres=(), summary="A novel.", isbn="9780141439587"):
        book = Book(
            title=title,
            author=author or author_factory(),
            summary=summary,
            isbn=isbn,
            genre=list(genres),
        )
        db.session.add(book)
        db.session.commit()
        return book
    return make


@pytest.fixture
def instance_factory(app, book_factory):
    def make(book=None, imprint="Penguin, 2003.", status="Available", due_back=None):
        copy = BookInstance(book=book or book_factory(), imprint=imprint,
                            status=status, due_back=due_back)
        db.session.add(copy)
        db.session.commit()
        return copy
    return make
