"""
Catalog models.

Text columns hold values that were already trimmed and escaped by the forms,
so templates render them with ``|safe``.
"""
from .extensions import db

CATALOG_PREFIX = "/catalog"

BOOK_INSTANCE_STATUSES = ("Available", "Maintenance", "Loaned", "Reserved")


def format_date(value):
    """Medium date format, e.g. ``Jun 5, 1990``."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


book_genres = db.Table(
    "book_genres",
    db.Column("book_id", db.Integer, db.ForeignKey("books.id"), primary_key=True),
    db.Column("genre_id", db.Integer, db.ForeignKey("genres.id"), primary_key=True),
)


class Author(db.Model):
    __tablename__ = "authors"
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    family_name = db.Column(db.String(100), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=True)
    date_of_death = db.Column(db.Date, nullable=True)

    books = db.relationship("Book", back_populates="author")

    @property
    def name(self):
        # Empty when either part is missing, so a half-filled form shows nothing
        if self.first_name and self.family_name:
            return f"{self.family_name}, {self.first_name}"
        return ""

    @property
    def lifespan(self):
        if self.date_of_birth is None and self.date_of_death is None:
            return ""
        return f"{format_date(self.date_of_birth)} - {format_date(self.date_of_death)}"

    @property
    def url(self):
        return f"{CATALOG_PREFIX}/author/{self.id}"

    def __repr__(self):
        return f"<Author {self.id} {self.family_name!r}>"


class Genre(db.Model):
    __tablename__ = "genres"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)

    books = db.relationship("Book", secondary=book_genres, viewonly=True)

    @property
    def url(self):
        return f"{CATALOG_PREFIX}/genre/{self.id}"

    def __repr__(self):
        return f"<Genre {self.id} {self.name!r}>"


class Book(db.Model):
    __tablename__ = "books"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(500), nullable=False)
    author_id = db.Column(db.Integer, db.ForeignKey("authors.id"), nullable=False)
    summary = db.Column(db.Text, nullable=False)
    isbn = db.Column(db.String(32), nullable=False)

    author = db.relationship("Author", back_populates="books")
    genre = db.relationship("Genre", secondary=book_genres)
    instances = db.relationship("BookInstance", back_populates="book")

    @property
    def url(self):
        return f"{CATALOG_PREFIX}/book/{self.id}"

    def __repr__(self):
        return f"<Book {self.id} {self.title!r}>"


class BookInstance(db.Model):
    __tablename__ = "book_instances"
    id = db.Column(db.Integer, primary_key=True)
    book_id = db.Column(db.Integer, db.ForeignKey("books.id"), nullable=False)
    imprint = db.Column(db.String(200), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="Maintenance")
    due_back = db.Column(db.Date, nullable=True)

    book = db.relationship("Book", back_populates="instances")

    @property
    def due_back_formatted(self):
        return format_date(self.due_back)

    @property
    def url(self):
        return f"{CATALOG_PREFIX}/bookinstance/{self.id}"

    def __repr__(self):
        return f"<BookInstance {self.id} {self.status!r}>"
