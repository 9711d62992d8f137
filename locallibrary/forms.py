"""
Form validation and sanitization.

Each form field runs its filters (trim, escape) and then its validators in
order; WTForms validates every field, so ``collect_errors`` returns all the
problems at once rather than the first one.
"""
from collections import namedtuple

import bleach
from dateutil.parser import isoparse
from flask_wtf import FlaskForm
from markupsafe import Markup, escape
from wtforms import DateField, SelectField, SelectMultipleField, StringField, TextAreaField
from wtforms.validators import InputRequired, DataRequired, Length, Optional, Regexp
from wtforms.widgets import CheckboxInput, ListWidget

from .models import BOOK_INSTANCE_STATUSES

FieldError = namedtuple("FieldError", ["field", "message"])

# Formatting tags a book summary may keep; everything else is stripped
SUMMARY_ALLOWED_TAGS = ["b", "i", "u", "em", "strong", "p", "br", "ul", "ol", "li"]


def strip_whitespace(value):
    return value.strip() if isinstance(value, str) else value


def escape_markup(value):
    return escape(value) if value else value


def clean_summary(value):
    if not value:
        return value
    return Markup(bleach.clean(value, tags=SUMMARY_ALLOWED_TAGS, strip=True))


def stored(value):
    """Mark a value read back from the store as already sanitized."""
    return Markup(value) if value else value


class IsoDateField(DateField):
    """Date field accepting any ISO-8601 date or datetime string."""

    def __init__(self, label=None, validators=None, invalid_message=None, **kwargs):
        super().__init__(label, validators, **kwargs)
        self.invalid_message = invalid_message

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        value = " ".join(valuelist).strip()
        try:
            self.data = isoparse(value).date()
        except (ValueError, OverflowError):
            self.data = None
            raise ValueError(self.invalid_message or self.gettext("Not a valid date value."))


def text_filters():
    return [strip_whitespace, escape_markup]


def alphanumeric(message):
    return Regexp(r"^[A-Za-z0-9]+$", message=message)


class AuthorForm(FlaskForm):
    first_name = StringField("First Name", filters=text_filters(), validators=[
        DataRequired(message="First name must be specified."),
        alphanumeric("First name has non-alphanumeric characters."),
        Length(max=100),
    ])
    family_name = StringField("Family Name", filters=text_filters(), validators=[
        DataRequired(message="Family name must be specified."),
        alphanumeric("Family name has non-alphanumeric characters."),
        Length(max=100),
    ])
    date_of_birth = IsoDateField("Date of birth", validators=[Optional()],
                                 invalid_message="Invalid date of birth")
    date_of_death = IsoDateField("Date of death", validators=[Optional()],
                                 invalid_message="Invalid date of death")

    @classmethod
    def from_entity(cls, author):
        return cls(data={
            "first_name": stored(author.first_name),
            "family_name": stored(author.family_name),
            "date_of_birth": author.date_of_birth,
            "date_of_death": author.date_of_death,
        })


class GenreForm(FlaskForm):
    name = StringField("Genre", filters=text_filters(), validators=[
        Length(min=3, max=100, message="Genre name must contain at least 3 characters"),
    ])

    @classmethod
    def from_entity(cls, genre):
        return cls(data={"name": stored(genre.name)})


class BookForm(FlaskForm):
    title = StringField("Title", filters=text_filters(), validators=[
        DataRequired(message="Title must not be empty."),
        Length(max=500),
    ])
    author = SelectField("Author", coerce=int, validators=[
        InputRequired(message="Author must not be empty."),
    ])
    summary = TextAreaField("Summary", filters=[strip_whitespace, clean_summary], validators=[
        DataRequired(message="Summary must not be empty."),
    ])
    isbn = StringField("ISBN", filters=text_filters(), validators=[
        DataRequired(message="ISBN must not be empty"),
        Length(max=32),
    ])
    genre = SelectMultipleField("Genre", coerce=int, validators=[Optional()],
                                widget=ListWidget(prefix_label=False),
                                option_widget=CheckboxInput())

    def set_choices(self, authors, genres):
        self.author.choices = [(a.id, stored(a.name)) for a in authors]
        self.genre.choices = [(g.id, stored(g.name)) for g in genres]

    @classmethod
    def from_entity(cls, book):
        return cls(data={
            "title": stored(book.title),
            "author": book.author_id,
            "summary": stored(book.summary),
            "isbn": stored(book.isbn),
            "genre": [g.id for g in book.genre],
        })


class BookInstanceForm(FlaskForm):
    book = SelectField("Book", coerce=int, validators=[
        InputRequired(message="Book must be specified"),
    ])
    imprint = StringField("Imprint", filters=text_filters(), validators=[
        DataRequired(message="Imprint must be specified"),
        Length(max=200),
    ])
    status = SelectField("Status", default="Maintenance",
                         choices=[(s, s) for s in BOOK_INSTANCE_STATUSES],
                         validators=[Optional()])
    due_back = IsoDateField("Date when book available", validators=[Optional()],
                            invalid_message="Invalid date")

    def set_choices(self, books):
        self.book.choices = [(b.id, stored(b.title)) for b in books]

    @classmethod
    def from_entity(cls, book_instance):
        return cls(data={
            "book": book_instance.book_id,
            "imprint": stored(book_instance.imprint),
            "status": book_instance.status,
            "due_back": book_instance.due_back,
        })


def collect_errors(form):
    """Flatten ``form.errors`` into a list of FieldError records, in field order."""
    errors = []
    for name, messages in form.errors.items():
        for message in messages:
            errors.append(FieldError(name, message))
    return errors
