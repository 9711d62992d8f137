import datetime

from locallibrary.forms import (
    AuthorForm,
    FieldError,
    GenreForm,
    clean_summary,
    collect_errors,
    escape_markup,
    strip_whitespace,
)


def test_iso_date_field_accepts_datetimes(app):
    data = {"first_name": "Jane", "family_name": "Austen", "date_of_birth": "1775-12-16T08:30:00Z"}
    with app.test_request_context(method="POST", data=data):
        form = AuthorForm()
        assert form.validate()
        assert form.date_of_birth.data == datetime.date(1775, 12, 16)
        assert form.date_of_death.data is None


def test_iso_date_field_reports_its_own_message(app):
    data = {"first_name": "Jane", "family_name": "Austen", "date_of_death": "yesterday"}
    with app.test_request_context(method="POST", data=data):
        form = AuthorForm()
        assert not form.validate()
        assert collect_errors(form) == [FieldError("date_of_death", "Invalid date of death")]


def test_collect_errors_keeps_field_order(app):
    data = {"first_name": "J@ne", "family_name": ""}
    with app.test_request_context(method="POST", data=data):
        form = AuthorForm()
        form.validate()
        assert collect_errors(form) == [
            FieldError("first_name", "First name has non-alphanumeric characters."),
            FieldError("family_name", "Family name must be specified."),
        ]


def test_genre_form_escapes_name(app):
    with app.test_request_context(method="POST", data={"name": " Tom & Jerry "}):
        form = GenreForm()
        assert form.validate()
        assert form.name.data == "Tom &amp; Jerry"


def test_text_filters():
    assert strip_whitespace("  Emma ") == "Emma"
    assert strip_whitespace(None) is None
    assert escape_markup("<b>") == "&lt;b&gt;"
    assert escape_markup("") == ""


def test_clean_summary_keeps_formatting_only():
    cleaned = clean_summary('<p onclick="x()">A <em>very</em> <a href="#">good</a> book</p>')
    assert cleaned == "<p>A <em>very</em> good book</p>"
