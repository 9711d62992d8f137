import datetime

from locallibrary.extensions import db
from locallibrary.forms import FieldError
from locallibrary.models import Author


def test_author_list_sorted_by_family_name(client, rendered, author_factory):
    author_factory("Leo", "Tolstoy")
    author_factory("Jane", "Austen")

    response = client.get("/catalog/authors")

    assert response.status_code == 200
    name, context = rendered[-1]
    assert name == "author_list.html"
    assert [a.family_name for a in context["author_list"]] == ["Austen", "Tolstoy"]


def test_author_list_empty(client, rendered):
    response = client.get("/catalog/authors")
    assert response.status_code == 200
    assert b"There are no authors." in response.data
    assert rendered[-1][1]["author_list"] == []


def test_author_detail_shows_books(client, rendered, author_factory, book_factory):
    author = author_factory()
    book_factory(title="Emma", author=author)
    book_factory(title="Persuasion", author=author)
    book_factory(title="War and Peace", author=author_factory("Leo", "Tolstoy"))

    response = client.get(f"/catalog/author/{author.id}")

    assert response.status_code == 200
    name, context = rendered[-1]
    assert name == "author_detail.html"
    assert context["author"].id == author.id
    assert sorted(b.title for b in context["author_books"]) == ["Emma", "Persuasion"]


def test_author_detail_unknown_id_is_not_found(client, rendered):
    response = client.get("/catalog/author/999")

    assert response.status_code == 404
    assert [name for name, _ in rendered] == ["error.html"]
    assert rendered[0][1]["error"].message == "Author not found"


def test_create_author_form(client, rendered):
    response = client.get("/catalog/author/create")
    assert response.status_code == 200
    assert rendered[-1][0] == "author_form.html"
    assert rendered[-1][1]["title"] == "Create Author"


def test_create_author_without_dates(client):
    response = client.post("/catalog/author/create",
                           data={"first_name": "Jane", "family_name": "Austen"})

    author = Author.query.one()
    assert response.status_code == 302
    assert response.headers["Location"] == f"/catalog/author/{author.id}"
    assert author.first_name == "Jane"
    assert author.family_name == "Austen"
    assert author.date_of_birth is None
    assert author.date_of_death is None


def test_create_author_trims_and_parses_dates(client):
    response = client.post("/catalog/author/create", data={
        "first_name": "  Leo ",
        "family_name": " Tolstoy",
        "date_of_birth": "1828-09-09",
        "date_of_death": " 1910-11-20 ",
    })

    assert response.status_code == 302
    author = Author.query.one()
    assert author.first_name == "Leo"
    assert author.family_name == "Tolstoy"
    assert author.date_of_birth == datetime.date(1828, 9, 9)
    assert author.date_of_death == datetime.date(1910, 11, 20)


def test_create_author_missing_family_name(client, rendered):
    response = client.post("/catalog/author/create",
                           data={"first_name": "Jane", "family_name": "   "})

    assert response.status_code == 200
    name, context = rendered[-1]
    assert name == "author_form.html"
    assert context["errors"] == [FieldError("family_name", "Family name must be specified.")]
    assert context["form"].first_name.data == "Jane"
    assert b"Family name must be specified." in response.data
    assert Author.query.count() == 0


def test_create_author_collects_every_error(client, rendered):
    client.post("/catalog/author/create", data={
        "first_name": "",
        "family_name": "O'Brien",
        "date_of_birth": "not-a-date",
        "date_of_death": "",
    })

    errors = rendered[-1][1]["errors"]
    assert FieldError("first_name", "First name must be specified.") in errors
    assert FieldError("family_name", "Family name has non-alphanumeric characters.") in errors
    assert FieldError("date_of_birth", "Invalid date of birth") in errors
    assert not any(e.field == "date_of_death" for e in errors)
    assert Author.query.count() == 0


def test_delete_author_with_books_is_blocked(client, rendered, author_factory, book_factory):
    author = author_factory()
    author_id = author.id
    book_factory(title="Emma", author=author)

    response = client.post(f"/catalog/author/{author_id}/delete", data={"authorid": str(author_id)})

    assert response.status_code == 200
    name, context = rendered[-1]
    assert name == "author_delete.html"
    assert [b.title for b in context["author_books"]] == ["Emma"]
    assert db.session.get(Author, author_id) is not None


def test_delete_author_without_books(client, author_factory):
    author_id = author_factory().id

    response = client.post(f"/catalog/author/{author_id}/delete", data={"authorid": str(author_id)})

    assert response.status_code == 302
    assert response.headers["Location"] == "/catalog/authors"
    assert db.session.get(Author, author_id) is None


def test_delete_author_confirmation(client, rendered, author_factory):
    author_id = author_factory().id

    response = client.get(f"/catalog/author/{author_id}/delete")

    assert response.status_code == 200
    assert rendered[-1][0] == "author_delete.html"
    assert b"Do you really want to delete this Author?" in response.data


def test_delete_unknown_author_redirects_to_list(client, rendered):
    response = client.get("/catalog/author/999/delete")

    assert response.status_code == 302
    assert response.headers["Location"] == "/catalog/authors"
    assert rendered == []


def test_update_author_form_is_prefilled(client, rendered, author_factory):
    author = author_factory(date_of_birth=datetime.date(1775, 12, 16))

    response = client.get(f"/catalog/author/{author.id}/update")

    assert response.status_code == 200
    form = rendered[-1][1]["form"]
    assert form.first_name.data == "Jane"
    assert form.date_of_birth.data == datetime.date(1775, 12, 16)
    assert b'value="1775-12-16"' in response.data


def test_update_author_keeps_id(client, author_factory):
    author_id = author_factory().id

    response = client.post(f"/catalog/author/{author_id}/update", data={
        "first_name": "Charlotte",
        "family_name": "Bronte",
        "date_of_birth": "1816-04-21",
    })

    assert response.status_code == 302
    assert response.headers["Location"] == f"/catalog/author/{author_id}"
    assert Author.query.count() == 1
    author = db.session.get(Author, author_id)
    assert author.name == "Bronte, Charlotte"
    assert author.date_of_birth == datetime.date(1816, 4, 21)


def test_update_author_with_errors_rerenders(client, rendered, author_factory):
    author_id = author_factory().id

    response = client.post(f"/catalog/author/{author_id}/update",
                           data={"first_name": "", "family_name": "Bronte"})

    assert response.status_code == 200
    name, context = rendered[-1]
    assert name == "author_form.html"
    assert context["author"].id == author_id
    assert context["errors"] == [FieldError("first_name", "First name must be specified.")]
    assert db.session.get(Author, author_id).family_name == "Austen"


def test_update_unknown_author_is_not_found(client, rendered):
    response = client.get("/catalog/author/999/update")
    assert response.status_code == 404
    assert rendered[-1][1]["error"].message == "Author not found"


def test_update_post_for_missing_author_is_not_found(client, rendered):
    response = client.post("/catalog/author/42/update",
                           data={"first_name": "Jane", "family_name": "Austen"})

    assert response.status_code == 404
    assert rendered[-1][1]["error"].message == "Author not found"
    assert Author.query.count() == 0
