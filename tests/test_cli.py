from locallibrary.models import Author, Book, BookInstance, Genre


def test_init_db(app):
    result = app.test_cli_runner().invoke(args=["init-db"])

    assert result.exit_code == 0
    assert "Initialized the database." in result.output
    assert Book.query.count() == 0


def test_init_db_with_sample_data(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["init-db", "--sample"])

    assert result.exit_code == 0
    assert "Inserted sample data." in result.output
    assert Genre.query.count() == 3
    assert Author.query.count() == 3
    assert Book.query.count() == 4
    assert BookInstance.query.count() == 4
    assert BookInstance.query.filter_by(status="Available").count() == 2

    again = runner.invoke(args=["init-db", "--sample"])

    assert "skipping sample data" in again.output
    assert Book.query.count() == 4
