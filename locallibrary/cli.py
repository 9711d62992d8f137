import datetime
import logging

import click

from .extensions import db
from .models import Author, Book, BookInstance, Genre

logger = logging.getLogger(__name__)


def seed_sample_data():
    """Insert a handful of genres, authors, books and copies."""
    fantasy = Genre(name="Fantasy")
    science_fiction = Genre(name="Science Fiction")
    poetry = Genre(name="French Poetry")

    rothfuss = Author(first_name="Patrick", family_name="Rothfuss",
                      date_of_birth=datetime.date(1973, 6, 6))
    asimov = Author(first_name="Isaac", family_name="Asimov",
                    date_of_birth=datetime.date(1920, 1, 2),
                    date_of_death=datetime.date(1992, 4, 6))
    bova = Author(first_name="Ben", family_name="Bova",
                  date_of_birth=datetime.date(1932, 11, 8))

    name_of_the_wind = Book(
        title="The Name of the Wind (The Kingkiller Chronicle, #1)",
        summary="I have stolen princesses back from sleeping barrow kings.",
        isbn="9781473211896", author=rothfuss, genre=[fantasy],
    )
    wise_mans_fear = Book(
        title="The Wise Man's Fear (The Kingkiller Chronicle, #2)",
        summary="Picking up the tale of Kvothe Kingkiller once again.",
        isbn="9788401352836", author=rothfuss, genre=[fantasy],
    )
    apes_and_angels = Book(
        title="Apes and Angels",
        summary="Humankind headed out to the stars not for conquest, nor exploration.",
        isbn="9780765379528", author=bova, genre=[science_fiction],
    )
    foundation = Book(
        title="Foundation",
        summary="The Galactic Empire has prospered for twelve thousand years.",
        isbn="9780553293357", author=asimov, genre=[science_fiction],
    )

    copies = [
        BookInstance(book=name_of_the_wind, imprint="London Gollancz, 2014.", status="Available"),
        BookInstance(book=wise_mans_fear, imprint="Gollancz, 2011.", status="Loaned",
                     due_back=datetime.date.today() + datetime.timedelta(days=14)),
        BookInstance(book=apes_and_angels, imprint="New York Tom Doherty Associates, 2016.",
                     status="Available"),
        BookInstance(book=foundation, imprint="Bantam Spectra, 1991.", status="Maintenance"),
    ]

    db.session.add_all([fantasy, science_fiction, poetry, rothfuss, asimov, bova,
                        name_of_the_wind, wise_mans_fear, apes_and_angels, foundation, *copies])
    db.session.commit()
    return len(copies)


def register_commands(app):
    @app.cli.command("init-db")
    @click.option("--sample", is_flag=True, help="Also insert sample catalog records.")
    def init_db_command(sample):
        """Create the catalog tables."""
        db.create_all()
        click.echo("Initialized the database.")
        if sample:
            if Book.query.count():
                click.echo("Catalog already has books, skipping sample data.")
                return
            seed_sample_data()
            logger.info("inserted sample catalog records")
            click.echo("Inserted sample data.")
