import enum
import logging

from flask import render_template
from flask_wtf.csrf import CSRFError
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db

logger = logging.getLogger(__name__)


class ErrorKind(enum.Enum):
    NOT_FOUND = 404
    VALIDATION_FAILED = 400
    METHOD_NOT_ALLOWED = 405
    INTERNAL = 500


class CatalogError(Exception):
    """A failure handed to the central error page instead of a view."""

    def __init__(self, kind, message):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status(self):
        return self.kind.value

    @classmethod
    def not_found(cls, message):
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def validation_failed(cls, message):
        return cls(ErrorKind.VALIDATION_FAILED, message)

    @classmethod
    def method_not_allowed(cls, message="Method not allowed"):
        return cls(ErrorKind.METHOD_NOT_ALLOWED, message)

    @classmethod
    def internal(cls, message="Something went wrong on our side."):
        return cls(ErrorKind.INTERNAL, message)

    def __repr__(self):
        return f"CatalogError({self.kind.name}, {self.message!r})"


def render_error(error):
    return render_template("error.html", title=error.message, error=error,
                           status=error.status), error.status


def register_error_handlers(app):
    @app.errorhandler(CatalogError)
    def handle_catalog_error(error):
        if error.kind is ErrorKind.INTERNAL:
            logger.error("internal error: %s", error.message)
        else:
            logger.info("%s: %s", error.kind.name.lower(), error.message)
        return render_error(error)

    @app.errorhandler(404)
    def not_found(e):
        return render_error(CatalogError.not_found("Page not found"))

    @app.errorhandler(405)
    def method_not_allowed(e):
        return render_error(CatalogError.method_not_allowed())

    @app.errorhandler(CSRFError)
    def csrf_failed(e):
        logger.warning("rejected form submission: %s", e.description)
        return render_error(CatalogError.validation_failed(e.description))

    @app.errorhandler(SQLAlchemyError)
    def database_failed(e):
        db.session.rollback()
        logger.exception("data store failure")
        return render_error(CatalogError.internal("The catalog is temporarily unavailable."))

    @app.errorhandler(500)
    def internal_error(e):
        return render_error(CatalogError.internal())
