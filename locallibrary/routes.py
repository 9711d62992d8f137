from flask import Blueprint, redirect, url_for

from .controllers import author, book, bookinstance, genre

# Largest id the store can hold; bigger path ids fail routing
MAX_ID = 2**63 - 1
ID = f"<int(max={MAX_ID}):id>"

catalog = Blueprint("catalog", __name__, url_prefix="/catalog")

catalog.add_url_rule("/", "index", book.index, methods=["GET"])


def register_entity_routes(bp, kind, controller, plural=None):
    """Bind the list/detail/create/delete/update handlers of one entity kind."""
    plural = plural or f"{kind}s"

    def handler(name):
        return getattr(controller, f"{kind}_{name}")

    bp.add_url_rule(f"/{kind}/create", f"{kind}_create_get", handler("create_get"), methods=["GET"])
    bp.add_url_rule(f"/{kind}/create", f"{kind}_create_post", handler("create_post"), methods=["POST"])
    bp.add_url_rule(f"/{kind}/{ID}/delete", f"{kind}_delete_get", handler("delete_get"), methods=["GET"])
    bp.add_url_rule(f"/{kind}/{ID}/delete", f"{kind}_delete_post", handler("delete_post"), methods=["POST"])
    bp.add_url_rule(f"/{kind}/{ID}/update", f"{kind}_update_get", handler("update_get"), methods=["GET"])
    bp.add_url_rule(f"/{kind}/{ID}/update", f"{kind}_update_post", handler("update_post"), methods=["POST"])
    bp.add_url_rule(f"/{kind}/{ID}", f"{kind}_detail", handler("detail"), methods=["GET"])
    bp.add_url_rule(f"/{plural}", f"{kind}_list", handler("list"), methods=["GET"])


register_entity_routes(catalog, "book", book)
register_entity_routes(catalog, "author", author)
register_entity_routes(catalog, "genre", genre)
register_entity_routes(catalog, "bookinstance", bookinstance)


def register_routes(app):
    app.register_blueprint(catalog)

    @app.route("/")
    def home():
        return redirect(url_for("catalog.index"))
