
from flask import Flask, current_app

from .config import Config
from .middleware import MethodOverrideMiddleware
from .model import BookStore

STORE_KEY = "book_store"


def get_store() -> BookStore:
    """Book store of the application handling the current request."""
    return current_app.extensions[STORE_KEY]


def create_app(test_config=None):
    app = Flask(__name__)

    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    store = BookStore.seeded() if app.config["SEED_BOOKS"] else BookStore()
    app.extensions[STORE_KEY] = store
    app.logger.debug("Book store ready with %d book(s)", len(store))

    app.wsgi_app = MethodOverrideMiddleware(
        app.wsgi_app, field=app.config["METHOD_OVERRIDE_FIELD"]
    )

    from .books_bp import bp as books_bp
    app.register_blueprint(books_bp)

    return app
