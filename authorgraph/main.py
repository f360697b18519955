"""Flask application entry point."""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from .config import settings
from .db import EXTENSION_KEY, Store
from .db.seed import seed_store
from .exceptions import AuthenticationError, AuthorGraphError, ResourceNotFound, ValidationError

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _error_response(error: AuthorGraphError, type_name: str, status: int):
    response = {
        "message": error.message,
        "error": {
            "type": type_name,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), status


# Error handlers
def handle_validation_error(error):
    """Handle ValidationError exceptions."""
    return _error_response(error, "ValidationError", 400)


def handle_authentication_error(error):
    """Handle AuthenticationError exceptions."""
    return _error_response(error, "AuthenticationError", 401)


def handle_not_found(error):
    """Handle ResourceNotFound exceptions."""
    return _error_response(error, "ResourceNotFound", 404)


def handle_authorgraph_error(error):
    """Handle generic AuthorGraphError exceptions."""
    return _error_response(error, error.__class__.__name__, 500)


def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "message": "An internal error occurred",
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


def home():
    """Liveness check."""
    return "i'm home"


def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


def create_app(store: Store | None = None) -> Flask:
    """
    Build the Flask application.

    Args:
        store: Store to serve. When omitted a new one is created and,
            if settings.seed_demo_data is set, filled with demo data.

    Returns:
        Configured Flask app; its store is at app.extensions["authorgraph.store"]
    """
    app = Flask(__name__)

    # CORS configuration
    CORS(
        app,
        origins=settings.cors_origins,
        methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    if store is None:
        store = Store()
        if settings.seed_demo_data:
            seed_store(store)
    app.extensions[EXTENSION_KEY] = store

    app.register_error_handler(ValidationError, handle_validation_error)
    app.register_error_handler(AuthenticationError, handle_authentication_error)
    app.register_error_handler(ResourceNotFound, handle_not_found)
    app.register_error_handler(AuthorGraphError, handle_authorgraph_error)
    app.register_error_handler(500, handle_internal_error)

    app.add_url_rule("/", "home", home)
    app.add_url_rule("/health", "health", health)

    # Register API blueprints
    from .auth.api import auth_bp
    from .graph.api import graph_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(graph_bp, url_prefix=settings.graphql_path)

    logger.info(f"Application created with {store.author.count()} authors and {store.article.count()} articles")
    return app


def run():
    """Serve the application with Flask's threaded server."""
    app = create_app()
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    run()
