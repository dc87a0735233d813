"""Initialize the Flask app and its extensions."""

import os

from flask import Flask, current_app, jsonify, request
from werkzeug.middleware.proxy_fix import ProxyFix

from . import extensions
from .core.constants import ACTIVITIES_PAGE_LIMIT, DB_FILENAME


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        DATABASE_PATH=os.environ.get("DATABASE_PATH")
        or os.path.join(app.instance_path, DB_FILENAME),
        API_VERSION=os.environ.get("API_VERSION") or "1.0.0",
        ACTIVITIES_PAGE_LIMIT=int(
            os.environ.get("ACTIVITIES_PAGE_LIMIT") or ACTIVITIES_PAGE_LIMIT
        ),
        LOG_LEVEL=os.environ.get("LOG_LEVEL") or "INFO",
    )
    app.json.sort_keys = False

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Ensure the instance folder exists
    try:
        os.makedirs(app.instance_path)
    except OSError:
        pass

    # Initialize extensions
    extensions.store.init_app(app)

    # Register blueprints
    from . import child as child_bp

    app.register_blueprint(child_bp.bp)

    from . import parent as parent_bp

    app.register_blueprint(parent_bp.bp)

    from . import activity as activity_bp

    app.register_blueprint(activity_bp.bp)

    from . import group as group_bp

    app.register_blueprint(group_bp.bp)

    from . import stats as stats_bp

    app.register_blueprint(stats_bp.bp)

    from . import message as message_bp

    app.register_blueprint(message_bp.bp)

    from . import pickup as pickup_bp

    app.register_blueprint(pickup_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    @app.before_request
    def log_request():
        """Log each request and answer CORS pre-flight requests."""
        current_app.logger.info(f"{request.method} {request.path}")
        if request.method == "OPTIONS":
            return "", 204
        return None

    @app.after_request
    def add_cors_headers(response):
        """Allow the mobile app to call the API from any origin."""
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE,OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        return response

    @app.route("/")
    def index():
        """Describe the API."""
        return jsonify(
            {
                "message": "Barnehage API",
                "version": current_app.config["API_VERSION"],
                "endpoints": {
                    "children": "/api/children",
                    "parents": "/api/parents",
                    "activities": "/api/activities",
                    "groups": "/api/groups",
                    "stats": "/api/stats",
                    "messages": "/api/messages",
                    "transfer": "/api/transfer",
                    "pickupToday": "/api/pickup-today",
                },
            }
        )

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    return app
