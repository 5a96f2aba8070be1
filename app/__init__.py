"""
Flask application factory module.

This module creates and configures the Blog API application using
the factory pattern, allowing for different configurations
(development, testing, production) and an explicit database URL
override for servers started against a throwaway database.
"""

import logging
from pathlib import Path
from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from config import get_config

# Initialize SQLAlchemy without binding to app
db = SQLAlchemy()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix):].split("?", 1)[0]
    if sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def create_app(config_name: str | None = None, database_url: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        database_url: Optional SQLAlchemy URL overriding the configured
                      database.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if database_url:
        app.config["SQLALCHEMY_DATABASE_URI"] = database_url

    # Views are serialized in declaration order
    app.json.sort_keys = False

    logger.info(f"Creating app with config: {config_class.__name__}")

    _ensure_sqlite_db_parent_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # Initialize extensions
    db.init_app(app)

    # Register blueprints and error handlers
    from app.errors import register_error_handlers
    from app.routes.api import api_bp

    app.register_blueprint(api_bp)
    register_error_handlers(app)

    # Create database tables
    with app.app_context():
        db.create_all()
        logger.info("Database tables created")

    return app
