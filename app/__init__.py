"""
Band Site Backend - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

from flask import Flask
from sqlalchemy.pool import NullPool

from app.config import Config, DatabaseSettings
from app.errors import register_error_handlers
from app.extensions import connections, db
from app.logging_setup import configure_logging


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance

    Raises:
        ConfigurationError: if DB_URL, DB_USER or DB_PASS is missing
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Fail before any extension sees an incomplete database configuration
    db_settings = DatabaseSettings.from_mapping(app.config)
    app.config['SQLALCHEMY_DATABASE_URI'] = db_settings.sqlalchemy_url().render_as_string(
        hide_password=False)
    app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', {'poolclass': NullPool})

    # Initialize extensions
    db.init_app(app)

    # Register blueprints
    from app.admin import admin_bp

    app.register_blueprint(admin_bp, url_prefix='/admin')

    register_error_handlers(app)

    with app.app_context():
        # Admin mutations share the models' engine (and its NullPool)
        connections.init_app(app, db_settings, engine=db.engine)

        # Create database tables
        from app import models  # noqa: F401
        db.create_all()

    app.logger.info('Application ready (database %s)', db_settings.display_url())
    return app
