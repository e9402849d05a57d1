"""
Flask Extensions
"""

from flask_sqlalchemy import SQLAlchemy

from app.db import ConnectionProvider

# Database instance (models and schema)
db = SQLAlchemy()

# Per-request connections for admin mutations
connections = ConnectionProvider()
