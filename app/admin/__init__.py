"""
Admin Blueprint

Moderation endpoints for the admin panel, authorized by the session role.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from app.admin import routes  # noqa: E402, F401
