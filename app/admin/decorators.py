"""
Admin Decorators

The session is trusted as-is: whatever login flow stored the role is
responsible for authenticating the caller.
"""

import logging
from functools import wraps

from flask import abort, request

from app.admin.principal import current_principal

logger = logging.getLogger(__name__)


def role_required(role):
    """Decorator rejecting the request with 403 unless the caller has ``role``.

    The wrapped view receives the resolved principal as ``principal``.
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            principal = current_principal()
            if not principal.has_role(role):
                logger.warning('Forbidden %s %s (role=%s)',
                               request.method, request.path,
                               principal.role.value if principal.role else None)
                abort(403)
            return f(*args, principal=principal, **kwargs)
        return wrapper
    return decorator
