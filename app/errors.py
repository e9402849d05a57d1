"""
Application Errors

Startup configuration failures and admin request failures.
"""

import logging

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(
            'Missing required database settings: ' + ', '.join(self.missing)
        )


class AdminActionError(Exception):
    """Base class for failures of an admin request."""


class InvalidCommentIdError(AdminActionError, ValueError):
    """The submitted comment_id is not a base-10 integer."""

    def __init__(self, raw):
        self.raw = raw
        super().__init__(f'Invalid comment_id: {raw!r}')


class CommentDeletionError(AdminActionError):
    """The database rejected or could not run the delete."""

    def __init__(self, comment_id):
        self.comment_id = comment_id
        super().__init__(f'Could not delete comment {comment_id}')


def register_error_handlers(app):
    """Render admin failures as the generic server error page."""

    @app.errorhandler(AdminActionError)
    def handle_admin_action_error(error):
        logger.exception('Admin action failed: %s', error)
        return 'Internal Server Error', 500
