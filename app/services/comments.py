"""
Comment Moderation Service

Parses admin input and removes comment rows.
"""

import logging
import re

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.errors import CommentDeletionError, InvalidCommentIdError
from app.extensions import connections

logger = logging.getLogger(__name__)

_COMMENT_ID_PATTERN = re.compile(r'[+-]?[0-9]+')

# ids are stored in a 32-bit INTEGER column
MIN_COMMENT_ID = -2 ** 31
MAX_COMMENT_ID = 2 ** 31 - 1

DELETE_COMMENT_SQL = text('DELETE FROM comments WHERE id = :id')


def parse_comment_id(raw):
    """Parse a base-10 comment id.

    Surrounding whitespace, underscores and other forms ``int()`` would
    otherwise accept are rejected, as are values outside the 32-bit range.

    Raises:
        InvalidCommentIdError: if ``raw`` is not a plain 32-bit integer.
    """
    if not isinstance(raw, str) or not _COMMENT_ID_PATTERN.fullmatch(raw):
        raise InvalidCommentIdError(raw)
    comment_id = int(raw)
    if not MIN_COMMENT_ID <= comment_id <= MAX_COMMENT_ID:
        raise InvalidCommentIdError(raw)
    return comment_id


def delete_comment(comment_id, provider=None):
    """Delete the comment with ``comment_id`` and return the affected row count.

    Deleting an id that does not exist affects zero rows and is not an error.

    Args:
        comment_id: Integer id of the comment
        provider: ConnectionProvider to use (default: the app's provider)

    Raises:
        CommentDeletionError: if connecting or running the delete fails
    """
    provider = provider or connections
    try:
        with provider.acquire() as conn:
            result = conn.execute(DELETE_COMMENT_SQL, {'id': comment_id})
            conn.commit()
    except SQLAlchemyError as exc:
        raise CommentDeletionError(comment_id) from exc

    logger.info('Deleted comment %s (%s row(s) affected)', comment_id, result.rowcount)
    return result.rowcount
