"""
Services Package

Exports all services for easy importing.
"""

from app.services.comments import delete_comment, parse_comment_id

__all__ = [
    'delete_comment',
    'parse_comment_id',
]
