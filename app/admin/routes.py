"""
Admin Routes
"""

import logging

from flask import current_app, redirect, request

from app.admin import admin_bp
from app.admin.decorators import role_required
from app.admin.principal import Role
from app.services import delete_comment, parse_comment_id

logger = logging.getLogger(__name__)


@admin_bp.route('/comment', methods=['POST'])
@role_required(Role.ADMIN)
def delete_comment_view(principal):
    """Delete one comment and send the admin back to the listing page.

    A request without ``comment_id`` changes nothing and still redirects.
    A malformed id or a database failure raises an AdminActionError, which
    is rendered as a 500 by the registered error handler.
    """
    listing_url = current_app.config['ADMIN_LISTING_URL']

    raw_id = request.values.get('comment_id')
    if raw_id is None:
        logger.info('Comment delete by %s without comment_id', principal.role.value)
        return redirect(listing_url)

    comment_id = parse_comment_id(raw_id)
    delete_comment(comment_id)
    return redirect(listing_url)
