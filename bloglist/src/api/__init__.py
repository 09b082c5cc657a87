"""
API Package Initialization Module

Creates the main API blueprint (URL prefix /api) and registers every route
module on it. Also holds the JSON error responses shared by the routes.
"""

import logging

from flask import Blueprint, jsonify

from bloglist.src.extensions import db

logger = logging.getLogger(__name__)

# All routes registered here are prefixed with /api
# Example: '/blogs' becomes '/api/blogs'
api_bp = Blueprint('api', __name__, url_prefix='/api')


def error_response(error):
    """Render a BlogListError as {"error": message} with its status code."""
    return jsonify(error.to_dict()), error.status_code


def server_error(action):
    """
    Log the active exception and return a generic 500.

    Rolls back the session so a half-applied write is not committed later.
    Internal details are never sent to the client.
    """
    db.session.rollback()
    logger.exception('Unexpected error while %s', action)
    return jsonify({'error': 'Something went wrong'}), 500


# Route modules import api_bp, so they must come AFTER it is created
from bloglist.src.api import blog_routes, user_routes, login_routes  # noqa: E402,F401

__all__ = ['api_bp']
