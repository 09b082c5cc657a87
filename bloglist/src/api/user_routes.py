"""
User API Routes

- POST /api/users  → Register a new user
- GET  /api/users  → List users with the blogs they added
"""

from flask import request, jsonify

from bloglist.src.api import api_bp, error_response, server_error
from bloglist.src.services.user_service import UserService
from bloglist.src.utils.errors import BlogListError


@api_bp.route('/users', methods=['POST'])
def create_user():
    """
    Register a user.

    Request Body (JSON):
        {
            "username": "mluukkai",         # Required, at least 3 chars, unique
            "name": "Matti Luukkainen",     # Optional
            "password": "salainen"          # Required, at least 3 chars
        }

    Success Response (201):
        { "id": 2, "username": "mluukkai", "name": "Matti Luukkainen", "blogs": [] }

    Error Responses:
        400 - Username/password too short, or username already taken
    """
    try:
        user = UserService.create_user(request.get_json(silent=True))
        return jsonify(user.to_dict()), 201
    except BlogListError as e:
        return error_response(e)
    except Exception:
        return server_error('registering user')


@api_bp.route('/users', methods=['GET'])
def get_users():
    try:
        users = UserService.get_all_users()
        return jsonify([user.to_dict() for user in users]), 200
    except Exception:
        return server_error('listing users')
