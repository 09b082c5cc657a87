"""
Login API Route

- POST /api/login  → Exchange username and password for a bearer token
"""

from flask import request, jsonify

from bloglist.src.api import api_bp, error_response, server_error
from bloglist.src.services.auth_service import AuthService
from bloglist.src.utils.errors import BlogListError


@api_bp.route('/login', methods=['POST'])
def login():
    """
    Request Body (JSON):
        { "username": "mluukkai", "password": "salainen" }

    Success Response (200):
        { "token": "<jwt>", "username": "mluukkai", "name": "Matti Luukkainen" }

    Error Responses:
        400 - username or password absent
        401 - Invalid username or password
    """
    try:
        return jsonify(AuthService.login(request.get_json(silent=True))), 200
    except BlogListError as e:
        return error_response(e)
    except Exception:
        return server_error('logging in')
