"""
Purpose: Login and bearer token issuance
Depends on: User model, flask_jwt_extended
Used by: Login API route, JWT user lookup in app.py
"""

import logging
from typing import Dict, Any, Optional

from flask_jwt_extended import create_access_token

from bloglist.src.extensions import db
from bloglist.src.models.user import User
from bloglist.src.services.user_service import UserService
from bloglist.src.utils.errors import AuthenticationError
from bloglist.src.utils.validators import validate_login_data

logger = logging.getLogger(__name__)


class AuthService:
    """Service class for authentication"""

    @staticmethod
    def login(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Check credentials and issue an access token.

        Returns:
            dict: token, username and name of the logged in user

        Raises:
            ValidationError: If username or password is absent
            AuthenticationError: If the credentials don't match a user
        """
        credentials = validate_login_data(data)

        user = UserService.get_by_username(credentials['username'])
        if not user or not user.check_password(credentials['password']):
            logger.info('Failed login for %r', credentials['username'])
            raise AuthenticationError('invalid username or password')

        return {
            'token': AuthService.issue_token(user),
            'username': user.username,
            'name': user.name,
        }

    @staticmethod
    def issue_token(user: User) -> str:
        # JWT subjects must be strings
        return create_access_token(
            identity=str(user.id),
            additional_claims={'username': user.username}
        )

    @staticmethod
    def resolve_identity(identity: Any) -> Optional[User]:
        """
        Map a token identity back to a user.

        Returns None for identities that are not ids or no longer exist.
        """
        try:
            user_id = int(identity)
        except (TypeError, ValueError):
            return None
        return db.session.get(User, user_id)
