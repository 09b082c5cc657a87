"""
Purpose: Business logic for user registration and listing
Depends on: User model, validators, db
Used by: User API routes
"""

import logging
from typing import List, Dict, Any, Optional

from sqlalchemy.exc import IntegrityError

from bloglist.src.extensions import db
from bloglist.src.models.user import User
from bloglist.src.utils.errors import ValidationError
from bloglist.src.utils.validators import validate_user_data

logger = logging.getLogger(__name__)


class UserService:
    """Service class for user-related business operations"""

    @staticmethod
    def create_user(data: Optional[Dict[str, Any]]) -> User:
        """
        Register a new user.

        Args:
            data: Request body with username, password and optional name

        Returns:
            User: The saved user

        Raises:
            ValidationError: If username or password is too short, or the
                username is already taken
        """
        validated = validate_user_data(data if isinstance(data, dict) else {})

        if UserService.get_by_username(validated['username']):
            raise ValidationError('username must be unique')

        user = User(username=validated['username'], name=validated['name'])
        user.set_password(validated['password'])

        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration
            db.session.rollback()
            raise ValidationError('username must be unique')

        logger.info('Registered user %s (%s)', user.id, user.username)
        return user

    @staticmethod
    def get_all_users() -> List[User]:
        return db.session.execute(
            db.select(User).order_by(User.id)
        ).scalars().all()

    @staticmethod
    def get_by_username(username: str) -> Optional[User]:
        return db.session.execute(
            db.select(User).filter_by(username=username)
        ).scalar_one_or_none()
