"""
Purpose: Business logic for blog operations (CRUD, likes, statistics)
Depends on: Blog model, validators, list_helper, db
Used by: Blog API routes
Blog Service Layer - Keeps ownership rules and persistence out of the routes.
"""

import logging
from typing import List, Dict, Any, Optional

from bloglist.src.extensions import db
from bloglist.src.models.blog import Blog
from bloglist.src.models.user import User
from bloglist.src.utils import list_helper
from bloglist.src.utils.errors import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from bloglist.src.utils.validators import (
    parse_id,
    validate_blog_data,
    validate_likes_update,
)

logger = logging.getLogger(__name__)


class BlogService:
    """Service class for blog-related business operations"""

    @staticmethod
    def get_all_blogs() -> List[Blog]:
        """Return every blog, oldest first, with owners loaded."""
        return db.session.execute(
            db.select(Blog).order_by(Blog.id)
        ).unique().scalars().all()

    @staticmethod
    def get_blog(raw_id: Any) -> Blog:
        """
        Retrieve a single blog by the id taken from the URL.

        Raises:
            MalformedIdError: If the id cannot be parsed
            NotFoundError: If no blog has this id
        """
        blog = db.session.get(Blog, parse_id(raw_id))
        if not blog:
            raise NotFoundError(f'blog {raw_id} not found')
        return blog

    @staticmethod
    def create_blog(data: Optional[Dict[str, Any]], user: Optional[User]) -> Blog:
        """
        Create a blog owned by the authenticated user.

        Args:
            data: Request body with title, url, and optional author and likes
            user: Authenticated user, becomes the owner

        Returns:
            Blog: The saved blog

        Raises:
            AuthenticationError: If there is no authenticated user
            ValidationError: If title or url is missing or likes is invalid
        """
        if user is None:
            raise AuthenticationError()

        if not isinstance(data, dict):
            raise ValidationError('title or url missing')

        validated = validate_blog_data(data)

        blog = Blog(
            title=validated['title'],
            author=validated['author'],
            url=validated['url'],
            likes=validated['likes'],
            user=user
        )

        # Blog row and the owner's blog list are committed together
        db.session.add(blog)
        db.session.commit()

        logger.info('User %s created blog %s', user.id, blog.id)
        return blog

    @staticmethod
    def update_likes(raw_id: Any, data: Optional[Dict[str, Any]]) -> Blog:
        """
        Set the like count of a blog.

        No ownership check: any caller may update likes.

        Raises:
            MalformedIdError: If the id cannot be parsed
            ValidationError: If likes is missing or not a non-negative integer
            NotFoundError: If no blog has this id
        """
        blog_id = parse_id(raw_id)
        likes = validate_likes_update(data)

        blog = db.session.get(Blog, blog_id)
        if not blog:
            raise NotFoundError(f'blog {raw_id} not found')

        blog.likes = likes
        db.session.commit()

        logger.info('Blog %s now has %s likes', blog.id, likes)
        return blog

    @staticmethod
    def delete_blog(raw_id: Any, user: Optional[User]) -> None:
        """
        Delete a blog. Only the user who created it may do so.

        Raises:
            AuthenticationError: If there is no authenticated user
            MalformedIdError: If the id cannot be parsed
            NotFoundError: If no blog has this id
            AuthorizationError: If the user is not the blog's owner
        """
        if user is None:
            raise AuthenticationError()

        blog = BlogService.get_blog(raw_id)

        if not blog.is_owned_by(user.id):
            logger.warning('User %s tried to delete blog %s owned by %s',
                           user.id, blog.id, blog.user_id)
            raise AuthorizationError('only the creator can delete blogs')

        blog_id, user_id = blog.id, user.id
        db.session.delete(blog)
        db.session.commit()

        logger.info('User %s deleted blog %s', user_id, blog_id)

    @staticmethod
    def get_stats() -> Dict[str, Any]:
        """
        Aggregate statistics over every stored blog.

        Returns:
            dict: total_likes, favorite_blog, most_blogs, most_likes
        """
        blogs = BlogService.get_all_blogs()
        return {
            'total_likes': list_helper.total_likes(blogs),
            'favorite_blog': list_helper.favorite_blog(blogs),
            'most_blogs': list_helper.most_blogs(blogs),
            'most_likes': list_helper.most_likes(blogs),
        }
