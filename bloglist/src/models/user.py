"""
Purpose: User model for registration, login and blog ownership.
Depends on: SQLAlchemy, werkzeug.security
Used by: Users API, Login API, Blogs API
"""
from datetime import datetime
from werkzeug.security import generate_password_hash, check_password_hash
from bloglist.src.extensions import db


class User(db.Model):
    """
    User Model - Represents accounts that can add and delete blogs.

    Fields:
        - id: Primary key
        - username: Unique username for login (at least 3 characters)
        - name: Display name (optional)
        - password_hash: Salted password hash (never store plain passwords)
        - created_at: Account creation timestamp
        - blogs: Blogs added by this user
    """

    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    username = db.Column(
        db.String(80),
        unique=True,  # No duplicate usernames
        nullable=False,
        index=True  # Fast username lookups for login
    )

    name = db.Column(db.String(120), nullable=True)

    # Password stored as hash (NEVER store plaintext passwords)
    password_hash = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    # Derived from Blog.user_id, so deleting a blog drops it from this list
    blogs = db.relationship(
        'Blog',
        back_populates='user',
        order_by='Blog.id',
        cascade='all, delete-orphan',
        passive_deletes=True
    )

    def set_password(self, password):
        """
        Hash and store password securely.

        Args:
            password (str): Plain text password from user input
        """
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """
        Verify password against stored hash.

        Returns:
            bool: True if password matches, False otherwise
        """
        return check_password_hash(self.password_hash, password)

    def to_dict(self, include_blogs=True):
        """
        Convert User to dictionary. The password hash is never included.

        Args:
            include_blogs (bool): Whether to list the user's blogs
        """
        data = {
            'id': self.id,
            'username': self.username,
            'name': self.name,
        }

        if include_blogs:
            data['blogs'] = [blog.to_dict(include_user=False) for blog in self.blogs]

        return data

    def __repr__(self):
        return f'<User {self.id}: {self.username}>'
