from datetime import datetime
from bloglist.src.extensions import db

class Blog(db.Model):
    """
    Blog Model - A blog post shared by a registered user.

    Fields:
        - id: Primary key (auto-generated)
        - title: Blog title (required)
        - author: Name of the post's author (optional, free text)
        - url: Link to the post (required)
        - likes: Like counter (non-negative, defaults to 0)
        - user_id: ID of the user who added the blog (required, foreign key)
        - created_at: Timestamp of creation (auto-generated)
    """
    __tablename__ = 'blogs'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    title = db.Column(db.String(200), nullable=False, index=True)

    author = db.Column(
        db.String(120),
        nullable=True,
        index=True  # Grouped on by the author statistics
    )

    url = db.Column(db.String(500), nullable=False)

    likes = db.Column(db.Integer, nullable=False, default=0)

    # Owner is fixed at creation, no endpoint transfers it
    user_id = db.Column(
        db.Integer,
        db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False,
        index=True  # blogs-by-owner lookups
    )

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    user = db.relationship(
        'User',
        back_populates='blogs',
        lazy='joined'  # Owner is expanded in every response
    )

    __table_args__ = (
        db.CheckConstraint('likes >= 0', name='ck_blogs_likes_non_negative'),
    )

    def is_owned_by(self, user_id):
        """
        Check ownership against an identity from any source (token claim, model).

        Both sides are compared as strings so '3' and 3 are the same owner.
        """
        if user_id is None:
            return False
        return str(self.user_id) == str(user_id)

    def to_dict(self, include_user=True):
        """
        Convert Blog object to dictionary for JSON serialization.

        Args:
            include_user (bool): Expand the owner to {id, username, name}
        """
        data = {
            'id': self.id,
            'title': self.title,
            'author': self.author,
            'url': self.url,
            'likes': self.likes,
        }
        if include_user:
            data['user'] = {
                'id': self.user.id,
                'username': self.user.username,
                'name': self.user.name
            } if self.user else None
        return data

    def __repr__(self):
        return f'<Blog {self.id}: {self.title} ({self.likes} likes)>'
