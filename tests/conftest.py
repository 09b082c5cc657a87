# tests/conftest.py
"""Shared pytest fixtures: app with a fresh in-memory database per test."""

import pytest

from bloglist.app import create_app
from bloglist.src.extensions import db
from bloglist.src.models import Blog, User

INITIAL_BLOGS = [
    {
        'title': 'React patterns',
        'author': 'Michael Chan',
        'url': 'https://reactpatterns.com/',
        'likes': 7,
    },
    {
        'title': 'Go To Statement Considered Harmful',
        'author': 'Edsger W. Dijkstra',
        'url': 'http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html',
        'likes': 5,
    },
]


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _add_user(app, username, password, name=None):
    with app.app_context():
        user = User(username=username, name=name)
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        return user.id


@pytest.fixture
def root_user(app):
    """Id of a user 'root' with password 'sekret'."""
    return _add_user(app, 'root', 'sekret', name='Superuser')


@pytest.fixture
def other_user(app):
    """Id of a second user who owns nothing."""
    return _add_user(app, 'mallory', 'hunter2', name='Mallory')


@pytest.fixture
def initial_blogs(app, root_user):
    """Store INITIAL_BLOGS owned by root; returns their ids."""
    with app.app_context():
        blogs = [Blog(user_id=root_user, **fields) for fields in INITIAL_BLOGS]
        db.session.add_all(blogs)
        db.session.commit()
        return [blog.id for blog in blogs]


def _auth_header(client, username, password):
    response = client.post('/api/login', json={'username': username, 'password': password})
    assert response.status_code == 200, response.get_json()
    return {'Authorization': f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def root_headers(client, root_user):
    return _auth_header(client, 'root', 'sekret')


@pytest.fixture
def other_headers(client, other_user):
    return _auth_header(client, 'mallory', 'hunter2')


@pytest.fixture
def blogs_in_db(app):
    """Callable returning every stored blog as a dict, read in a fresh session."""
    def _blogs_in_db():
        with app.app_context():
            blogs = db.session.execute(db.select(Blog).order_by(Blog.id)).scalars().all()
            return [dict(blog.to_dict(include_user=False), user_id=blog.user_id) for blog in blogs]
    return _blogs_in_db


@pytest.fixture
def users_in_db(app):
    def _users_in_db():
        with app.app_context():
            users = db.session.execute(db.select(User).order_by(User.id)).scalars().all()
            return [user.to_dict() for user in users]
    return _users_in_db


@pytest.fixture
def non_existing_id(app, root_user, initial_blogs):
    """Id that was valid once but no longer points at a blog."""
    with app.app_context():
        blog = Blog(title='willremovethissoon', url='https://example.com', user_id=root_user)
        db.session.add(blog)
        db.session.commit()
        blog_id = blog.id
        db.session.delete(blog)
        db.session.commit()
        return blog_id
