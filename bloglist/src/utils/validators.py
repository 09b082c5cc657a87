"""
Input validation utilities for API request data.
Ensures data integrity before it reaches the database.
"""

from typing import Dict, Any, Optional

from bloglist.src.utils.errors import ValidationError, MalformedIdError


MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3

# Mirror the column sizes in the models
MAX_TITLE_LENGTH = 200
MAX_AUTHOR_LENGTH = 120
MAX_URL_LENGTH = 500
MAX_USERNAME_LENGTH = 80
MAX_NAME_LENGTH = 120

# Largest value a 32-bit INTEGER column holds
MAX_DB_INTEGER = 2 ** 31 - 1


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() alone also accepts '²' and other Unicode digits
    return value.isascii() and value.isdigit()


def parse_id(raw_id: Any) -> int:
    """
    Parse a record id taken from the URL path.

    Only plain ASCII digit strings (or ints) are ids: no sign, whitespace
    or underscores.

    Raises:
        MalformedIdError: If the value is not an integer in 1..MAX_DB_INTEGER
    """
    if isinstance(raw_id, bool):
        raise MalformedIdError()
    if isinstance(raw_id, str):
        if not _is_ascii_digits(raw_id):
            raise MalformedIdError()
        raw_id = int(raw_id)
    if not isinstance(raw_id, int) or not 0 < raw_id <= MAX_DB_INTEGER:
        raise MalformedIdError()
    return raw_id


def parse_likes(value: Any) -> int:
    """
    Coerce a likes value to a non-negative integer.

    Accepts ints and strings of ASCII digits. Booleans and floats are rejected.

    Raises:
        ValidationError: If value is not a valid like count
    """
    if isinstance(value, bool):
        raise ValidationError('likes must be a non-negative integer')
    if isinstance(value, str) and _is_ascii_digits(value.strip()):
        value = int(value.strip())
    if not isinstance(value, int) or not 0 <= value <= MAX_DB_INTEGER:
        raise ValidationError('likes must be a non-negative integer')
    return value


def _clean_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        return None
    return value.strip()


def validate_blog_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate blog creation data.

    Args:
        data: Dictionary containing blog fields from request

    Returns:
        dict: Sanitized data with title, author, url and likes

    Raises:
        ValidationError: If title or url is missing or too long, or likes is invalid
    """
    title = _clean_str(data.get('title'))
    url = _clean_str(data.get('url'))
    if not title or not url:
        raise ValidationError('title or url missing')

    author = _clean_str(data.get('author')) or None

    errors = []
    if len(title) > MAX_TITLE_LENGTH:
        errors.append(f'title cannot exceed {MAX_TITLE_LENGTH} characters')
    if len(url) > MAX_URL_LENGTH:
        errors.append(f'url cannot exceed {MAX_URL_LENGTH} characters')
    if author and len(author) > MAX_AUTHOR_LENGTH:
        errors.append(f'author cannot exceed {MAX_AUTHOR_LENGTH} characters')
    if errors:
        raise ValidationError('; '.join(errors))

    # Falsy likes (missing, 0, None, '') default to 0
    likes = data.get('likes')
    likes = parse_likes(likes) if likes else 0

    return {'title': title, 'author': author, 'url': url, 'likes': likes}


def validate_likes_update(data: Optional[Dict[str, Any]]) -> int:
    """
    Validate the body of a likes update.

    Raises:
        ValidationError: If likes is missing or not a non-negative integer
    """
    if not data or 'likes' not in data:
        raise ValidationError('likes missing')
    return parse_likes(data['likes'])


def validate_user_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate user registration data.

    Uniqueness of the username is checked by the service, not here.

    Returns:
        dict: Sanitized username, name and password

    Raises:
        ValidationError: With every problem found, joined by '; '
    """
    errors = []

    username = _clean_str(data.get('username')) or ''
    if len(username) < MIN_USERNAME_LENGTH:
        errors.append(f'username must be at least {MIN_USERNAME_LENGTH} characters long')
    elif len(username) > MAX_USERNAME_LENGTH:
        errors.append(f'username cannot exceed {MAX_USERNAME_LENGTH} characters')

    name = _clean_str(data.get('name')) or None
    if name and len(name) > MAX_NAME_LENGTH:
        errors.append(f'name cannot exceed {MAX_NAME_LENGTH} characters')

    # Don't sanitize password - preserve exactly as entered
    password = data.get('password')
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f'password must be at least {MIN_PASSWORD_LENGTH} characters long')

    if errors:
        raise ValidationError('; '.join(errors))

    return {
        'username': username,
        'name': name,
        'password': password,
    }


def validate_login_data(data: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Require username and password strings in a login request."""
    data = data or {}
    username = data.get('username')
    password = data.get('password')
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError('username and password are required')
    return {'username': username.strip(), 'password': password}
