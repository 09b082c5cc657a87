"""
Application error types.
Services raise these, routes turn them into JSON error responses.
"""


class BlogListError(Exception):
    """Base class for errors that map to a client-facing HTTP status"""

    status_code = 500
    message = 'Something went wrong'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(BlogListError, ValueError):
    """Missing or invalid field in the request body"""
    status_code = 400
    message = 'invalid data'


class MalformedIdError(BlogListError, ValueError):
    """Path id that cannot be parsed as a record identifier"""
    status_code = 400
    message = 'malformatted id'


class AuthenticationError(BlogListError, PermissionError):
    """Missing or invalid bearer token"""
    status_code = 401
    message = 'token missing or invalid'


class AuthorizationError(BlogListError, PermissionError):
    """Valid identity that is not allowed to touch the resource"""
    status_code = 401
    message = 'not allowed'


class NotFoundError(BlogListError, LookupError):
    """Well-formed id that matches no record"""
    status_code = 404
    message = 'not found'
