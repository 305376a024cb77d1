"""Error taxonomy shared by the services and the controllers.

Each error is a werkzeug HTTP exception so its status code travels with it;
controllers catch them and turn ``description`` into the JSON error body.
"""
from werkzeug.exceptions import BadRequest, InternalServerError, NotFound, Unauthorized


class ValidationError(BadRequest):
    """Malformed body or a value outside its enumeration."""


class DuplicateError(BadRequest):
    """Unique value (username) already taken."""


class AuthError(Unauthorized):
    """Bad or missing credentials."""


class NotFoundError(NotFound):
    """Referenced id does not exist."""


class StoreError(InternalServerError):
    """Persistence failure, including a missing database configuration."""
