"""
Custom exceptions raised by the service layer.

Each exception carries the HTTP status code and the human readable
message the API returns for it, so endpoints can translate a failure
into a response without knowing which store operation produced it.
"""


class UserServiceError(Exception):
    """Base exception for user store operations."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserAlreadyExistsError(UserServiceError):
    """Another record already uses the submitted email."""

    status_code = 400

    def __init__(self, message: str = "User already exists."):
        super().__init__(message)


class UserNotFoundError(UserServiceError):
    """No record matches the requested identifier."""

    status_code = 404

    def __init__(self, message: str = "User not found."):
        super().__init__(message)


class StoreError(UserServiceError):
    """The underlying database failed; the message is passed through verbatim."""
