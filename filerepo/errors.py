from typing import Optional


class RepositoryError(Exception):
    """Base class for all file repository errors."""


class InvalidArgumentError(RepositoryError, ValueError):
    """Raised when a record id is negative or not an integer."""


class RecordNotFoundError(RepositoryError, FileNotFoundError):
    """Raised when the file for a record id does not exist."""


class RecordExistsError(RepositoryError, FileExistsError):
    """Raised when creating a record whose file already exists."""


class InternalServerError(RepositoryError):
    """
    Failure inside the repository after its own checks passed.

    `user_message` is safe to show to end users; `cause` keeps the
    underlying exception for diagnostics.
    """

    status_code = 500

    def __init__(self, user_message: str, cause: Optional[BaseException] = None):
        super().__init__(user_message)
        self.user_message = user_message
        self.cause = cause
