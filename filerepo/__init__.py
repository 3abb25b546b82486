from .errors import (
    RepositoryError,
    InvalidArgumentError,
    RecordNotFoundError,
    RecordExistsError,
    InternalServerError,
)
from .events import ReadResultEvent
from .file_repository import FileRepository

__all__ = [
    "FileRepository",
    "ReadResultEvent",
    "RepositoryError",
    "InvalidArgumentError",
    "RecordNotFoundError",
    "RecordExistsError",
    "InternalServerError",
]
