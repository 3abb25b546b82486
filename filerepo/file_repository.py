import os
import re
import warnings
from typing import Callable, List, Optional

from filerepo.errors import (
    InvalidArgumentError,
    RecordNotFoundError,
    RecordExistsError,
    InternalServerError,
)
from filerepo.events import ReadResultEvent
from filerepo.logger import get_logger

RECORD_SUFFIX = ".txt"
# only names _record_path produces: ASCII digits, no leading zeros
_RECORD_NAME = re.compile(r"(0|[1-9][0-9]*)\.txt", re.ASCII)


class FileRepository:
    """
    Text records addressed by non-negative integer ids:
    - One file per record, named "<id>.txt", in a single directory.
    - read: return the whole file.
    - write: overwrite the whole file (the file must already exist).
    - delete: remove the file (the file must already exist).

    There is no cache and no locking; every call goes straight to the
    filesystem.
    """

    def __init__(
        self,
        working_directory,
        log=None,
        on_read_result: Optional[Callable[[str], None]] = None,
    ):
        # nothing touches the disk here; the directory is assumed to exist
        self.working_directory = os.fspath(working_directory)
        self.log = log if log is not None else get_logger(__name__)

        # optional listeners for the contents returned by read()
        self.read_result = ReadResultEvent()
        if on_read_result is not None:
            self.read_result.subscribe(on_read_result)

    # ------------------ public API ------------------ #

    def read(self, record_id: int) -> str:
        filename = self._get_repository_filename(record_id)

        self.log.info(f"Reading from file: {filename}")
        with open(filename, "r", encoding="utf-8", newline="") as f:
            contents = f.read()

        self.read_result.fire(contents)
        return contents

    def write(self, record_id: int, contents: str) -> None:
        """Overwrite an existing record. Use create() for a new id."""
        filename = self._get_repository_filename(record_id)

        self.log.info(f"Writing to file: {filename}")
        with open(filename, "w", encoding="utf-8", newline="") as f:
            f.write(contents)

    def delete(self, record_id: int) -> bool:
        """
        Remove an existing record and return True.

        A missing record raises RecordNotFoundError before anything is
        removed; a failed removal raises InternalServerError.
        """
        filename = self._get_repository_filename(record_id)

        self.log.info(f"Deleting file: {filename}")
        try:
            os.remove(filename)
        except OSError as ex:
            raise InternalServerError("Could not delete file!", ex) from ex

        return True

    def update_file(self, record_id: int, contents: str) -> None:
        """Deprecated: write() and then notify read_result with `contents`."""
        warnings.warn(
            "update_file() is deprecated, use write() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        self.write(record_id, contents)
        self.read_result.fire(contents)

    def create(self, record_id: int, contents: str = "") -> None:
        filename = self._record_path(record_id)

        self.log.info(f"Creating file: {filename}")
        try:
            with open(filename, "x", encoding="utf-8", newline="") as f:
                f.write(contents)
        except FileExistsError as ex:
            raise RecordExistsError(f"Record {record_id} already exists") from ex

    def exists(self, record_id: int) -> bool:
        return os.path.isfile(self._record_path(record_id))

    def ids(self) -> List[int]:
        found = []
        for fname in os.listdir(self.working_directory):
            match = _RECORD_NAME.fullmatch(fname)
            if match and os.path.isfile(os.path.join(self.working_directory, fname)):
                found.append(int(match.group(1)))
        return sorted(found)

    # ------------------ internal helpers ------------------ #

    def _record_path(self, record_id: int) -> str:
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            raise InvalidArgumentError(f"Repository Id must be an integer: {record_id!r}")
        if record_id < 0:
            raise InvalidArgumentError(f"Repository Id out of range: {record_id}")
        return os.path.join(self.working_directory, f"{record_id}{RECORD_SUFFIX}")

    def _get_repository_filename(self, record_id: int) -> str:
        filename = self._record_path(record_id)
        if not os.path.isfile(filename):
            raise RecordNotFoundError("Requested file doesn't exist in the directory")
        return filename
