"""
Shared fixtures for filerepo tests.
"""

import logging
from pathlib import Path
from typing import List

import pytest

from filerepo.file_repository import FileRepository


class RecordingLog:
    """Minimal logging sink that keeps every info message."""

    def __init__(self):
        self.messages: List[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """Empty working directory for one repository"""
    return tmp_path


@pytest.fixture
def log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def repo(repo_dir: Path, log: RecordingLog) -> FileRepository:
    return FileRepository(str(repo_dir), log)


@pytest.fixture
def make_record(repo_dir: Path):
    """Write <id>.txt directly, bypassing the repository"""
    def _make(record_id: int, contents: str = "") -> Path:
        path = repo_dir / f"{record_id}.txt"
        path.write_bytes(contents.encode("utf-8"))
        return path
    return _make


@pytest.fixture
def restore_root_logger():
    """Undo handler/level changes made by setup_logging()"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
