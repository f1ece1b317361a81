"""File system access abstraction.

Isolates the two file operations the pull request template lookup needs so
that tests can run against an in-memory tree.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystemOps(ABC):
    """Abstract interface for file system reads."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        ...

    @abstractmethod
    def read_text(self, path: Path, encoding: str) -> str:
        """Read a file as text.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid in `encoding`
        """
        ...


class RealFileSystemOps(FileSystemOps):
    """Production implementation backed by pathlib."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path, encoding: str) -> str:
        return path.read_text(encoding=encoding)
