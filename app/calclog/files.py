"""
File Store Module

Everything the calculator does on disk: the log directory and
the timestamped log files inside it.

FileStore is the interface the menu talks to. LocalFileStore is
the real implementation; tests swap in an in-memory one.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional

from .logging_config import get_logger

logger = get_logger("files")

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def new_log_name(prefix: str, now: Optional[datetime] = None) -> str:
    """
    Build a log file name: prefix followed by a fixed width timestamp.

    The timestamp has no separators, so names sort by creation time.
    """
    return prefix + (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


class FileStore(ABC):
    """
    Abstract base class for log storage.

    All operations take the directory explicitly; the store keeps
    no state about the current session.
    """

    def __init__(self, log_prefix: str = "log"):
        self.log_prefix = log_prefix

    @abstractmethod
    def directory_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create the directory. Raises OSError if that is not possible."""
        pass

    @abstractmethod
    def is_directory_empty(self, path: str) -> bool:
        pass

    @abstractmethod
    def create_file(self, path: str, name: str) -> str:
        """
        Create an empty file inside the directory.

        Returns:
            The name of the created file

        Raises:
            OSError: If the file already exists or cannot be created
        """
        pass

    @abstractmethod
    def list_files(self, path: str) -> List[str]:
        """Sorted names of the log files in the directory."""
        pass

    @abstractmethod
    def read_file_lines(self, path: str, name: str) -> Iterator[str]:
        pass

    @abstractmethod
    def append_line(self, path: str, name: str, line: str) -> None:
        pass

    def most_recent_file(self, path: str) -> Optional[str]:
        """
        Return the newest log file, or None when there is none.

        Timestamps are fixed width, so the newest file is simply the
        greatest name.
        """
        files = self.list_files(path)
        return files[-1] if files else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.log_prefix!r})"


class LocalFileStore(FileStore):
    """
    FileStore backed by the local file system.

    Relative paths are resolved against the current directory at
    call time, like the rest of the command line.
    """

    def directory_exists(self, path: str) -> bool:
        return Path(path).is_dir()

    def create_directory(self, path: str) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)
        logger.info(f"Created log directory {path}")

    def is_directory_empty(self, path: str) -> bool:
        return not any(Path(path).iterdir())

    def create_file(self, path: str, name: str) -> str:
        file_path = Path(path) / name
        # "x" fails with FileExistsError instead of truncating
        with open(file_path, "x", encoding="utf-8"):
            pass
        logger.info(f"Created log file {file_path}")
        return name

    def list_files(self, path: str) -> List[str]:
        return sorted(
            item.name for item in Path(path).iterdir()
            if item.is_file() and item.name.startswith(self.log_prefix)
        )

    def read_file_lines(self, path: str, name: str) -> Iterator[str]:
        """Yield the lines of a file in order, without line endings."""
        with open(Path(path) / name, "r", encoding="utf-8") as f:
            for line in f:
                yield line.rstrip("\r\n")

    def append_line(self, path: str, name: str, line: str) -> None:
        """Append one line; the file is closed again before returning."""
        with open(Path(path) / name, "a", encoding="utf-8") as f:
            f.write(line + "\n")
            f.flush()
        logger.debug(f"Appended to {name}: {line}")
