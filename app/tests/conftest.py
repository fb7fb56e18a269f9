"""
Shared fixtures: in-memory stand-ins for the console and the file store.
"""

import sys
from pathlib import Path
from typing import Dict, Iterator, List

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from calclog.config import Config
from calclog.console import ConsoleIO
from calclog.files import FileStore
from calclog.logging_config import reset_logging


class FakeConsole(ConsoleIO):
    """Replays scripted answers and records everything printed."""

    def __init__(self, answers: List[str] = None):
        super().__init__()
        self.answers = list(answers or [])
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.errors: List[str] = []
        self.clears = 0

    def write(self, text: str, newline: bool = False) -> None:
        self.output.append(text)

    def write_error(self, text: str) -> None:
        self.errors.append(text)

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {prompt!r}")
        return self.answers.pop(0)

    def clear(self) -> None:
        self.clears += 1


class MemoryFileStore(FileStore):
    """Keeps directories and files in dictionaries."""

    def __init__(self, log_prefix: str = "log"):
        super().__init__(log_prefix)
        self.directories: Dict[str, Dict[str, List[str]]] = {}

    def directory_exists(self, path: str) -> bool:
        return path in self.directories

    def create_directory(self, path: str) -> None:
        self.directories.setdefault(path, {})

    def is_directory_empty(self, path: str) -> bool:
        return not self.directories[path]

    def create_file(self, path: str, name: str) -> str:
        files = self.directories[path]
        if name in files:
            raise FileExistsError(name)
        files[name] = []
        return name

    def list_files(self, path: str) -> List[str]:
        return sorted(name for name in self.directories[path] if name.startswith(self.log_prefix))

    def read_file_lines(self, path: str, name: str) -> Iterator[str]:
        yield from list(self.directories[path][name])

    def append_line(self, path: str, name: str, line: str) -> None:
        self.directories[path][name].append(line)


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def config():
    """Config without pauses or screen clearing."""
    return Config(default_directory="./log", pause_enabled=False, clear_enabled=False)


@pytest.fixture
def store():
    return MemoryFileStore()
