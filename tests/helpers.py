"""Example collaborators used across the binding tests."""
from dataclasses import dataclass
from typing import Dict

from locator_lib import inject


@dataclass(frozen=True)
class File:
    name: str


class FileLoader:
    def load(self, filename: str) -> File:
        raise NotImplementedError


class FileSystem:
    def __init__(self):
        self._files: Dict[str, File] = {n: File(n) for n in ("pyproject.toml", "config", "notes.md")}

    def load(self, filename: str) -> File:
        try:
            return self._files[filename]
        except KeyError:
            raise FileNotFoundError(f"No such file '{filename}'")


class ProductionFileLoader(FileLoader):
    """Resolves its FileSystem from the registry at construction."""

    def __init__(self):
        self.file_system = inject(FileSystem)

    def load(self, filename: str) -> File:
        return self.file_system.load(filename)


class FakeFileLoader(FileLoader):
    def __init__(self, *files: str):
        self._files = {n: File(n) for n in files}

    def load(self, filename: str) -> File:
        try:
            return self._files[filename]
        except KeyError:
            raise FileNotFoundError(f"No such file '{filename}'")


class FileManager:
    def __init__(self, file_loader: FileLoader):
        self.file_loader = file_loader


class Greeter:
    def greet(self, name: str) -> str:
        raise NotImplementedError


class ConsoleGreeter(Greeter):
    def greet(self, name: str) -> str:
        return f"Hello, {name}!"
