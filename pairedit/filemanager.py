"""Reading, writing and creating project files."""

from __future__ import annotations

import os

PROJECT_FILE_EXTENSION = ".psproj"
PATH_SEPARATOR = "/"


class FileOpeningFailure(OSError):
    """A file could not be opened for reading or writing."""


class IncorrectUserInput(ValueError):
    """The user gave no file name."""


class FileManager:
    """File operations used by the editor and the project handling."""

    def read_from_file(self, file_name: str) -> str:
        """Return the whole content of *file_name*."""
        if not file_name:
            raise IncorrectUserInput("no file name given")
        try:
            with open(file_name, encoding="utf-8", newline="") as stream:
                return stream.read()
        except OSError as error:
            raise FileOpeningFailure(f"cannot open {file_name!r} for reading") from error

    def create_file(self, file_name: str) -> None:
        """Create *file_name*, or empty it if it exists."""
        self.write_to_file(file_name, "")

    def write_to_file(self, file_name: str, content: str) -> None:
        """Replace the content of *file_name* with *content*."""
        try:
            with open(file_name, "w", encoding="utf-8", newline="") as stream:
                stream.write(content)
        except OSError as error:
            raise FileOpeningFailure(f"cannot open {file_name!r} for writing") from error

    @staticmethod
    def _project_file_name(path: str) -> str:
        return path.rpartition(PATH_SEPARATOR)[2] + PROJECT_FILE_EXTENSION

    def create_project_file(self, path: str) -> None:
        """Create the project file inside the project directory *path*, named after it."""
        path = os.fspath(path)
        self.create_file(path + PATH_SEPARATOR + self._project_file_name(path))

    def project_exists(self, path: str) -> bool:
        """True if the directory *path* holds its project file."""
        path = os.fspath(path)
        return os.path.exists(os.path.join(path, self._project_file_name(path)))

    def source_file_by_the_same_name_exists(self, header_name: str) -> bool:
        """True if a ".cpp" file sits beside the ".h" file *header_name*."""
        header_name = os.fspath(header_name)
        return os.path.exists(header_name[:-2] + ".cpp")