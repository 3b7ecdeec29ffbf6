from pathlib import Path


class ClassFinderError(Exception):
    """Base for every condition the finder reports by name."""

    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class InvalidArguments(ClassFinderError):
    def __init__(self, message: str) -> None:
        super().__init__(message, "INVALID_ARGUMENTS")


class DirectoryNotFound(ClassFinderError, FileNotFoundError):
    def __init__(self, directory: Path) -> None:
        super().__init__(f'The directory "{directory}" does not exist', "DIRECTORY_NOT_FOUND")
        self.directory = directory


class NotADirectory(ClassFinderError, NotADirectoryError):
    def __init__(self, path: Path) -> None:
        super().__init__(f'The file "{path}" is not a directory', "NOT_A_DIRECTORY")
        self.path = path


class DirectoryUnreadable(ClassFinderError):
    """The scan root itself could not be listed."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f'Cannot list directory "{directory}": {reason}', "DIRECTORY_UNREADABLE")
        self.directory = directory


class SubdirectoryUnlistable(ClassFinderError):
    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f'Skipping unreadable directory "{directory}": {reason}', "SUBDIRECTORY_UNLISTABLE")
        self.directory = directory


class ArchiveUnreadable(ClassFinderError):
    """Corrupt, non-zip or permission-denied archive. Recoverable per candidate."""

    def __init__(self, archive: Path, reason: str) -> None:
        super().__init__(f'Cannot open archive "{archive}": {reason}', "ARCHIVE_UNREADABLE")
        self.archive = archive
