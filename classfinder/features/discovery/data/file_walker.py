import os
import logging
from pathlib import Path
from typing import Iterator, Set, Tuple
from classfinder.core.errors import DirectoryUnreadable, SubdirectoryUnlistable
from ..domain.interfaces import ICandidateWalker

logger = logging.getLogger(__name__)

class LocalCandidateWalker(ICandidateWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    """

    def __init__(self, follow_symlinks: bool = True):
        self.follow_symlinks = follow_symlinks

    def walk(self, root: Path) -> Iterator[Path]:
        # (st_dev, st_ino) of every directory already entered, so a symlink
        # loop or two links to the same directory are walked only once
        visited: Set[Tuple[int, int]] = set()
        try:
            visited.add(self._identity(root))
        except OSError as e:
            raise DirectoryUnreadable(root, e.strerror or str(e))

        def on_error(error: OSError) -> None:
            failed = Path(error.filename) if error.filename else root
            reason = error.strerror or str(error)
            if failed == root:
                raise DirectoryUnreadable(root, reason)
            logger.warning(str(SubdirectoryUnlistable(failed, reason)))

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=self.follow_symlinks):
            current = Path(dirpath)

            # 1. Sort and prune directories in-place; os.walk only descends into what stays
            dirnames.sort()
            if self.follow_symlinks:
                dirnames[:] = [d for d in dirnames if self._first_visit(current / d, visited)]

            # 2. Regular files only. Directories named like archives never get here.
            for filename in sorted(filenames):
                file_path = current / filename
                if file_path.is_file():
                    yield file_path

    def _first_visit(self, directory: Path, visited: Set[Tuple[int, int]]) -> bool:
        try:
            identity = self._identity(directory)
        except OSError as e:
            logger.warning(str(SubdirectoryUnlistable(directory, e.strerror or str(e))))
            return False
        if identity in visited:
            logger.debug(f"Already visited, skipping: {directory}")
            return False
        visited.add(identity)
        return True

    @staticmethod
    def _identity(directory: Path) -> Tuple[int, int]:
        stat = directory.stat()
        return stat.st_dev, stat.st_ino
