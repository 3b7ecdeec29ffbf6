from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

class ICandidateWalker(ABC):
    """
    Contract for traversing a directory tree in search of archives
    and loose class files.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields every regular file under root, depth-first, in a stable order.
        Unreadable subdirectories are skipped; an unreadable root raises.
        """
        pass
