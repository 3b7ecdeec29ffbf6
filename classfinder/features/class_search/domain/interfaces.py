from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

class IArchiveReader(ABC):
    @abstractmethod
    def list_entries(self, archive_path: Path) -> List[str]:
        """
        Returns every entry name of the archive in its native order.
        Entries are never decompressed. The archive is closed before returning.
        Raises ArchiveUnreadable if the file cannot be opened as an archive.
        """
        pass
