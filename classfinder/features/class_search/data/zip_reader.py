import zipfile
from pathlib import Path
from typing import List
from classfinder.core.errors import ArchiveUnreadable
from ..domain.interfaces import IArchiveReader

class ZipArchiveReader(IArchiveReader):
    """
    Reads jar/war/ear/rar files generically as zip containers.
    Only the central directory is consulted.
    """

    def list_entries(self, archive_path: Path) -> List[str]:
        try:
            with zipfile.ZipFile(archive_path) as archive:
                return [info.filename for info in archive.infolist()]
        except zipfile.BadZipFile as e:
            raise ArchiveUnreadable(archive_path, f"not a zip archive ({e})")
        except OSError as e:
            raise ArchiveUnreadable(archive_path, e.strerror or str(e))
        except (ValueError, NotImplementedError) as e:
            # zipfile raises these for some malformed headers
            raise ArchiveUnreadable(archive_path, str(e))
