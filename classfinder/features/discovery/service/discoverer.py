import logging
from pathlib import Path
from typing import Optional, Tuple
from classfinder.core.config.settings import settings
from classfinder.core.common.enums import CandidateKind

from ..domain.models import Candidate
from ..data.file_walker import LocalCandidateWalker

logger = logging.getLogger(__name__)

def classify(path: Path) -> Optional[CandidateKind]:
    """
    Maps a file name to its candidate kind. Suffixes are compared
    case-insensitively regardless of the search's case setting.
    """
    name = path.name.lower()
    if name.endswith(settings.ARCHIVE_EXTENSIONS):
        return CandidateKind.ARCHIVE_FILE
    if name.endswith(settings.CLASS_EXTENSION):
        return CandidateKind.LOOSE_CLASS_FILE
    return None

def discover(root: Path, follow_symlinks: Optional[bool] = None) -> Tuple[Candidate, ...]:
    """
    Walks root depth-first and returns every archive and loose class file.
    The full list is built before any scanning starts.

    Raises:
        DirectoryUnreadable: root itself cannot be listed.
    """
    if follow_symlinks is None:
        follow_symlinks = settings.FOLLOW_SYMLINKS
    walker = LocalCandidateWalker(follow_symlinks=follow_symlinks)

    candidates = []
    for file_path in walker.walk(root):
        kind = classify(file_path)
        if kind is None:
            continue
        logger.debug(f"Candidate {kind.value}: {file_path}")
        candidates.append(Candidate(path=file_path, kind=kind))

    logger.info(f"Discovered {len(candidates)} candidate(s) under {root}")
    return tuple(candidates)
