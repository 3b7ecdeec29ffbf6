from dataclasses import dataclass
from pathlib import Path
from classfinder.core.common.enums import CandidateKind

@dataclass(frozen=True)
class Candidate:
    """
    A discovered file that is eligible for scanning.
    """
    path: Path
    kind: CandidateKind

    @property
    def is_archive(self) -> bool:
        return self.kind == CandidateKind.ARCHIVE_FILE
