from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from classfinder.core.config.settings import settings
from classfinder.core.errors import DirectoryNotFound, InvalidArguments, NotADirectory

@dataclass(frozen=True)
class SearchRequest:
    """
    User intent to find a class name under a directory tree.
    """
    root_directory: Path
    search_term: str
    case_sensitive: bool = False
    verbose: bool = False

    def __post_init__(self):
        if not self.search_term:
            raise InvalidArguments("Class name must be specified")
        if not self.root_directory.exists():
            raise DirectoryNotFound(self.root_directory)
        if not self.root_directory.is_dir():
            raise NotADirectory(self.root_directory)

@dataclass(frozen=True)
class NormalizedTerm:
    """
    Search term in archive-entry form: package dots become slashes,
    and the whole term is lower-cased unless matching is case-sensitive.
    """
    value: str
    case_sensitive: bool

    @classmethod
    def from_search_term(cls, search_term: str, case_sensitive: bool) -> "NormalizedTerm":
        value = search_term.replace(settings.PACKAGE_SEPARATOR, settings.ENTRY_SEPARATOR)
        if not case_sensitive:
            value = value.lower()
        return cls(value=value, case_sensitive=case_sensitive)

    @classmethod
    def for_request(cls, request: SearchRequest) -> "NormalizedTerm":
        return cls.from_search_term(request.search_term, request.case_sensitive)

    def matches(self, text: str) -> bool:
        """Plain substring containment, not path-segment aware."""
        if not self.case_sensitive:
            text = text.lower()
        return self.value in text

@dataclass(frozen=True)
class MatchRecord:
    candidate_path: Path
    internal_entry_name: str  # empty for loose class files
    search_term: str

    @property
    def in_archive(self) -> bool:
        return bool(self.internal_entry_name)

@dataclass
class ScanSummary:
    """
    Report returned after scanning completes.
    """
    candidates_found: int = 0
    archives_opened: int = 0
    archives_failed: int = 0
    class_files_checked: int = 0
    matches: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def found_anything(self) -> bool:
        return self.matches > 0
