import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from classfinder.core.errors import ArchiveUnreadable
from classfinder.features.discovery.domain.models import Candidate
from classfinder.features.discovery.service.discoverer import discover

from ..domain.interfaces import IArchiveReader
from ..domain.models import MatchRecord, NormalizedTerm, ScanSummary, SearchRequest
from ..data.zip_reader import ZipArchiveReader

logger = logging.getLogger(__name__)

ArchiveCallback = Callable[[Path], None]
MatchCallback = Callable[[MatchRecord], None]

class ClassScanner:
    """
    Service that searches discovered candidates for a class name.
    """

    def __init__(self, reader: Optional[IArchiveReader] = None):
        self.reader = reader or ZipArchiveReader()

    def scan(
        self,
        candidates: Iterable[Candidate],
        term: NormalizedTerm,
        search_term: str,
        verbose: bool = False,
        on_archive: Optional[ArchiveCallback] = None,
        summary: Optional[ScanSummary] = None,
    ) -> Iterator[MatchRecord]:
        """
        Lazily yields one MatchRecord per matching loose class file or archive entry,
        in discovery order. When verbose, on_archive is called for each archive
        that opened, before any of its matches are yielded.
        """
        if summary is None:
            summary = ScanSummary()

        for candidate in candidates:
            if not candidate.is_archive:
                summary.class_files_checked += 1
                # POSIX form keeps slash-joined terms matching on every OS
                if term.matches(candidate.path.absolute().as_posix()):
                    yield MatchRecord(candidate.path.absolute(), "", search_term)
                continue

            try:
                entries = self.reader.list_entries(candidate.path)
            except ArchiveUnreadable as e:
                summary.archives_failed += 1
                summary.errors.append(str(e))
                logger.warning(str(e))
                continue

            summary.archives_opened += 1
            if verbose and on_archive is not None:
                on_archive(candidate.path.absolute())
            logger.debug(f"Looking in {candidate.path} ({len(entries)} entries)")

            for entry_name in entries:
                if term.matches(entry_name):
                    yield MatchRecord(candidate.path.absolute(), entry_name, search_term)

    def run(
        self,
        request: SearchRequest,
        on_match: Optional[MatchCallback] = None,
        on_archive: Optional[ArchiveCallback] = None,
    ) -> ScanSummary:
        """
        Discovers candidates under the request's root, scans them all and
        returns the aggregate result. Match records are handed to on_match
        as they are produced.
        """
        summary = ScanSummary()
        logger.info(f"Searching for '{request.search_term}' under {request.root_directory}")

        candidates = discover(request.root_directory)
        summary.candidates_found = len(candidates)

        term = NormalizedTerm.for_request(request)
        for record in self.scan(candidates, term, request.search_term, request.verbose, on_archive, summary):
            summary.matches += 1
            if on_match is not None:
                on_match(record)

        logger.info(
            f"Scan complete. {summary.matches} match(es) in {summary.archives_opened} archive(s) "
            f"and {summary.class_files_checked} class file(s); {summary.archives_failed} unreadable."
        )
        return summary
