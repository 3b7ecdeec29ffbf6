from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from classfinder.features.class_search.domain.models import MatchRecord, ScanSummary


def format_match(record: MatchRecord) -> str:
    if record.in_archive:
        return f'"{record.search_term}" found in {record.candidate_path} as {record.internal_entry_name}'
    return f'"{record.search_term}" found at {record.candidate_path}'


def format_nothing_found(search_term: str) -> str:
    return f'no classes with the string "{search_term}" found'


class ConsoleReporter:
    """
    Renders scan output. Match lines and the nothing-found notice go to
    ``out``; verbose notices go to ``err``.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def archive_opened(self, archive_path: Path) -> None:
        print(f"looking in {archive_path}", file=self.err, flush=True)

    def match(self, record: MatchRecord) -> None:
        print(format_match(record), file=self.out, flush=True)

    def finish(self, summary: ScanSummary, search_term: str) -> None:
        if not summary.found_anything:
            print(format_nothing_found(search_term), file=self.out)
