#!/usr/bin/env python3
from __future__ import annotations

import sys
from typing import Sequence

from classfinder.core.errors import DirectoryUnreadable
from classfinder.core.logging import get_logger, setup_logging
from classfinder.features.class_search.service.api import scanner

from .args import build_request, usage_text
from .report import ConsoleReporter

logger = get_logger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: validate once, scan, report. Returns the process exit status."""
    validation = build_request(sys.argv[1:] if argv is None else argv)

    if validation.help_requested:
        print(usage_text())
        return 0

    if not validation.ok:
        print(usage_text(), file=sys.stderr)
        print(str(validation.error), file=sys.stderr)
        return 1

    request = validation.request
    setup_logging(verbose=request.verbose)
    reporter = ConsoleReporter()

    try:
        summary = scanner.run(
            request,
            on_match=reporter.match,
            on_archive=reporter.archive_opened,
        )
    except DirectoryUnreadable as exc:
        logger.error(str(exc))
        return 1

    reporter.finish(summary, request.search_term)
    return 0


if __name__ == "__main__":
    sys.exit(main())
