from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from classfinder.core.config.settings import settings
from classfinder.core.errors import ClassFinderError, InvalidArguments
from classfinder.features.class_search.domain.models import SearchRequest

PROG = "classfinder"


def usage_text() -> str:
    return (
        f"usage: {PROG} -d <dir_name> -c <class_name> [-p] [-v]\n"
        f"{PROG} v{settings.VERSION}"
    )


class _RaisingArgumentParser(argparse.ArgumentParser):
    # argparse exits the process on bad input; surface it as a value instead.
    def error(self, message: str) -> None:  # type: ignore[override]
        raise InvalidArguments(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _RaisingArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-d", dest="directory", nargs="?", default=None, const=None)
    parser.add_argument("-c", dest="class_name", nargs="?", default=None, const=None)
    parser.add_argument("-p", dest="case_sensitive", action="store_true")
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-h", "--help", dest="help", action="store_true")
    return parser


_VALUE_OPTIONS = ("-d", "-c")
_FLAG_OPTIONS = ("-p", "-v", "-h", "--help")


def normalize_argv(argv: Sequence[str]) -> List[str]:
    """Accept only the exact option tokens; bundled (-pv) and attached (-d=x) forms are unknown.

    The token after -d/-c is always its value, even when it starts with '-',
    so it is handed to argparse in the attached ``-d=value`` form.
    """
    tokens: List[str] = []
    remaining = list(argv)
    while remaining:
        token = remaining.pop(0)
        if token in _VALUE_OPTIONS:
            tokens.append(f"{token}={remaining.pop(0)}" if remaining else token)
        elif token in _FLAG_OPTIONS:
            tokens.append(token)
        else:
            raise InvalidArguments(f'Unknown argument "{token}"')
    return tokens


@dataclass(frozen=True)
class RequestValidation:
    """Outcome of turning argv into a SearchRequest. Exactly one field is meaningful."""

    request: Optional[SearchRequest] = None
    error: Optional[ClassFinderError] = None
    help_requested: bool = False

    @property
    def ok(self) -> bool:
        return self.request is not None


def build_request(argv: Sequence[str]) -> RequestValidation:
    """Validate the command line and build the request, without raising."""
    try:
        args = build_parser().parse_args(normalize_argv(argv))
    except InvalidArguments as exc:
        return RequestValidation(error=exc)

    if args.help:
        return RequestValidation(help_requested=True)
    if args.directory is None:
        return RequestValidation(error=InvalidArguments("Directory name must be specified"))
    if args.class_name is None:
        return RequestValidation(error=InvalidArguments("Class name must be specified"))

    try:
        request = SearchRequest(
            root_directory=Path(args.directory),
            search_term=args.class_name,
            case_sensitive=args.case_sensitive,
            verbose=args.verbose,
        )
    except ClassFinderError as exc:
        return RequestValidation(error=exc)
    return RequestValidation(request=request)
