from typing import List
from ..domain.models import MatchRecord, SearchRequest
from .scanner import ClassScanner

def find_classes(request: SearchRequest) -> List[MatchRecord]:
    """
    Standalone API for running a search without the console front end.
    """
    matches: List[MatchRecord] = []
    scanner.run(request, on_match=matches.append)
    return matches

# Singleton Instance for easy import
scanner = ClassScanner()
