"""
scanner — klasyfikacja linii i strumień zdarzeń dla plików opisu projektu.

Interfejs publiczny:
    classify_line(text)  -> LineKind
    indent_depth(text)   -> int
    scan(document)       -> Iterator[ScanEvent]

Typowe użycie:
    from scanner import EventKind, scan

    for event in scan(document):
        if event.kind is EventKind.PATH_ENTRY:
            print(event.line.number, event.path)
"""

from .classifier import classify_line, indent_depth, is_indented, resource_name, section_name
from .events import PATH_ENTRY_DEPTH, EventKind, ScanEvent, ScannerState, scan

__all__ = [
    "classify_line",
    "indent_depth",
    "is_indented",
    "resource_name",
    "section_name",
    "PATH_ENTRY_DEPTH",
    "EventKind",
    "ScanEvent",
    "ScannerState",
    "scan",
]
