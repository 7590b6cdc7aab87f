"""
scanner/events.py — wspólny scanner sekcji i bloków zasobów.

scan(document) -> Iterator[ScanEvent]

Każda linia dokumentu daje dokładnie jedno zdarzenie, w kolejności pliku:

  SECTION_ENTERED         nagłówek sekcji (także spoza listy dozwolonych)
  RESOURCE_BLOCK_ENTERED  marker zasobu (@file, @git, ...)
  PATH_ENTRY              ścieżka w bloku @file (wcięcie >= 2 tabulacje)
  CONTENT_LINE            cała reszta: puste, komentarze, dyrektywy, wartości

Stan bloku @file żyje w ScannerState tworzonym osobno dla każdego przebiegu,
więc walidator i assembler nie dzielą kursora.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from data_model.project_file import FILE_RESOURCE, Document, Line, LineKind

from .classifier import classify_line, indent_depth, resource_name, section_name
from .line_patterns import BLOCK_BREAK_RE, DIRECTIVE_RE

# Minimalna głębokość wcięcia ścieżki pod markerem @file.
PATH_ENTRY_DEPTH = 2


class EventKind(StrEnum):
    SECTION_ENTERED        = "section_entered"
    RESOURCE_BLOCK_ENTERED = "resource_block_entered"
    PATH_ENTRY             = "path_entry"
    CONTENT_LINE           = "content_line"


@dataclass(frozen=True, slots=True)
class ScanEvent:
    """
    Zdarzenie scannera dla jednej linii.

    - section:   bieżąca sekcja po przetworzeniu linii (None przed pierwszą)
    - resource:  nazwa markera (RESOURCE_BLOCK_ENTERED) lub bloku (PATH_ENTRY)
    - path:      obcięty tekst ścieżki (tylko PATH_ENTRY)
    - directive: para (klucz, wartość) dla linii "klucz: wartość"
    """

    kind: EventKind
    line: Line
    line_kind: LineKind
    section: str | None = None
    resource: str | None = None
    path: str | None = None
    directive: tuple[str, str] | None = None


@dataclass(slots=True)
class ScannerState:
    section: str | None = None
    resource: str | None = None
    in_file_block: bool = False

    def advance(self, line: Line) -> ScanEvent:
        text = line.text
        kind = classify_line(text)

        if kind in (LineKind.BLANK, LineKind.COMMENT):
            return self._content(line, kind)

        if self.in_file_block:
            if indent_depth(text) >= PATH_ENTRY_DEPTH:
                return ScanEvent(
                    kind=EventKind.PATH_ENTRY,
                    line=line,
                    line_kind=LineKind.INDENTED_VALUE,
                    section=self.section,
                    resource=self.resource,
                    path=text.strip(),
                )
            if BLOCK_BREAK_RE.match(text.strip()):
                self.in_file_block = False

        match kind:
            case LineKind.SECTION_HEADER:
                self.section = section_name(text)
                self.resource = None
                return ScanEvent(
                    kind=EventKind.SECTION_ENTERED,
                    line=line,
                    line_kind=kind,
                    section=self.section,
                )
            case LineKind.RESOURCE_MARKER:
                self.resource = resource_name(text)
                self.in_file_block = self.resource == FILE_RESOURCE
                return ScanEvent(
                    kind=EventKind.RESOURCE_BLOCK_ENTERED,
                    line=line,
                    line_kind=kind,
                    section=self.section,
                    resource=self.resource,
                )
            case LineKind.INDENTED_VALUE:
                m = DIRECTIVE_RE.match(text.strip())
                if m:
                    return ScanEvent(
                        kind=EventKind.CONTENT_LINE,
                        line=line,
                        line_kind=LineKind.DIRECTIVE,
                        section=self.section,
                        directive=(m.group(1), m.group(2) or ""),
                    )
                return self._content(line, kind)
            case _:
                return self._content(line, kind)

    def _content(self, line: Line, kind: LineKind) -> ScanEvent:
        return ScanEvent(
            kind=EventKind.CONTENT_LINE,
            line=line,
            line_kind=kind,
            section=self.section,
        )


def scan(document: Document) -> Iterator[ScanEvent]:
    state = ScannerState()
    for line in document.lines:
        yield state.advance(line)
