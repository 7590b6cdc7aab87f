"""
data_model/project_file.py — model pliku opisu projektu (*.lp).

Document to niezmienna lista linii w kolejności pliku; klasyfikacja linii
(LineKind) jest wyliczana przez scanner i nie jest tu przechowywana.
ResolvedReference to wynik odczytu jednej ścieżki z bloku @file.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path


# Zamknięty zbiór nazw sekcji najwyższego poziomu.
SECTION_NAMES: tuple[str, ...] = ("project", "environment", "dependencies", "structure")

# Marker zasobu rozwijany przez resolver; pozostałe (@git, ...) są tylko przepisywane.
FILE_RESOURCE = "file"


class LineKind(StrEnum):
    """Kategoria linii wejściowej."""

    SECTION_HEADER  = "section_header"
    DIRECTIVE       = "directive"
    RESOURCE_MARKER = "resource_marker"
    INDENTED_VALUE  = "indented_value"
    BLANK           = "blank"
    COMMENT         = "comment"
    FREEFORM        = "freeform"


@dataclass(frozen=True, slots=True)
class Line:
    number: int          # 1-based
    text: str            # surowy tekst bez znaku końca linii


@dataclass(frozen=True, slots=True)
class Section:
    name: str
    line_number: int

    @property
    def is_known(self) -> bool:
        return self.name in SECTION_NAMES


@dataclass(frozen=True, slots=True)
class Document:
    """
    Wczytany plik opisu projektu.

    - path:     ścieżka pliku wejściowego
    - base_dir: katalog pliku — baza dla względnych ścieżek w blokach @file
    - lines:    linie w kolejności pliku
    """

    path: Path
    base_dir: Path
    lines: tuple[Line, ...]

    @classmethod
    def from_text(cls, text: str, path: str | Path = "<memory>") -> Document:
        p = Path(path)
        # tylko "\n": splitlines() tnie też na \f, \v i \u2028
        raw_lines = text.split("\n")
        if raw_lines[-1] == "":
            raw_lines.pop()
        lines = tuple(
            Line(number=i, text=raw)
            for i, raw in enumerate(raw_lines, start=1)
        )
        return cls(path=p, base_dir=p.parent, lines=lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True, slots=True)
class ResolvedReference:
    """
    Wynik rozwiązania jednej ścieżki z bloku @file.

    - requested: ścieżka tak, jak zapisano ją w pliku
    - path:      ścieżka po złożeniu z katalogiem dokumentu
    - found:     False gdy pliku brak lub nie da się go odczytać
    - content:   pełna treść pliku (None gdy found=False)
    """

    requested: str
    path: Path
    found: bool
    content: str | None = None
