"""
validator/types.py — kody diagnostyk i struktura raportu walidacji.

Diagnostic — pojedyncze ostrzeżenie strukturalne z numerem linii.
ValidationReport — pełna lista diagnostyk w kolejności linii; walidacja
    przechodzi, gdy lista jest pusta.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from data_model.project_file import Section


class DiagnosticCode(StrEnum):
    """Stałe kody diagnostyk walidatora."""

    UNKNOWN_SECTION = "W_UNKNOWN_SECTION"
    SPACE_INDENT    = "W_SPACE_INDENT"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """
    Pojedyncza diagnostyka.

    - line:    numer linii (1-based)
    - code:    stały identyfikator klasy problemu
    - message: komunikat dla użytkownika
    """

    line: int
    code: DiagnosticCode
    message: str

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji pliku opisu projektu.

    - diagnostics: wszystkie diagnostyki w kolejności linii
    - sections:    napotkane nagłówki sekcji (także nieznane)
    """

    diagnostics: list[Diagnostic] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.diagnostics)

    @property
    def is_valid(self) -> bool:
        return not self.diagnostics

    def as_tuple(self) -> tuple[list[Diagnostic], bool]:
        return list(self.diagnostics), self.is_valid
