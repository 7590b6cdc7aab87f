"""
scanner/classifier.py — klasyfikacja pojedynczej linii.

classify_line(text) -> LineKind
  Czysta funkcja jednej linii; nie zagląda do sąsiednich linii.
  Rozróżnienie DIRECTIVE / INDENTED_VALUE / ścieżka w bloku @file należy
  do scannera (zależy od kontekstu), tu zwracane jest INDENTED_VALUE.
"""

from __future__ import annotations

from data_model.project_file import LineKind

from .line_patterns import (
    INDENT_UNIT,
    RESOURCE_MARKER_RE,
    SECTION_HEADER_RE,
    strip_whitespace,
)


def indent_depth(text: str) -> int:
    """Liczba wiodących tabulacji; pierwsza spacja kończy liczenie."""
    return len(text) - len(text.lstrip(INDENT_UNIT))


def is_indented(text: str) -> bool:
    return text[:1].isspace()


def classify_line(text: str) -> LineKind:
    stripped = text.strip()
    if not stripped:
        return LineKind.BLANK
    if stripped.startswith("#"):
        return LineKind.COMMENT
    if SECTION_HEADER_RE.match(text):
        return LineKind.SECTION_HEADER
    if not is_indented(text):
        return LineKind.FREEFORM
    # marker tylko na pierwszym poziomie wcięcia: dokładnie jedna tabulacja
    at_first_level = indent_depth(text) == 1 and not text[1:2].isspace()
    if at_first_level and RESOURCE_MARKER_RE.match(stripped):
        return LineKind.RESOURCE_MARKER
    return LineKind.INDENTED_VALUE


def section_name(text: str) -> str:
    return strip_whitespace(text)


def resource_name(text: str) -> str | None:
    """Nazwa markera bez '@' ("\\t@file" → "file") lub None."""
    m = RESOURCE_MARKER_RE.match(text.strip())
    return m.group(1) if m else None
