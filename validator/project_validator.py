"""
validator/project_validator.py — walidator gramatyki pliku opisu projektu.

ProjectValidator.validate(document) -> ValidationReport

Sprawdzenia (dla każdej linii, bez przerywania po pierwszym problemie):
  - nagłówek sekcji spoza SECTION_NAMES   → W_UNKNOWN_SECTION
  - wcięcie zaczynające się od innego białego znaku niż tabulacja
                                          → W_SPACE_INDENT

Puste linie i komentarze są pomijane. Linia bez wcięcia, która nie jest
nagłówkiem sekcji, nie jest zgłaszana.
"""

from __future__ import annotations

from pathlib import Path

from data_model.loader import load_document
from data_model.project_file import Document, LineKind, Section
from scanner import EventKind, ScanEvent, is_indented, scan

from .types import Diagnostic, DiagnosticCode, ValidationReport

_SKIPPED_KINDS = (LineKind.BLANK, LineKind.COMMENT)


class ProjectValidator:
    """
    Walidator pliku opisu projektu.

    Użycie:
        report = ProjectValidator().validate(document)
        for d in report.diagnostics:
            print(d)
    """

    def validate(self, document: Document) -> ValidationReport:
        report = ValidationReport()
        for event in scan(document):
            self._check_event(event, report)
        return report

    def _check_event(self, event: ScanEvent, report: ValidationReport) -> None:
        if event.line_kind in _SKIPPED_KINDS:
            return

        line = event.line

        if event.kind is EventKind.SECTION_ENTERED:
            section = Section(name=event.section or "", line_number=line.number)
            report.sections.append(section)
            if not section.is_known:
                report.diagnostics.append(Diagnostic(
                    line=line.number,
                    code=DiagnosticCode.UNKNOWN_SECTION,
                    message=f"Unknown section '{section.name}'",
                ))
            return

        if is_indented(line.text) and not line.text.startswith("\t"):
            report.diagnostics.append(Diagnostic(
                line=line.number,
                code=DiagnosticCode.SPACE_INDENT,
                message="Should use tabs for indentation, not spaces",
            ))


def validate_file(path: str | Path) -> ValidationReport:
    """Wczytuje plik (ProjectFileError gdy nieczytelny) i waliduje go."""
    return ProjectValidator().validate(load_document(path))
