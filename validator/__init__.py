"""
validator — walidator gramatyki plików opisu projektu.

Interfejs publiczny:
    ProjectValidator  — walidator (sekcje + wcięcia)
    validate_file     — wczytanie pliku i walidacja
    ValidationReport, Diagnostic, DiagnosticCode — typy raportu

Typowe użycie:
    from validator import validate_file

    report = validate_file("projekt.lp")
    if not report.is_valid:
        for d in report.diagnostics:
            print(d.line, d.message)
"""

from .types import Diagnostic, DiagnosticCode, ValidationReport
from .project_validator import ProjectValidator, validate_file

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ValidationReport",
    "ProjectValidator",
    "validate_file",
]
