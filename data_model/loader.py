"""
data_model/loader.py — wczytanie pliku opisu projektu do Document.

load_document(path) -> Document
  Jedyny błąd krytyczny całego przetwarzania: brak pliku, katalog zamiast
  pliku, błąd odczytu lub niepoprawne UTF-8 → ProjectFileError, zanim
  jakakolwiek linia zostanie przetworzona.
"""

from __future__ import annotations

from pathlib import Path

from .project_file import Document


class ProjectFileError(Exception):
    """Plik opisu projektu nie istnieje lub nie da się go odczytać."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {self.path}")


def load_document(path: str | Path) -> Document:
    p = Path(path)
    if not p.exists():
        raise ProjectFileError(p, "Plik nie istnieje")
    if p.is_dir():
        raise ProjectFileError(p, "Oczekiwano pliku, otrzymano katalog")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ProjectFileError(p, "Plik nie jest poprawnym UTF-8") from exc
    except OSError as exc:
        raise ProjectFileError(p, f"Nie można odczytać pliku ({exc.strerror})") from exc

    return Document.from_text(text, p)
