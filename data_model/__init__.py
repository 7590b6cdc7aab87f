"""
data_model — struktury danych plików opisu projektu.

Użycie:
  from data_model import Document, Line, LineKind, load_document, ...

Moduły:
  project_file — Line, LineKind, Section, Document, ResolvedReference,
                 SECTION_NAMES, FILE_RESOURCE
  loader       — load_document, ProjectFileError
"""

from .project_file import (
    FILE_RESOURCE,
    SECTION_NAMES,
    Document,
    Line,
    LineKind,
    ResolvedReference,
    Section,
)
from .loader import ProjectFileError, load_document

__all__ = [
    "FILE_RESOURCE",
    "SECTION_NAMES",
    "Document",
    "Line",
    "LineKind",
    "ResolvedReference",
    "Section",
    "ProjectFileError",
    "load_document",
]
