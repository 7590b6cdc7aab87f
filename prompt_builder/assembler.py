"""
prompt_builder/assembler.py — składanie dokumentu promptu.

PromptAssembler(templates).assemble(document) -> AssembledPrompt

Jeden przebieg po zdarzeniach scannera: każda linia trafia bez zmian do
bloku treści, a każde PATH_ENTRY dodatkowo do resolvera. Kolejność wyjścia:

  1. wstęp (szablon)
  2. "## Project Description" — treść pliku w bloku kodu
  3. "## Referenced Files"    — tylko gdy był choć jeden wpis ścieżki
  4. instrukcje końcowe (szablon)
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path

from data_model.loader import load_document
from data_model.project_file import Document, ResolvedReference
from scanner import EventKind, scan

from .resolver import ReferenceResolver, code_fence, format_reference
from .templates import PromptTemplates

CONTENT_HEADING    = "## Project Description"
REFERENCES_HEADING = "## Referenced Files"


@dataclass(slots=True)
class AssembledPrompt:
    text: str
    references: list[ResolvedReference] = field(default_factory=list)

    @property
    def missing(self) -> list[ResolvedReference]:
        return [r for r in self.references if not r.found]


class PromptAssembler:
    def __init__(self, templates: PromptTemplates) -> None:
        self._templates = templates

    def assemble(
        self,
        document: Document,
        resolver: ReferenceResolver | None = None,
    ) -> AssembledPrompt:
        resolver = resolver or ReferenceResolver(document.base_dir)

        content = io.StringIO()
        references: list[ResolvedReference] = []
        for event in scan(document):
            content.write(event.line.text)
            content.write("\n")
            if event.kind is EventKind.PATH_ENTRY and event.path:
                references.append(resolver.resolve(event.path))

        out = io.StringIO()
        out.write(self._templates.preamble.rstrip("\n"))
        out.write("\n\n")

        body = content.getvalue()
        fence = code_fence(body)
        out.write(f"{CONTENT_HEADING}\n\n{fence}\n{body}{fence}\n\n")

        if references:
            out.write(f"{REFERENCES_HEADING}\n\n")
            for ref in references:
                out.write(format_reference(ref))
                out.write("\n")

        out.write(self._templates.footer.rstrip("\n"))
        out.write("\n")

        return AssembledPrompt(text=out.getvalue(), references=references)


def build_prompt(
    path: str | Path,
    templates: PromptTemplates | None = None,
) -> str:
    """
    Buduje prompt dla pliku opisu projektu.

    Args:
        path:      Ścieżka do pliku *.lp.
        templates: Wstęp i instrukcje końcowe (domyślnie: wbudowane szablony).

    Raises:
        ProjectFileError:  plik wejściowy nie istnieje lub jest nieczytelny.
        FileNotFoundError: brak pliku szablonu.
    """
    document = load_document(path)
    assembler = PromptAssembler(templates or PromptTemplates.load())
    return assembler.assemble(document).text
