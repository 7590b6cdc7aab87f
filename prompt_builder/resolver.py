"""
prompt_builder/resolver.py — rozwiązywanie ścieżek z bloków @file.

ReferenceResolver(base_dir)
  .resolve(path_text)     -> ResolvedReference
  .resolve_all(document)  -> list[ResolvedReference]

format_reference(ref) -> str   blok z nagłówkiem ścieżki i treścią pliku

Brak pliku (lub błąd odczytu) to miękki błąd: ResolvedReference(found=False),
w prompcie marker "(NOT FOUND)". Nic tu nie rzuca wyjątków.
"""

from __future__ import annotations

from pathlib import Path

from data_model.project_file import Document, ResolvedReference
from scanner import EventKind, scan

NOT_FOUND_MARKER = "(NOT FOUND)"

# Podpowiedź języka dla bloku kodu, wg rozszerzenia pliku.
EXT2LANG: dict[str, str] = {
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".json": "json",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".md": "markdown",
    ".sh": "bash",
    ".html": "html",
    ".css": "css",
    ".sql": "sql",
    ".rs": "rust",
    ".go": "go",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".java": "java",
}


class ReferenceResolver:
    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)

    def resolve(self, path_text: str) -> ResolvedReference:
        path = Path(path_text)
        if not path.is_absolute():
            path = self._base_dir / path

        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except (OSError, ValueError):
            # brak pliku, katalog, brak uprawnień; ValueError: znak NUL w ścieżce
            return ResolvedReference(requested=path_text, path=path, found=False)

        return ResolvedReference(
            requested=path_text, path=path, found=True, content=content
        )

    def resolve_all(self, document: Document) -> list[ResolvedReference]:
        return [
            self.resolve(event.path)
            for event in scan(document)
            if event.kind is EventKind.PATH_ENTRY and event.path
        ]


def code_fence(text: str) -> str:
    """Najkrótszy płot z backticków (min. 3), który nie występuje w tekście."""
    longest = run = 0
    for ch in text:
        run = run + 1 if ch == "`" else 0
        longest = max(longest, run)
    return "`" * max(3, longest + 1)


def format_reference(ref: ResolvedReference) -> str:
    if not ref.found or ref.content is None:
        return f"### {ref.path} {NOT_FOUND_MARKER}\n"

    content = ref.content
    if content and not content.endswith("\n"):
        content += "\n"
    fence = code_fence(content)
    lang = EXT2LANG.get(ref.path.suffix.lower(), "")
    return f"### {ref.path}\n\n{fence}{lang}\n{content}{fence}\n"
