"""
prompt_builder/templates.py — stałe bloki promptu (wstęp i instrukcje końcowe).

Domyślne szablony leżą w prompt_builder/templates/; katalog można podmienić
(flaga --templates lub zmienna LP_TEMPLATES_DIR, patrz lp/_config.py).
"""

from __future__ import annotations

import pathlib
from dataclasses import dataclass

DEFAULT_TEMPLATES_DIR = pathlib.Path(__file__).resolve().parent / "templates"

PREAMBLE_FILE = "preamble.md"
FOOTER_FILE   = "footer.md"


def _load_template(path: pathlib.Path) -> str:
    if not path.is_file():
        raise FileNotFoundError(f"Brak pliku szablonu: {path}")
    return path.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class PromptTemplates:
    preamble: str
    footer: str

    @classmethod
    def load(cls, directory: str | pathlib.Path | None = None) -> PromptTemplates:
        """Wczytuje preamble.md i footer.md z katalogu (domyślnie: wbudowany)."""
        base = pathlib.Path(directory) if directory else DEFAULT_TEMPLATES_DIR
        return cls(
            preamble=_load_template(base / PREAMBLE_FILE),
            footer=_load_template(base / FOOTER_FILE),
        )
