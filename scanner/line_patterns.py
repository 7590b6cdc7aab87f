"""
scanner/line_patterns.py — wzorce regex dla linii pliku opisu projektu.

Wszystkie wzorce dopasowują się do tekstu linii bez znaku końca linii.
Wcięcie to wyłącznie znak tabulacji; spacja na początku linii jest
naruszeniem gramatyki, nie alternatywną jednostką wcięcia.
"""

from __future__ import annotations

import re

INDENT_UNIT = "\t"

# Nagłówek sekcji: litera (także spoza ASCII, np. "ś") w pierwszej kolumnie.
SECTION_HEADER_RE = re.compile(r"^[^\W\d_]")

# Marker zasobu po obcięciu białych znaków: "@file", "@git", ...
RESOURCE_MARKER_RE = re.compile(r"^@(\w+)\s*$")

# Dyrektywa "klucz: wartość" po obcięciu wcięcia; po dwukropku biały znak
# lub koniec linii, więc "https://..." nie jest dyrektywą.
DIRECTIVE_RE = re.compile(r"^([A-Za-z_][\w.-]*)\s*:(?:\s+(.*))?$")

# Linia zamykająca blok @file (po obcięciu): zaczyna się literą lub '@'.
BLOCK_BREAK_RE = re.compile(r"^(?:[^\W\d_]|@)")

_WHITESPACE_RE = re.compile(r"\s+")


def strip_whitespace(text: str) -> str:
    """Usuwa wszystkie białe znaki (nazwa sekcji: "pro ject " → "project")."""
    return _WHITESPACE_RE.sub("", text)
