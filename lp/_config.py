"""Konfiguracja CLI — zmienne środowiskowe i opcjonalny plik .env."""

from __future__ import annotations

import os
import pathlib

from dotenv import load_dotenv

ENV_TEMPLATES_DIR = "LP_TEMPLATES_DIR"


def load_env(dotenv_path: str | pathlib.Path | None = None) -> None:
    """Wczytuje .env (domyślnie z bieżącego katalogu); środowisko ma pierwszeństwo."""
    load_dotenv(dotenv_path or pathlib.Path.cwd() / ".env", override=False)


def templates_dir(cli_value: str | None = None) -> pathlib.Path | None:
    """
    Katalog szablonów promptu, w kolejności:
      --templates  >  LP_TEMPLATES_DIR  >  None (szablony wbudowane)
    """
    value = cli_value or os.getenv(ENV_TEMPLATES_DIR)
    return pathlib.Path(value) if value else None
