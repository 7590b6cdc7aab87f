"""
lp — narzędzie CLI dla plików opisu projektu.

Użycie:
  lp <komenda> [opcje]

Komendy:
  validate   Sprawdza sekcje i wcięcia pliku opisu projektu.
  build      Buduje dokument promptu (treść pliku + pliki z bloków @file).
  outline    Pokazuje sekcje, bloki zasobów i ścieżki wraz ze statusem.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

# Windows: terminal może używać cp1252 — wymuszamy UTF-8 dla polskich znaków.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from lp._config import load_env
from lp.commands import build as cmd_build
from lp.commands import outline as cmd_outline
from lp.commands import validate as cmd_validate

VERSION = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lp",
        description="lp — walidacja plików opisu projektu i budowanie promptu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"lp {VERSION}"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_validate.add_parser(subparsers)
    cmd_build.add_parser(subparsers)
    cmd_outline.add_parser(subparsers)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
