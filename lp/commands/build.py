"""Komenda: lp build — buduje dokument promptu z pliku opisu projektu."""

from __future__ import annotations

import argparse
import pathlib
import sys

from rich.console import Console
from rich.markup import escape

from data_model.loader import ProjectFileError, load_document
from lp._config import ENV_TEMPLATES_DIR, templates_dir
from prompt_builder import PromptAssembler, PromptTemplates

# Prompt idzie na stdout, komunikaty na stderr.
console = Console(stderr=True)

EXIT_FATAL = 2


def run(args: argparse.Namespace) -> None:
    try:
        document = load_document(args.file)
    except ProjectFileError as e:
        console.print(f"[red]Błąd wejścia:[/red] {escape(str(e))}")
        raise SystemExit(EXIT_FATAL)

    try:
        templates = PromptTemplates.load(templates_dir(args.templates))
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(EXIT_FATAL)

    result = PromptAssembler(templates).assemble(document)

    for ref in result.missing:
        console.print(
            f"[yellow]\\[warn][/yellow] Brak pliku z bloku @file: {escape(str(ref.path))}"
        )

    if args.out:
        out_path = pathlib.Path(args.out)
        out_path.write_text(result.text, encoding="utf-8")
        console.print(
            f"[green]Prompt zapisany do:[/green] {escape(str(out_path))}  "
            f"({len(result.references)} plików, {len(result.missing)} brakujących)"
        )
    else:
        sys.stdout.write(result.text)
        sys.stdout.flush()


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Buduje dokument promptu (treść pliku + pliki z bloków @file).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Składa dokument promptu:

  1. wstęp        (szablon preamble.md)
  2. treść pliku  (bez zmian, w bloku kodu)
  3. pliki z bloków @file (brakujące oznaczone "(NOT FOUND)")
  4. instrukcje   (szablon footer.md)

Ścieżki względne są liczone od katalogu pliku wejściowego.
Katalog szablonów: --templates lub zmienna {ENV_TEMPLATES_DIR}.

Przykłady:
  lp build projekt.lp
  lp build projekt.lp --out prompt.md
  lp build projekt.lp --templates ./moje-szablony
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku opisu projektu.",
    )
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        help="Zapisz wynik do pliku (domyślnie: stdout).",
    )
    p.add_argument(
        "--templates", "-t",
        metavar="KATALOG",
        default=None,
        help="Katalog z preamble.md i footer.md (domyślnie: wbudowane).",
    )
    p.set_defaults(func=run)
