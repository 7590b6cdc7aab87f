"""Komenda: lp validate — sprawdza sekcje i wcięcia pliku opisu projektu."""

from __future__ import annotations

import argparse
import dataclasses
import json

from rich.console import Console
from rich.markup import escape

from data_model.loader import ProjectFileError
from data_model.project_file import SECTION_NAMES
from validator import validate_file

console = Console()

EXIT_INVALID = 1
EXIT_FATAL   = 2


def run(args: argparse.Namespace) -> None:
    try:
        report = validate_file(args.file)
    except ProjectFileError as e:
        console.print(f"[red]Błąd wejścia:[/red] {escape(str(e))}")
        raise SystemExit(EXIT_FATAL)

    if args.json_output:
        out = {
            "file": args.file,
            "is_valid": report.is_valid,
            "count": report.count,
            "diagnostics": [dataclasses.asdict(d) for d in report.diagnostics],
        }
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        for d in report.diagnostics:
            console.print(f"[yellow]{escape(str(d))}[/yellow]")

        if report.is_valid:
            console.print(f"[green]OK[/green]  Validation passed: {escape(args.file)}")
        else:
            console.print(
                f"[red]BŁĄD[/red]  Validation failed: {report.count} error(s)"
            )

    if not report.is_valid:
        raise SystemExit(EXIT_INVALID)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "validate",
        help="Sprawdza sekcje i wcięcia pliku opisu projektu.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=f"""\
Waliduje plik opisu projektu; zgłasza każdą problematyczną linię:

  - nieznana sekcja   (dozwolone: {", ".join(SECTION_NAMES)})
  - wcięcie spacjami  (jednostką wcięcia jest tabulacja)

Kody wyjścia: 0 — poprawny, 1 — są diagnostyki, 2 — plik nieczytelny.

Przykłady:
  lp validate projekt.lp
  lp validate projekt.lp --json-output
        """,
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku opisu projektu.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport walidacji jako JSON na stdout.",
    )
    p.set_defaults(func=run)
