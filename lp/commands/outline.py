"""Komenda: lp outline — tabela sekcji, bloków zasobów i ścieżek."""

from __future__ import annotations

import argparse

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from data_model.loader import ProjectFileError, load_document
from data_model.project_file import SECTION_NAMES
from prompt_builder import ReferenceResolver
from scanner import EventKind, scan

console = Console()

EXIT_FATAL = 2


def run(args: argparse.Namespace) -> None:
    try:
        document = load_document(args.file)
    except ProjectFileError as e:
        console.print(f"[red]Błąd wejścia:[/red] {escape(str(e))}")
        raise SystemExit(EXIT_FATAL)

    resolver = ReferenceResolver(document.base_dir)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("LINIA",  justify="right", no_wrap=True, style="dim")
    table.add_column("RODZAJ", no_wrap=True)
    table.add_column("WARTOŚĆ", style="bold cyan")
    table.add_column("STATUS", no_wrap=True)

    n_paths = 0
    for event in scan(document):
        match event.kind:
            case EventKind.SECTION_ENTERED:
                name = event.section or ""
                status = "[green]ok[/green]" if name in SECTION_NAMES else "[red]nieznana[/red]"
                table.add_row(str(event.line.number), "sekcja", escape(name), status)
            case EventKind.RESOURCE_BLOCK_ENTERED:
                table.add_row(
                    str(event.line.number), "zasób", f"  @{escape(event.resource or '')}", ""
                )
            case EventKind.PATH_ENTRY:
                n_paths += 1
                ref = resolver.resolve(event.path or "")
                status = "[green]znaleziono[/green]" if ref.found else "[red]NOT FOUND[/red]"
                table.add_row(
                    str(event.line.number), "plik", f"    {escape(event.path or '')}", status
                )
            case _:
                continue

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(document)} linii, {n_paths} ścieżek[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "outline",
        help="Pokazuje sekcje, bloki zasobów i ścieżki wraz ze statusem.",
    )
    p.add_argument(
        "file",
        metavar="PLIK",
        help="Ścieżka do pliku opisu projektu.",
    )
    p.set_defaults(func=run)
