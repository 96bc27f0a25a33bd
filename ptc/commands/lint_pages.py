"""Komenda: ptc lint — sprawdza tytuły w plikach szablonów / HTML."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from lint import LintReport, PageLinter
from ptc._config import load_settings
from ptc.commands._output import print_json, print_summary, print_verdict

console = Console()


def collect_files(paths: list[str], include: tuple[str, ...]) -> list[Path]:
    """
    Rozwija ścieżki do listy plików.

    Pliki podane wprost są brane zawsze; katalogi przeszukiwane
    rekurencyjnie po globach `include`. Kolejność: posortowana, bez duplikatów.
    """
    files: list[Path] = []
    seen: set[Path] = set()

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found = sorted({f for g in include for f in path.rglob(g) if f.is_file()})
        else:
            found = [path]
        for f in found:
            if f not in seen:
                seen.add(f)
                files.append(f)

    return files


def run(args: argparse.Namespace) -> None:
    settings = load_settings()
    include = tuple(args.include) if args.include else settings.include

    files = collect_files(args.paths, include)
    if not files:
        console.print(
            f"[yellow]Nie znaleziono plików[/yellow] (globy: {', '.join(include)})."
        )
        raise SystemExit(1)

    linter = PageLinter()
    reports: list[LintReport] = [
        linter.lint_file(f, encoding=settings.encoding) for f in files
    ]
    failed = [r for r in reports if not r.is_valid]

    if args.json_output:
        print_json(reports)
    else:
        if args.show:
            for r in reports:
                print_verdict(r, show=True)
        if failed or any(r.warnings for r in reports):
            print_summary(reports)
        console.print(
            f"Sprawdzono [bold]{len(reports)}[/bold] plików, "
            f"bez tytułu: [bold]{len(failed)}[/bold]."
        )

    if failed:
        sys.exit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "lint",
        help="Sprawdza pliki (lub katalogi) pod kątem brakującego tytułu strony.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Sprawdza każdy plik, czy deklaruje niepusty tytuł strony.

Katalogi są przeszukiwane rekurencyjnie według globów z --include
(domyślnie PTC_INCLUDE lub *.html, *.htm, *.jinja, *.j2, *.djhtml).
Kodowanie plików: PTC_ENCODING (domyślnie utf-8).

Kod wyjścia: 1 gdy choć jeden plik nie ma tytułu lub nie da się go odczytać.

Przykłady:
  ptc lint templates/
  ptc lint templates/ --include '*.html' --show
  ptc lint index.html about.html --json-output
        """,
    )
    p.add_argument(
        "paths",
        nargs="+",
        metavar="ŚCIEŻKA",
        help="Pliki lub katalogi do sprawdzenia.",
    )
    p.add_argument(
        "--include",
        action="append",
        metavar="GLOB",
        default=None,
        help="Glob plików przy przeszukiwaniu katalogów (można powtarzać).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wypisz werdykt i tytuł dla każdego pliku.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raporty jako JSON na stdout.",
    )
    p.set_defaults(func=run)
