"""Komenda: ptc check — sprawdza, czy tekst dokumentu deklaruje tytuł."""

from __future__ import annotations

import argparse
import sys

from lint import PageLinter
from ptc.commands._output import print_json, print_verdict


def run(args: argparse.Namespace) -> None:
    text: str = sys.stdin.read() if args.text == "-" else args.text
    source = "<stdin>" if args.text == "-" else "<text>"

    report = PageLinter().lint(text, source=source)

    if args.json_output:
        print_json([report])
    elif args.show:
        print_verdict(report, show=True)

    sys.exit(0 if report.is_valid else 1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check",
        help="Sprawdza, czy przekazany tekst dokumentu deklaruje niepusty tytuł.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Sprawdza tekst dokumentu (nie ścieżkę!) przekazany jako argument.

Kolejność strategii:
  1. <title> wewnątrz pierwszej sekcji <head>…</head>
  2. {% block title %}…{% endblock %} — tylko gdy (1) nie znalazło pary znaczników

Kod wyjścia: 0 gdy tytuł znaleziony, 1 w przeciwnym razie.
Dokument zaczynający się od "-" (np. front matter "---") podaj przez stdin.

Przykłady:
  ptc check '{% block title %}Start{% endblock %}'
  ptc check "$(cat templates/index.html)" --show
  cat index.html | ptc check - --json-output
        """,
    )
    p.add_argument(
        "text",
        metavar="TEKST",
        help="Pełny tekst dokumentu ('-' = czytaj ze stdin).",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wypisz werdykt, znaleziony tytuł i strategię.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport jako JSON na stdout.",
    )
    p.set_defaults(func=run)
