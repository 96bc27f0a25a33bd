"""Komenda: ptc check-url — pobiera stronę HTML i sprawdza jej tytuł."""

from __future__ import annotations

import argparse
import sys

import requests
from rich.console import Console
from rich.markup import escape

from lint import PageLinter
from ptc._config import load_settings
from ptc.commands._output import print_json, print_verdict
from title_parser.fetch import fetch_page

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = load_settings()
    url: str = args.url

    try:
        text = fetch_page(url, timeout=settings.http_timeout, user_agent=settings.user_agent)
    except requests.RequestException as e:
        console.print(f"[red]Błąd pobierania:[/red] {escape(str(e))}")
        raise SystemExit(1)

    report = PageLinter().lint(text, source=url)

    if args.json_output:
        print_json([report])
    else:
        print_verdict(report, show=args.show)

    sys.exit(0 if report.is_valid else 1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "check-url",
        help="Pobiera stronę HTML spod URL i sprawdza, czy ma tytuł.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
Pobiera stronę HTML pod podanym URL i sprawdza tytuł (<head>/<title>).

Timeout: PTC_HTTP_TIMEOUT (domyślnie 30 s); nagłówek User-Agent: PTC_USER_AGENT.

Przykłady:
  ptc check-url https://example.com/
  ptc check-url https://example.com/about --show
        """,
    )
    p.add_argument(
        "url",
        metavar="URL",
        help="Adres URL strony HTML do pobrania.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Wypisz znaleziony tytuł i strategię.",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz raport jako JSON na stdout.",
    )
    p.set_defaults(func=run)
