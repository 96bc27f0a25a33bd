"""
ptc — narzędzie CLI do sprawdzania tytułów stron.

Użycie:
  ptc <komenda> [opcje]
  has-title TEKST

Komendy:
  check      Sprawdza tekst dokumentu przekazany jako argument (kod wyjścia 0/1).
  lint       Sprawdza pliki / katalogi szablonów i HTML, raport w tabeli lub JSON.
  check-url  Pobiera stronę HTML spod URL i sprawdza jej tytuł.

has-title przyjmuje dokładnie jeden argument (pełny tekst dokumentu),
nic nie wypisuje i kończy się kodem 0 (tytuł jest) albo 1 (brak tytułu).
"""

from __future__ import annotations

import argparse
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from ptc.commands import check as cmd_check
from ptc.commands import check_url as cmd_check_url
from ptc.commands import lint_pages as cmd_lint_pages
from title_parser import has_title


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ptc",
        description="ptc — sprawdzanie, czy strony deklarują tytuł.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="ptc 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_check.add_parser(subparsers)
    cmd_lint_pages.add_parser(subparsers)
    cmd_check_url.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


def build_has_title_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="has-title",
        description="Kod wyjścia 0 gdy dokument deklaruje niepusty tytuł, 1 w przeciwnym razie.",
    )
    parser.add_argument(
        "text",
        metavar="TEKST",
        help="Pełny tekst dokumentu (nie ścieżka do pliku).",
    )
    return parser


def has_title_main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    # Tekst dokumentu może zaczynać się od "-" (np. front matter "---").
    if argv and argv[0] != "--":
        argv = ["--", *argv]
    args = build_has_title_parser().parse_args(argv)
    sys.exit(0 if has_title(args.text) else 1)


if __name__ == "__main__":
    main()
