"""Wspólne wyświetlanie wyników sprawdzania tytułu."""

from __future__ import annotations

import dataclasses
import json

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lint.types import LintReport

console = Console()


def print_verdict(report: LintReport, show: bool) -> None:
    if report.is_valid:
        console.print(f"[green]OK[/green]  {escape(report.source)}")
    else:
        console.print(f"[red]BRAK TYTUŁU[/red]  {escape(report.source)}")

    if show:
        if report.title is not None:
            console.print(
                f"  Tytuł: [bold]{escape(report.title)}[/bold] "
                f"[dim]({report.title_source})[/dim]"
            )
        for w in report.warnings:
            console.print(f"  [yellow]·[/yellow] {escape(w.message)}")


def print_summary(reports: list[LintReport]) -> None:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Kod",        style="yellow", no_wrap=True)
    table.add_column("Źródło",     style="cyan",   no_wrap=True)
    table.add_column("Komunikat")
    table.add_column("Poprawka",   style="dim")

    for report in reports:
        for e in report.errors + report.warnings:
            table.add_row(e.code, escape(e.source), escape(e.message), escape(e.expected_fix))

    console.print(table)


def report_to_dict(report: LintReport) -> dict:
    return {
        "source": report.source,
        "is_valid": report.is_valid,
        "title": report.title,
        "title_source": report.title_source,
        "errors": [dataclasses.asdict(e) for e in report.errors],
        "warnings": [dataclasses.asdict(w) for w in report.warnings],
    }


def print_json(reports: list[LintReport]) -> None:
    print(json.dumps([report_to_dict(r) for r in reports], ensure_ascii=False, indent=2))
