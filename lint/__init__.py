"""
lint — linter sprawdzający, czy strony deklarują tytuł.

Interfejs publiczny:
    PageLinter                           — linter (tekst lub plik)
    LintReport, LintFinding, FindingCode — typy raportu

Typowe użycie:
    from lint import PageLinter

    report = PageLinter().lint_file("templates/home.html")
    if not report.is_valid:
        for e in report.errors:
            print(e.code, e.source, e.message)
"""

from .types import FindingCode, LintFinding, LintReport
from .page_linter import PageLinter

__all__ = [
    "FindingCode",
    "LintFinding",
    "LintReport",
    "PageLinter",
]
