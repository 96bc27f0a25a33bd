"""
lint/page_linter.py — linter stron: czy strona deklaruje tytuł.

PageLinter.lint(text, source)         -> LintReport   (bez I/O)
PageLinter.lint_file(path, encoding)  -> LintReport   (czyta plik)

Reguły:
  E_TITLE_MISSING      — detektor nie znalazł niepustego tytułu
  E_SOURCE_UNREADABLE  — pliku nie da się odczytać / zdekodować
  W_TITLE_SHADOWED     — pusty <title> w <head> przesłonił niepusty
                         {% block title %} (reguła pierwszeństwa HTML)
"""

from __future__ import annotations

import pathlib

from data_model.matches import Matched
from title_parser.detector import WHITESPACE, TitleDetector, TitleSource
from title_parser.template_block import extract_template_title

from .types import FindingCode, LintFinding, LintReport


class PageLinter:
    """
    Linter tytułów stron.

    Użycie:
        linter = PageLinter()
        report = linter.lint_file("templates/index.html")
        if not report.is_valid:
            for e in report.errors:
                print(e.code, e.source, e.message)
    """

    def __init__(self, detector: TitleDetector | None = None) -> None:
        self._detector = detector or TitleDetector()

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def lint(self, text: str, source: str = "<text>") -> LintReport:
        detection = self._detector.detect(text)
        report = LintReport(
            source=source,
            is_valid=detection.has_title,
            title=detection.title,
            title_source=detection.source,
        )

        if not detection.has_title:
            report.errors.append(LintFinding(
                code=FindingCode.TITLE_MISSING,
                source=source,
                message="Strona nie deklaruje niepustego tytułu.",
                expected_fix=(
                    "Dodaj <title> wewnątrz <head> lub blok "
                    "{% block title %}…{% endblock %}."
                ),
            ))

        if detection.source is TitleSource.HTML_HEAD and not detection.has_title:
            self._check_shadowed(text, source, report)

        return report

    def lint_file(
        self,
        path: str | pathlib.Path,
        encoding: str = "utf-8",
    ) -> LintReport:
        path = pathlib.Path(path)
        try:
            text = path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as exc:
            return LintReport(
                source=str(path),
                is_valid=False,
                errors=[LintFinding(
                    code=FindingCode.SOURCE_UNREADABLE,
                    source=str(path),
                    message=f"Nie można odczytać pliku: {exc}",
                    expected_fix=f"Sprawdź ścieżkę i kodowanie ({encoding}).",
                )],
            )
        return self.lint(text, source=str(path))

    # ------------------------------------------------------------------
    # Ostrzeżenia
    # ------------------------------------------------------------------

    def _check_shadowed(self, text: str, source: str, report: LintReport) -> None:
        match extract_template_title(text):
            case Matched(extracted_text=raw) if raw.strip(WHITESPACE):
                report.warnings.append(LintFinding(
                    code=FindingCode.TITLE_SHADOWED,
                    source=source,
                    message=(
                        f"Pusty <title> w <head> przesłania blok szablonu "
                        f"z tytułem '{raw.strip(WHITESPACE)}'."
                    ),
                    expected_fix="Usuń pusty <title> lub uzupełnij jego treść.",
                ))
