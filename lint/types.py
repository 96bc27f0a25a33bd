"""
lint/types.py — kody wyników i struktury raportu lintera tytułów.

LintFinding — pojedynczy problem z kodem, źródłem, komunikatem
    i krótką instrukcją naprawy.
LintReport  — wynik sprawdzenia jednej strony: is_valid, tytuł,
    strategia, błędy, ostrzeżenia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from title_parser.detector import TitleSource


class FindingCode(StrEnum):
    """Stałe kody wyników lintera."""

    # E — błędy (strona nie przechodzi)
    TITLE_MISSING     = "E_TITLE_MISSING"
    SOURCE_UNREADABLE = "E_SOURCE_UNREADABLE"

    # W — ostrzeżenia (informacyjne)
    TITLE_SHADOWED    = "W_TITLE_SHADOWED"


@dataclass(slots=True)
class LintFinding:
    """
    Pojedynczy wynik lintera.

    - code:         stały identyfikator (FindingCode)
    - source:       ścieżka pliku, URL lub "<text>"
    - message:      czytelny opis problemu
    - expected_fix: krótka instrukcja naprawy
    """

    code: FindingCode
    source: str
    message: str
    expected_fix: str


@dataclass(slots=True)
class LintReport:
    """
    Wynik sprawdzenia jednej strony.

    - is_valid:     True gdy brak błędów (ostrzeżenia nie wpływają)
    - title:        trymowany tytuł (None gdy brak)
    - title_source: strategia, która dała dopasowanie (None gdy żadna)
    """

    source: str
    is_valid: bool
    title: str | None = None
    title_source: TitleSource | None = None
    errors: list[LintFinding] = field(default_factory=list)
    warnings: list[LintFinding] = field(default_factory=list)
