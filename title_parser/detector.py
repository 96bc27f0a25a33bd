"""
title_parser/detector.py — decyzja "czy strona deklaruje niepusty tytuł".

Kolejność strategii (stała, bez pętli):
  1. <head>/<title>     — extract_head_title(text)
  2. blok szablonu      — extract_template_title(text), tylko gdy (1) dało NoMatch

Reguła pierwszeństwa: jeśli (1) zwróci Matched, blok szablonu NIE jest
sprawdzany, nawet gdy tytuł z HTML po trymowaniu jest pusty. Dokument
z pustym <title></title> w poprawnej sekcji <head> nie ma tytułu,
niezależnie od bloków szablonu w dalszej części.

Wynik końcowy: True ⇔ uzyskano tekst i po trymowaniu białych znaków (WHITESPACE) jest niepusty.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from data_model.matches import Matched
from title_parser.head_title import extract_head_title
from title_parser.template_block import extract_template_title

# Znaki Unicode White_Space; str.strip() bez argumentu usuwa też \x1c-\x1f.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class TitleSource(StrEnum):
    """Strategia, która dostarczyła tekst tytułu."""

    HTML_HEAD      = "html_head"
    TEMPLATE_BLOCK = "template_block"


@dataclass(frozen=True, slots=True)
class Detection:
    """
    Wynik detekcji dla jednego dokumentu.

    - source:    strategia, która dała Matched (None gdy obie dały NoMatch)
    - raw_title: nietrymowany tekst między znacznikami (None gdy brak dopasowania)
    """

    source: TitleSource | None
    raw_title: str | None

    @property
    def title(self) -> str | None:
        """Tytuł po trymowaniu; None gdy brak dopasowania lub tytuł pusty."""
        if self.raw_title is None:
            return None
        return self.raw_title.strip(WHITESPACE) or None

    @property
    def has_title(self) -> bool:
        return self.title is not None


class TitleDetector:
    """
    Bezstanowy detektor tytułu strony.

    Użycie:
        detector = TitleDetector()
        detector.has_title("{% block title %} Hello {% endblock %}")   # True
        detector.extract_title("<head><title>A</title></head>")        # "A"
    """

    def detect(self, text: str) -> Detection:
        if not isinstance(text, str):
            raise TypeError(f"Oczekiwano str, otrzymano {type(text).__name__}")

        match extract_head_title(text):
            case Matched(extracted_text=raw):
                return Detection(source=TitleSource.HTML_HEAD, raw_title=raw)

        match extract_template_title(text):
            case Matched(extracted_text=raw):
                return Detection(source=TitleSource.TEMPLATE_BLOCK, raw_title=raw)

        return Detection(source=None, raw_title=None)

    def has_title(self, text: str) -> bool:
        return self.detect(text).has_title

    def extract_title(self, text: str) -> str | None:
        return self.detect(text).title


_DETECTOR = TitleDetector()


def detect(text: str) -> Detection:
    """Pełny wynik detekcji (strategia + surowy tytuł)."""
    return _DETECTOR.detect(text)


def has_title(text: str) -> bool:
    """True gdy dokument deklaruje niepusty tytuł."""
    return _DETECTOR.has_title(text)


def extract_title(text: str) -> str | None:
    """Trymowany tytuł albo None."""
    return _DETECTOR.extract_title(text)
