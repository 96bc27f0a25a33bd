"""
title_parser/scan.py — wyszukiwanie obszaru ograniczonego parą znaczników.

Jedyny prymityw parsujący: liniowe wyszukiwanie podciągu i wycinanie.
"""

from __future__ import annotations

from data_model.matches import NO_MATCH, Matched, MatchOutcome


def take_delimited(text: str, opening: str, closing: str) -> MatchOutcome:
    """
    Szuka pierwszego `opening`, a za nim pierwszego `closing`.

    Zwraca Matched(tekst między znacznikami, tekst za `closing`)
    albo NoMatch, gdy któregoś znacznika brak. Niezamknięty obszar
    jest traktowany tak samo jak nieobecny.
    """
    start = text.find(opening)
    if start < 0:
        return NO_MATCH

    body_start = start + len(opening)
    end = text.find(closing, body_start)
    if end < 0:
        return NO_MATCH

    return Matched(
        extracted_text=text[body_start:end],
        remaining_text=text[end + len(closing):],
    )
