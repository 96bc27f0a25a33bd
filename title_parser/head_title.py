"""
title_parser/head_title.py — tytuł z tagu <title> wewnątrz <head>.

Wyszukiwanie jest dwuetapowe:
  1. obszar head — tekst między pierwszym `<head>` a pierwszym
     następującym `</head>`
  2. tag title — szukany wyłącznie w obszarze head

Tag <title> przed sekcją head lub za nią (np. w <body>) jest ignorowany.
Dopasowanie zwraca jako remaining_text wszystko za `</head>`.
"""

from __future__ import annotations

from data_model.matches import NO_MATCH, Matched, MatchOutcome, guard_progress
from title_parser.markers import HEAD_CLOSE, HEAD_OPEN, TITLE_CLOSE, TITLE_OPEN
from title_parser.scan import take_delimited


def head_region(text: str) -> MatchOutcome:
    """Matched(zawartość <head>, tekst za </head>) albo NoMatch."""
    return take_delimited(text, HEAD_OPEN, HEAD_CLOSE)


def extract_head_title(text: str) -> MatchOutcome:
    """
    Zwraca Matched z surową treścią <title> z obszaru head albo NoMatch.

    NoMatch oznacza brak lub niezamknięcie <head>, albo brak
    lub niezamknięcie <title> wewnątrz <head>.
    """
    head = head_region(text)
    if not isinstance(head, Matched):
        return NO_MATCH

    title = take_delimited(head.extracted_text, TITLE_OPEN, TITLE_CLOSE)
    if not isinstance(title, Matched):
        return NO_MATCH

    outcome = Matched(extracted_text=title.extracted_text, remaining_text=head.remaining_text)
    return guard_progress(outcome, text)
