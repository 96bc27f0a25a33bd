"""
data_model/matches.py — wynik pojedynczej próby ekstrakcji tytułu.

MatchOutcome to wariant z tagiem:
  Matched  — znaleziono parę znaczników; extracted_text to surowy (nietrymowany)
             tekst między nimi, remaining_text to sufiks źródła za
             skonsumowanym obszarem
  NoMatch  — brak dopasowania strukturalnego (znacznik nieobecny
             lub niezamknięty; oba przypadki są nierozróżnialne)

Wszystkie obiekty są niemutowalne i żyją tylko w obrębie jednego wywołania.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Matched:
    extracted_text: str   # tekst między znacznikami, bez trymowania
    remaining_text: str   # wszystko za zamykającym znacznikiem obszaru


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Brak dopasowania strukturalnego."""


NO_MATCH = NoMatch()

MatchOutcome = Matched | NoMatch


def guard_progress(outcome: MatchOutcome, source: str) -> MatchOutcome:
    """
    Zamienia Matched bez postępu na NoMatch.

    Jeśli remaining_text jest identyczny ze źródłem, nic nie zostało
    skonsumowane; wywołujący, który ponawia ekstrakcję na reszcie tekstu,
    zapętliłby się.
    """
    match outcome:
        case Matched(remaining_text=rest) if rest == source:
            return NO_MATCH
        case _:
            return outcome
