"""
data_model — struktury danych wyników ekstrakcji tytułu.

Użycie:
  from data_model import Matched, NoMatch, MatchOutcome

Moduły:
  matches — Matched, NoMatch, NO_MATCH, MatchOutcome, guard_progress
"""

from .matches import (
    NO_MATCH,
    Matched,
    MatchOutcome,
    NoMatch,
    guard_progress,
)

__all__ = [
    "NO_MATCH",
    "Matched",
    "MatchOutcome",
    "NoMatch",
    "guard_progress",
]
