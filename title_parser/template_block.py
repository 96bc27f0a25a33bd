"""
title_parser/template_block.py — tytuł z bloku szablonu.

    {% block title %} Mój profil - {{ block.super }} {% endblock %}

Przechwytywany jest surowy tekst między `{% block title %}` a pierwszym
następującym `{% endblock %}`. Zagnieżdżone ani powtórzone bloki nie są
obsługiwane: liczy się pierwsze wystąpienie znacznika otwierającego.
"""

from __future__ import annotations

from data_model.matches import MatchOutcome, guard_progress
from title_parser.markers import TEMPLATE_BLOCK_CLOSE, TEMPLATE_TITLE_OPEN
from title_parser.scan import take_delimited


def extract_template_title(text: str) -> MatchOutcome:
    """Zwraca Matched z treścią bloku tytułu albo NoMatch."""
    outcome = take_delimited(text, TEMPLATE_TITLE_OPEN, TEMPLATE_BLOCK_CLOSE)
    return guard_progress(outcome, text)
