"""
title_parser — wykrywanie tytułu strony (szablon Django/Jinja lub HTML).

Interfejs publiczny:
    has_title(text)              — True gdy strona deklaruje niepusty tytuł
    extract_title(text)          — trymowany tytuł albo None
    detect(text)                 — Detection: strategia + surowy tytuł
    TitleDetector                — bezstanowy detektor (to samo jako klasa)
    extract_head_title(text)     — MatchOutcome dla <head>/<title>
    extract_template_title(text) — MatchOutcome dla {% block title %}

Typowe użycie:
    from title_parser import has_title

    if not has_title(page_source):
        print("Strona bez tytułu")
"""

from .detector import Detection, TitleDetector, TitleSource, detect, extract_title, has_title
from .head_title import extract_head_title, head_region
from .template_block import extract_template_title

__all__ = [
    "Detection",
    "TitleDetector",
    "TitleSource",
    "detect",
    "extract_title",
    "has_title",
    "extract_head_title",
    "head_region",
    "extract_template_title",
]
