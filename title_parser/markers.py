"""title_parser/markers.py — dosłowne znaczniki wyszukiwane w dokumencie."""

from __future__ import annotations

# Blok tytułu szablonu (Django / Jinja)
TEMPLATE_TITLE_OPEN  = "{% block title %}"
TEMPLATE_BLOCK_CLOSE = "{% endblock %}"

# Sekcja <head> dokumentu HTML
HEAD_OPEN  = "<head>"
HEAD_CLOSE = "</head>"

# Tag <title> (uznawany tylko wewnątrz <head>)
TITLE_OPEN  = "<title>"
TITLE_CLOSE = "</title>"
