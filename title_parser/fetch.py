"""title_parser/fetch.py — pobieranie strony HTML do sprawdzenia tytułu."""

from __future__ import annotations

import requests

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)


def fetch_page(
    url: str,
    timeout: float = 30,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """
    Pobiera stronę spod `url` i zwraca jej tekst.

    Rzuca requests.RequestException przy błędzie sieci lub statusie HTTP >= 400.
    """
    headers = {"User-Agent": user_agent}
    resp = requests.get(url, timeout=timeout, headers=headers)
    resp.raise_for_status()
    resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text
