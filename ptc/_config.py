"""Konfiguracja ptc — zmienne środowiskowe (opcjonalnie z pliku .env)."""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from title_parser.fetch import DEFAULT_USER_AGENT

ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"

DEFAULT_INCLUDE = ("*.html", "*.htm", "*.jinja", "*.j2", "*.djhtml")


@dataclass(frozen=True, slots=True)
class Settings:
    encoding:     str               # PTC_ENCODING — kodowanie plików dla `ptc lint`
    include:      tuple[str, ...]   # PTC_INCLUDE  — globy przy przechodzeniu katalogów
    http_timeout: float             # PTC_HTTP_TIMEOUT — sekundy dla `ptc check-url`
    user_agent:   str               # PTC_USER_AGENT


def _split_globs(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_INCLUDE
    globs = tuple(g.strip() for g in raw.split(",") if g.strip())
    return globs or DEFAULT_INCLUDE


def _positive_float(raw: str | None, default: float) -> float:
    try:
        value = float(raw) if raw else default
    except ValueError:
        return default
    return value if value > 0 else default


def load_settings() -> Settings:
    load_dotenv(ENV_FILE, override=False)
    return Settings(
        encoding     = os.getenv("PTC_ENCODING") or "utf-8",
        include      = _split_globs(os.getenv("PTC_INCLUDE")),
        http_timeout = _positive_float(os.getenv("PTC_HTTP_TIMEOUT"), 30.0),
        user_agent   = os.getenv("PTC_USER_AGENT") or DEFAULT_USER_AGENT,
    )
