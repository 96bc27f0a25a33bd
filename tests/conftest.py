import pytest

_ENV_VARS = ("PTC_ENCODING", "PTC_INCLUDE", "PTC_HTTP_TIMEOUT", "PTC_USER_AGENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Testy nie dziedziczą konfiguracji ptc ze środowiska."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
