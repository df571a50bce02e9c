"""Shared test fixtures — a fake translation engine and settings isolation."""

from typing import Any, Union

import pytest

from fieldcheck.config import get_settings

Registry = dict[str, Union[str, "Registry"]]


class FakeI18nHandler:
    """In-memory translation engine over a nested registry.

    Keys use dot notation (`validation.length.minimum`). Translations render as
    `message|param:value|...` with params sorted by name, so tests can assert
    exactly what the resolver handed over.
    """

    def __init__(self, registry: Registry):
        self.registry = registry
        self.lookups: list[str] = []

    def _entry(self, key: str) -> Any:
        entry: Any = self.registry
        for member in key.split("."):
            if not isinstance(entry, dict) or member not in entry:
                return None
            entry = entry[member]
        return entry

    def exists(self, key: str) -> bool:
        self.lookups.append(key)
        return isinstance(self._entry(key), str)

    def translate(self, key: str, params: dict[str, Any]) -> str:
        message = self._entry(key)
        if not isinstance(message, str):
            raise KeyError(f"Could not find message for key {key}.")
        return render_translation(message, params)


def render_translation(message: str, params: dict[str, Any]) -> str:
    entries = [f"{name}:{params[name]}" for name in sorted(params)]
    return "|".join([message, *entries])


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Each test reads settings from a clean environment."""
    for name in ("FIELDCHECK_DEBUG", "FIELDCHECK_LOG_LEVEL", "FIELDCHECK_I18N_KEY_PREFIX", "FIELDCHECK_DEFAULT_HALT_BY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def i18n() -> FakeI18nHandler:
    return FakeI18nHandler({
        "validation": {
            "presence": "is required",
            "length": {
                "minimum": "too short",
                "maximum": "too long",
            },
        },
        "custom": {
            "greeting": "hello",
        },
    })
