"""Settings 단위 테스트."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recicla.setup.config import Settings


class TestSettings:
    """Settings 테스트."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GOOGLE_PLACES_API_KEY", raising=False)
        monkeypatch.delenv("RECICLA_GOOGLE_PLACES_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.confidence_threshold == 50
        assert settings.default_label == "Defaut"
        assert settings.search_radius_m == 10000
        assert settings.max_results == 10
        assert settings.default_material == "reciclagem"
        assert settings.nominatim_user_agent == "ReciclaApp/1.0"
        assert settings.places_enabled is False

    def test_places_key_without_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_PLACES_API_KEY", "secret-key")
        settings = Settings(_env_file=None)

        assert settings.places_enabled is True
        assert settings.google_places_api_key.get_secret_value() == "secret-key"
        assert "secret-key" not in repr(settings)

    def test_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECICLA_CONFIDENCE_THRESHOLD", "70")
        monkeypatch.setenv("RECICLA_CORS_ORIGINS_STR", "https://a.example, https://b.example")
        settings = Settings(_env_file=None)

        assert settings.confidence_threshold == 70
        assert settings.cors_origins == ["https://a.example", "https://b.example"]

    def test_threshold_out_of_range(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECICLA_CONFIDENCE_THRESHOLD", "150")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
