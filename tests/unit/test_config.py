"""
Tests unitaires pour la configuration pydantic-settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mediorg.config import DEFAULT_MOVIES_TEMPLATE, Settings
from mediorg.services.linker import LinkAction


class TestSettings:
    """Tests pour les valeurs par defaut et les validateurs."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.action == LinkAction.COPY
        assert settings.strict is False
        assert settings.strict_existing is False
        assert settings.force is False
        assert settings.movies_template == DEFAULT_MOVIES_TEMPLATE
        assert settings.languages == ["en"]

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MEDIORG_ACTION", "hardlink")
        monkeypatch.setenv("MEDIORG_STRICT", "true")

        settings = Settings(_env_file=None)

        assert settings.action == LinkAction.HARDLINK
        assert settings.strict is True

    def test_paths_expand_home(self) -> None:
        settings = Settings(_env_file=None, movies_dir="~/Films")
        assert settings.movies_dir == Path.home() / "Films"

    def test_empty_template_means_missing(self) -> None:
        settings = Settings(_env_file=None, movies_template="", tvshows_template="   ")

        assert settings.movies_template is None
        assert settings.tvshows_template is None

    def test_unknown_template_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, movies_template="{title} {season}")

    def test_unknown_action_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, action="teleport")

    def test_unknown_language_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, languages=["en", "zz"])
