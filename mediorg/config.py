"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MEDIORG_,
et peut optionnellement être fournie via un fichier .env.

Un template vide désactive le renommage de la variante correspondante
(les médias concernés échouent avec TemplateMissingError).
"""

from pathlib import Path
from typing import Optional

from babelfish import Language, LanguageReverseError
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediorg.core.errors import TemplateError
from mediorg.services.linker import LinkAction
from mediorg.services.renamer import EPISODE_FIELDS, MOVIE_FIELDS, validate_template

# Trouver le fichier .env à la racine du projet (parent de mediorg/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_MOVIES_TEMPLATE = "{title} ({year})/{title} ({year}) [{quality}]"
DEFAULT_TVSHOWS_TEMPLATE = (
    "{show}/Season {season:02d}/{show} - S{season:02d}E{episode:02d} - {name}"
)


def _check_template(template: Optional[str], fields: frozenset[str]) -> Optional[str]:
    # pydantic ne convertit que les ValueError en erreurs de validation
    if template is None:
        return None
    try:
        return validate_template(template, fields)
    except TemplateError as e:
        raise ValueError(str(e)) from e


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIORG_.
    Exemple : MEDIORG_ACTION=hardlink

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIORG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Renommage
    action: LinkAction = Field(default=LinkAction.COPY)
    strict: bool = Field(default=False)
    strict_existing: bool = Field(default=False)
    force: bool = Field(default=False)

    # Destinations (avec expansion ~)
    movies_dir: Path = Field(default=Path("~/Videos/Movies"))
    movies_template: Optional[str] = Field(default=DEFAULT_MOVIES_TEMPLATE)
    tvshows_dir: Path = Field(default=Path("~/Videos/TV Shows"))
    tvshows_template: Optional[str] = Field(default=DEFAULT_TVSHOWS_TEMPLATE)

    # Langues de sous-titres exposées par l'API (codes IETF)
    languages: list[str] = Field(default_factory=lambda: ["en"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mediorg.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("movies_dir", "tvshows_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("movies_template", "tvshows_template", mode="before")
    @classmethod
    def empty_template(cls, v: Optional[str]) -> Optional[str]:
        """Une chaîne vide signifie : pas de template."""
        if v is None or not str(v).strip():
            return None
        return str(v)

    @field_validator("movies_template")
    @classmethod
    def check_movies_template(cls, v: Optional[str]) -> Optional[str]:
        """Vérifie les champs du template des films."""
        return _check_template(v, MOVIE_FIELDS)

    @field_validator("tvshows_template")
    @classmethod
    def check_tvshows_template(cls, v: Optional[str]) -> Optional[str]:
        """Vérifie les champs du template des épisodes."""
        return _check_template(v, EPISODE_FIELDS)

    @field_validator("languages")
    @classmethod
    def check_languages(cls, v: list[str]) -> list[str]:
        """Vérifie que chaque code de langue est connu."""
        for code in v:
            try:
                Language.fromietf(code)
            except (ValueError, LanguageReverseError) as e:
                raise ValueError(f"unknown language code: {code}") from e
        return v
