"""
Service de renommage des fichiers médias.

Ce module génère le chemin de destination d'un média fusionné à partir
d'un template par type de média (films, épisodes).

Les templates sont de simples chaînes de format Python limitées à un
ensemble fixe de champs par type :
- films : title, year, quality, codec, group
- épisodes : show, name, season, episode, quality, codec, group

Exemples :
    "{title} ({year}) [{quality}]"
    "{show}/Season {season:02d}/{show} - S{season:02d}E{episode:02d} - {name}"

Un "/" dans le template crée des sous-répertoires. Les valeurs substituées
ne peuvent jamais en créer : les séparateurs sont retirés des champs.

Une année inconnue (0) et les tags inconnus sont rendus vides, et les
parenthèses ou crochets restés vides disparaissent du nom :
"{title} ({year}) [{quality}]" donne "Movie" pour un film sans année ni qualité.
"""

import re
from pathlib import Path
from string import Formatter
from typing import Any, Optional

from pathvalidate import sanitize_filepath

from mediorg.core.entities.media import Episode, Media, Movie
from mediorg.core.errors import TemplateError, TemplateMissingError, UnknownMediaError


# Champs autorisés par type de média
MOVIE_FIELDS = frozenset({"title", "year", "quality", "codec", "group"})
EPISODE_FIELDS = frozenset(
    {"show", "name", "season", "episode", "quality", "codec", "group"}
)

# Séparateurs de chemin et caractères interdits sur les systèmes de fichiers courants
_PATH_CHARS = re.compile(r'[%/?\\*:|"<>\n\r]')

_SPACES = re.compile(r"\s+")

# Parentheses ou crochets laisses vides par un champ inconnu : "()" "[ ]"
_EMPTY_BRACKETS = re.compile(r"\(\s*\)|\[\s*\]")


def clean_string(text: str) -> str:
    """
    Nettoie une chaîne pour l'utiliser comme nom dans une arborescence.

    Tous les séparateurs de chemin et caractères interdits
    (% / ? \\ * : | " < > retour chariot) sont supprimés.

    Args:
        text: Texte à nettoyer.

    Returns:
        Texte sans caractère interdit.
    """
    return _PATH_CHARS.sub("", text)


def truncate_spaces(text: str) -> str:
    """Remplace chaque suite d'espaces blancs par un seul espace."""
    return _SPACES.sub(" ", text)


def _clean_field(text: str) -> str:
    return truncate_spaces(clean_string(text)).strip()


def validate_template(template: str, allowed_fields: frozenset[str]) -> str:
    """
    Vérifie qu'un template n'utilise que les champs autorisés.

    Rejette les champs inconnus, les champs positionnels ("{}") et les
    accès attribut/index ("{title.upper}", "{title[0]}").

    Args:
        template: Template à valider.
        allowed_fields: Champs autorisés pour ce type de média.

    Returns:
        Le template inchangé.

    Raises:
        TemplateError: Si le template est invalide.
    """
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as e:
        raise TemplateError(f"invalid template '{template}': {e}") from e

    for _, field_name, format_spec, _ in parsed:
        if field_name is None:
            continue
        if field_name not in allowed_fields:
            allowed = ", ".join(sorted(allowed_fields))
            raise TemplateError(
                f"unknown field '{field_name}' in template '{template}' "
                f"(allowed: {allowed})"
            )
        if format_spec and "{" in format_spec:
            raise TemplateError(f"nested fields are not allowed: '{template}'")
    return template


def movie_values(movie: Movie) -> dict[str, Any]:
    """Valeurs de substitution pour un film."""
    return {
        "title": _clean_field(movie.title),
        "year": movie.year or "",
        "quality": movie.metadata.quality.display,
        "codec": movie.metadata.codec.display,
        "group": _clean_field(movie.metadata.group),
    }


def episode_values(episode: Episode) -> dict[str, Any]:
    """Valeurs de substitution pour un épisode."""
    return {
        "show": _clean_field(episode.show),
        "name": _clean_field(episode.episode_title),
        "season": episode.season,
        "episode": episode.episode,
        "quality": episode.metadata.quality.display,
        "codec": episode.metadata.codec.display,
        "group": _clean_field(episode.metadata.group),
    }


def render_template(template: str, values: dict[str, Any]) -> str:
    """
    Applique un template et normalise le chemin relatif obtenu.

    - parenthèses et crochets vides retirés (année ou tag inconnus)
    - espaces consécutifs fusionnés, espaces en bord de segment retirés
    - segments vides supprimés
    - nettoyage multi-plateforme via pathvalidate

    Raises:
        TemplateError: Si le format d'un champ est incompatible avec sa valeur
                       ou si le résultat est vide.
    """
    try:
        rendered = template.format_map(values)
    except (KeyError, ValueError, IndexError) as e:
        raise TemplateError(f"cannot render template '{template}': {e}") from e

    rendered = _EMPTY_BRACKETS.sub("", rendered)
    segments = [segment.strip() for segment in truncate_spaces(rendered).split("/")]
    relative = "/".join(segment for segment in segments if segment)
    relative = sanitize_filepath(relative, platform="universal")

    if not relative:
        raise TemplateError(f"template '{template}' rendered an empty filename")
    return relative


class RenamerService:
    """
    Service de calcul des chemins de destination.

    Sélectionne le template selon la variante du média, substitue les
    champs nettoyés et ajoute l'extension du fichier d'origine.

    Ce service est sans état après construction et peut être utilisé
    comme singleton.
    """

    def __init__(
        self,
        movies_dir: Path,
        movies_template: Optional[str],
        tvshows_dir: Path,
        tvshows_template: Optional[str],
    ) -> None:
        """
        Args:
            movies_dir: Répertoire racine des films.
            movies_template: Template des films, None si non configuré.
            tvshows_dir: Répertoire racine des séries.
            tvshows_template: Template des épisodes, None si non configuré.

        Raises:
            TemplateError: Si un template utilise un champ inconnu.
        """
        self._movies_dir = Path(movies_dir)
        self._tvshows_dir = Path(tvshows_dir)
        self._movies_template = (
            validate_template(movies_template, MOVIE_FIELDS)
            if movies_template
            else None
        )
        self._tvshows_template = (
            validate_template(tvshows_template, EPISODE_FIELDS)
            if tvshows_template
            else None
        )

    def render(self, media: Media) -> Path:
        """
        Calcule le chemin de destination d'un média fusionné.

        Args:
            media: Film ou épisode fusionné.

        Returns:
            Chemin absolu ou relatif au répertoire configuré, extension incluse.

        Raises:
            TemplateMissingError: Aucun template configuré pour la variante.
            UnknownMediaError: Le média n'est ni un film ni un épisode.
        """
        movie = media.as_movie()
        if movie is not None:
            if self._movies_template is None:
                raise TemplateMissingError("movies")
            relative = render_template(self._movies_template, movie_values(movie))
            return self._movies_dir / f"{relative}{self._extension(media)}"

        episode = media.as_episode()
        if episode is not None:
            if self._tvshows_template is None:
                raise TemplateMissingError("tvshows")
            relative = render_template(self._tvshows_template, episode_values(episode))
            return self._tvshows_dir / f"{relative}{self._extension(media)}"

        raise UnknownMediaError(f"unknown media format cannot rename: {media}")

    @staticmethod
    def _extension(media: Media) -> str:
        if media.file is None:
            return ""
        return media.file.extension
