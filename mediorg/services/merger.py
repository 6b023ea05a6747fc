"""
Fusion des metadonnees locales et distantes.

Regles de precedence :
- identite (titre, annee, serie, saison, episode) : le media distant fait foi
- metadonnees techniques (groupe, codec, qualite, source, tags) et fichier :
  le media local fait foi, les scrapers ne connaissent pas la release
- autres champs (titre d'episode) : valeur distante si renseignee,
  sinon valeur locale

La fusion produit toujours une nouvelle valeur ; aucun operande n'est modifie.
"""

from dataclasses import replace

from mediorg.core.entities.media import Episode, Media, Movie
from mediorg.core.errors import TypeMismatchError, UnsupportedOperationError


def merge(local: Media, remote: Media) -> Movie | Episode:
    """
    Fusionne un media local avec le media distant de meme variante.

    Args:
        local: Media construit depuis le fichier
        remote: Media resolu par un scraper

    Returns:
        Nouveau media fusionne

    Raises:
        UnsupportedOperationError: Si l'un des operandes est un sous-titre
        TypeMismatchError: Si les variantes different (film contre episode)
    """
    if local.as_subtitle() is not None or remote.as_subtitle() is not None:
        raise UnsupportedOperationError("merging of subtitles is not supported")

    local_movie, remote_movie = local.as_movie(), remote.as_movie()
    if local_movie is not None and remote_movie is not None:
        return replace(
            local_movie,
            title=remote_movie.title,
            year=remote_movie.year,
        )

    local_episode, remote_episode = local.as_episode(), remote.as_episode()
    if local_episode is not None and remote_episode is not None:
        return replace(
            local_episode,
            show=remote_episode.show,
            season=remote_episode.season,
            episode=remote_episode.episode,
            year=remote_episode.year,
            episode_title=remote_episode.episode_title or local_episode.episode_title,
        )

    raise TypeMismatchError(local.kind, remote.kind)
