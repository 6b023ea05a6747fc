"""
Extraction des tags techniques depuis un nom de release.

Fonctions pures appliquees a la partie "nom de release" d'un fichier
(sans chemin ni extension), par exemple "Movie.Name.2020.1080p.BluRay.x264-GROUP".

- group : groupe de release (token final apres le dernier tiret)
- codec, quality, source : premier tag de la table de priorite qui matche
- tags : tous les mots-cles reconnus, dans l'ordre d'apparition

Aucune de ces fonctions ne leve d'exception : une entree non reconnue
donne UNKNOWN ou une chaine/tuple vide.
"""

import re
from typing import TypeVar

from mediorg.core.value_objects.release_tags import (
    CODEC_TABLE,
    EXTRA_TABLE,
    QUALITY_TABLE,
    SOURCE_TABLE,
    CodecTag,
    QualityTag,
    SourceTag,
)

T = TypeVar("T")

# Token final apres un tiret, suivi eventuellement d'un tag de site entre crochets
# Ex: "x264-GROUP", "x264-GROUP[rarbg]"
_GROUP_PATTERN = re.compile(r"-\s*([^\s\-.\[\]()]+)\s*(?:\[[^\]]*\])?\s*$")


def _first_match(
    value: str, table: tuple[tuple[re.Pattern[str], T], ...], default: T
) -> T:
    for pattern, tag in table:
        if pattern.search(value):
            return tag
    return default


def _keyword_spans(value: str) -> list[tuple[int, int, str]]:
    """
    Liste les mots-cles reconnus (toutes categories) sans chevauchement.

    A position de depart egale, le mot-cle le plus long l'emporte
    ("WEB-DL" plutot que "WEB").

    Returns:
        Liste de (debut, fin, nom canonique) triee par position.
    """
    found: list[tuple[int, int, str]] = []
    for table in (CODEC_TABLE, QUALITY_TABLE, SOURCE_TABLE):
        for pattern, tag in table:
            for match in pattern.finditer(value):
                found.append((match.start(), match.end(), tag.value))
    for pattern, name in EXTRA_TABLE:
        for match in pattern.finditer(value):
            found.append((match.start(), match.end(), name))

    found.sort(key=lambda span: (span[0], -(span[1] - span[0])))

    spans: list[tuple[int, int, str]] = []
    last_end = -1
    for start, end, name in found:
        if start < last_end:
            continue
        spans.append((start, end, name))
        last_end = end
    return spans


def group(value: str) -> str:
    """
    Extrait le groupe de release.

    Le groupe est le token qui suit le dernier tiret en fin de chaine.
    Retourne "" si aucun token ne correspond, si le token est purement
    numerique, ou si le tiret fait partie d'un mot-cle ("WEB-DL").
    """
    match = _GROUP_PATTERN.search(value)
    if match is None:
        return ""
    token = match.group(1)
    if token.isdigit():
        return ""
    dash = match.start()
    for start, end, _ in _keyword_spans(value):
        if start <= dash < end:
            return ""
    return token


def codec(value: str) -> CodecTag:
    """Codec video selon CODEC_TABLE, UNKNOWN si aucun mot-cle."""
    return _first_match(value, CODEC_TABLE, CodecTag.UNKNOWN)


def quality(value: str) -> QualityTag:
    """Resolution selon QUALITY_TABLE, UNKNOWN si aucun mot-cle."""
    return _first_match(value, QUALITY_TABLE, QualityTag.UNKNOWN)


def source(value: str) -> SourceTag:
    """Source selon SOURCE_TABLE, UNKNOWN si aucun mot-cle."""
    return _first_match(value, SOURCE_TABLE, SourceTag.UNKNOWN)


def tags(value: str) -> tuple[str, ...]:
    """
    Retourne tous les mots-cles reconnus, dans l'ordre d'apparition.

    Les doublons (meme nom canonique) sont supprimes, seule la premiere
    occurrence est conservee.
    """
    seen: set[str] = set()
    result: list[str] = []
    for _, _, name in _keyword_spans(value):
        if name in seen:
            continue
        seen.add(name)
        result.append(name)
    return tuple(result)
