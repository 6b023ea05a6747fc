"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- CodecTag, QualityTag, SourceTag : Tags techniques de release
- Metadata : Metadonnees techniques extraites d'un nom de release
- MediaType : Type de media (MOVIE, EPISODE, UNKNOWN)
- ParsedFilename : Identite extraite du parsing d'un nom de fichier
"""

from mediorg.core.value_objects.release_tags import (
    CodecTag,
    QualityTag,
    SourceTag,
)
from mediorg.core.value_objects.metadata import Metadata
from mediorg.core.value_objects.parsed_info import (
    MediaType,
    ParsedFilename,
)

__all__ = [
    "CodecTag",
    "QualityTag",
    "SourceTag",
    "Metadata",
    "MediaType",
    "ParsedFilename",
]
