"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

- ILocalFile : Fichier média local (nom, flux d'octets, chemin optionnel)
- IFilenameParser : Parsing de l'identité depuis un nom de fichier
- IScraper : Résolution de l'identité canonique via une source externe
"""

from mediorg.core.ports.local_file import ILocalFile
from mediorg.core.ports.parser import IFilenameParser
from mediorg.core.ports.scraper import IScraper

__all__ = [
    "ILocalFile",
    "IFilenameParser",
    "IScraper",
]
