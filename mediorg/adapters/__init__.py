"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- parsing/ : Parsing de noms de fichiers (guessit)
- scrapers/ : Scrapers de métadonnées hors ligne
- file_system : Fichiers locaux et parcours des répertoires

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from mediorg.adapters.file_system import FileSystemAdapter, PathFile, StreamFile
from mediorg.adapters.parsing.guessit_parser import GuessitFilenameParser
from mediorg.adapters.scrapers.filename_scraper import FilenameScraper

__all__ = [
    "FileSystemAdapter",
    "PathFile",
    "StreamFile",
    "GuessitFilenameParser",
    "FilenameScraper",
]
