"""Adaptateurs de parsing de noms de fichiers."""

from mediorg.adapters.parsing.guessit_parser import GuessitFilenameParser

__all__ = ["GuessitFilenameParser"]
