"""
Utilitaires et constantes pour MediOrg.

Ce module contient les constantes partagees.
"""

from mediorg.utils.constants import (
    HEARING_IMPAIRED_MARKERS,
    IGNORED_PATTERNS,
    SUBTITLE_EXTENSIONS,
    VIDEO_EXTENSIONS,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "SUBTITLE_EXTENSIONS",
    "IGNORED_PATTERNS",
    "HEARING_IMPAIRED_MARKERS",
]
