"""
Business entities representing core domain concepts.

Exports:
- Movie: A movie file with its release metadata
- Episode: An episode file of a TV show
- Subtitle: A subtitle file with its language
- Media: Closed union of the three variants
"""

from mediorg.core.entities.media import Episode, Media, Movie, Subtitle

__all__ = [
    "Movie",
    "Episode",
    "Subtitle",
    "Media",
]
