"""
Constantes globales pour MediOrg.

Ce module contient les constantes utilisees dans l'application:
- Extensions video et sous-titres reconnues
- Patterns a ignorer lors du scan
- Marqueurs de sous-titres pour malentendants
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".mkv",
    ".mp4",
    ".avi",
    ".mov",
    ".wmv",
    ".flv",
    ".webm",
    ".m4v",
    ".mpg",
    ".mpeg",
})

# Extensions de sous-titres reconnues
SUBTITLE_EXTENSIONS = frozenset({
    ".srt",
    ".ass",
    ".ssa",
    ".sub",
    ".vtt",
})

# Patterns a ignorer (sample, trailers, extras)
IGNORED_PATTERNS = frozenset({
    "sample",
    "trailer",
    "preview",
    "extras",
    "behind the scenes",
    "deleted scenes",
    "featurette",
    "bonus",
})

# Segments de nom de sous-titre indiquant une piste pour malentendants
# Ex: "Show.S01E02.en.sdh.srt"
HEARING_IMPAIRED_MARKERS = frozenset({
    "hi",
    "sdh",
    "cc",
})
