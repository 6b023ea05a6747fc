"""
Media entities.

A Media value is exactly one of three variants: Movie, Episode or Subtitle.
The union is closed; callers narrow it with as_movie(), as_episode() and
as_subtitle(), which return None instead of failing when the variant does
not match.

Values are immutable: a merge builds a new value, it never updates one
in place.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

from babelfish import Language

from mediorg.core.errors import UnsupportedOperationError
from mediorg.core.ports.local_file import ILocalFile
from mediorg.core.value_objects.metadata import Metadata


class _Narrowable:
    """Safe type-narrowing accessors shared by all media variants."""

    kind: ClassVar[str] = ""

    def as_movie(self) -> Optional["Movie"]:
        return self if isinstance(self, Movie) else None

    def as_episode(self) -> Optional["Episode"]:
        return self if isinstance(self, Episode) else None

    def as_subtitle(self) -> Optional["Subtitle"]:
        return self if isinstance(self, Subtitle) else None


@dataclass(frozen=True)
class Movie(_Narrowable):
    """
    A movie file.

    Attributes:
        file: Local file reference (None for scraped values)
        metadata: Release metadata parsed from the filename
        title: Movie title
        year: Release year, 0 when unknown
    """

    kind: ClassVar[str] = "movie"

    file: Optional[ILocalFile] = None
    metadata: Metadata = field(default_factory=Metadata)
    title: str = ""
    year: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "filename": self.file.name if self.file else None,
            "title": self.title,
            "year": self.year,
            "metadata": self.metadata.to_dict(),
        }

    def __str__(self) -> str:
        if self.year:
            return f"{self.title} ({self.year})"
        return self.title


@dataclass(frozen=True)
class Episode(_Narrowable):
    """
    An episode of a TV show.

    Attributes:
        file: Local file reference (None for scraped values)
        metadata: Release metadata parsed from the filename
        show: Title of the TV show
        season: Season number (0 for specials or unknown)
        episode: Episode number within the season
        episode_title: Title of the episode, may be empty
        year: First air year of the show, 0 when unknown
    """

    kind: ClassVar[str] = "episode"

    file: Optional[ILocalFile] = None
    metadata: Metadata = field(default_factory=Metadata)
    show: str = ""
    season: int = 0
    episode: int = 0
    episode_title: str = ""
    year: int = 0

    def __post_init__(self) -> None:
        if self.season < 0 or self.episode < 0:
            raise ValueError(
                f"season and episode must be >= 0, got S{self.season}E{self.episode}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "filename": self.file.name if self.file else None,
            "show": self.show,
            "season": self.season,
            "episode": self.episode,
            "name": self.episode_title,
            "metadata": self.metadata.to_dict(),
        }

    def __str__(self) -> str:
        return f"{self.show} S{self.season:02d}E{self.episode:02d}"


@dataclass(frozen=True)
class Subtitle(_Narrowable):
    """
    A subtitle file.

    Subtitles carry no release metadata and never take part in a merge.

    Attributes:
        file: Local file reference
        language: Subtitle language
        hearing_impaired: True for SDH/HI subtitles
    """

    kind: ClassVar[str] = "subtitle"

    file: Optional[ILocalFile] = None
    language: Language = field(default_factory=lambda: Language("und"))
    hearing_impaired: bool = False

    @property
    def metadata(self) -> None:
        """Subtitles have no release metadata."""
        return None

    @property
    def display_name(self) -> str:
        """English name of the subtitle language."""
        return self.language.name

    def is_lang(self, language: Language) -> bool:
        return self.language == language

    def download(self):
        """Local subtitles are already on disk and cannot be downloaded."""
        raise UnsupportedOperationError("local subtitle can't be downloaded")

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "filename": self.file.name if self.file else None,
            "code": str(self.language),
            "language": self.display_name,
            "hi": self.hearing_impaired,
        }

    def __str__(self) -> str:
        return self.display_name


Media = Union[Movie, Episode, Subtitle]
