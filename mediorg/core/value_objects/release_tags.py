"""
Tags techniques de release et tables de mots-cles associees.

Chaque categorie (codec, qualite, source) est un enum ferme avec un membre
UNKNOWN. Les tables de classification sont des tuples ordonnes
(pattern compile, tag) : l'ordre des entrees EST la priorite. Quand plusieurs
mots-cles d'une meme categorie sont presents dans un nom de release, c'est
la premiere entree de la table qui l'emporte, quelle que soit la position
du mot-cle dans le nom.

Les patterns sont compiles une seule fois a l'import et ne sont jamais
modifies ensuite.
"""

import re
from enum import Enum
from typing import TypeVar


class ReleaseTag(str, Enum):
    """Base des enums de tags de release (sans membres)."""

    @property
    def display(self) -> str:
        """Libelle pour un nom de fichier : vide si le tag est inconnu."""
        if self.name == "UNKNOWN":
            return ""
        return self.value


class CodecTag(ReleaseTag):
    """Codec video annonce dans le nom de release."""

    UNKNOWN = "unknown"
    AV1 = "AV1"
    X265 = "x265"
    H265 = "H.265"
    HEVC = "HEVC"
    X264 = "x264"
    H264 = "H.264"
    AVC = "AVC"
    XVID = "XviD"
    DIVX = "DivX"
    VC1 = "VC-1"
    MPEG2 = "MPEG-2"


class QualityTag(ReleaseTag):
    """Resolution annoncee dans le nom de release."""

    UNKNOWN = "unknown"
    P2160 = "2160p"
    P1440 = "1440p"
    P1080 = "1080p"
    I1080 = "1080i"
    P720 = "720p"
    P576 = "576p"
    P480 = "480p"


class SourceTag(ReleaseTag):
    """Origine de la release (disque, web, diffusion TV, cinema)."""

    UNKNOWN = "unknown"
    BLURAY = "BluRay"
    WEBDL = "WEB-DL"
    WEBRIP = "WEBRip"
    WEB = "WEB"
    HDTV = "HDTV"
    HDRIP = "HDRip"
    DVDRIP = "DVDRip"
    DVD = "DVD"
    SDTV = "SDTV"
    TELECINE = "Telecine"
    TELESYNC = "Telesync"
    SCREENER = "Screener"
    CAM = "CAM"


T = TypeVar("T")

# Un mot-cle est delimite par tout caractere non alphanumerique
# (point, tiret, underscore, espace, crochets...) ou par le debut/fin de chaine
_BOUNDARY_BEFORE = r"(?<![^\W_])"
_BOUNDARY_AFTER = r"(?![^\W_])"


def keyword_pattern(pattern: str) -> re.Pattern[str]:
    """Compile un pattern de mot-cle insensible a la casse, delimite par separateurs."""
    return re.compile(
        f"{_BOUNDARY_BEFORE}(?:{pattern}){_BOUNDARY_AFTER}", re.IGNORECASE
    )


def _table(entries: tuple[tuple[str, T], ...]) -> tuple[tuple[re.Pattern[str], T], ...]:
    return tuple((keyword_pattern(pattern), tag) for pattern, tag in entries)


# Priorite : codecs modernes avant les anciens, encodeur avant la norme
CODEC_TABLE = _table((
    (r"av1", CodecTag.AV1),
    (r"x\.?265", CodecTag.X265),
    (r"h\.?265", CodecTag.H265),
    (r"hevc", CodecTag.HEVC),
    (r"x\.?264", CodecTag.X264),
    (r"h\.?264", CodecTag.H264),
    (r"avc", CodecTag.AVC),
    (r"xvid", CodecTag.XVID),
    (r"divx", CodecTag.DIVX),
    (r"vc-?1", CodecTag.VC1),
    (r"mpeg-?2", CodecTag.MPEG2),
))

# Priorite : resolution la plus haute d'abord
QUALITY_TABLE = _table((
    (r"2160p|4k|uhd", QualityTag.P2160),
    (r"1440p", QualityTag.P1440),
    (r"1080p", QualityTag.P1080),
    (r"1080i", QualityTag.I1080),
    (r"720p", QualityTag.P720),
    (r"576p", QualityTag.P576),
    (r"480p", QualityTag.P480),
))

# Priorite : sources retail, puis web, puis diffusion, puis captations
SOURCE_TABLE = _table((
    (r"blu-?ray|bdrip|brrip", SourceTag.BLURAY),
    (r"web-?dl", SourceTag.WEBDL),
    (r"web-?rip", SourceTag.WEBRIP),
    (r"web", SourceTag.WEB),
    (r"hdtv", SourceTag.HDTV),
    (r"hdrip", SourceTag.HDRIP),
    (r"dvd-?rip", SourceTag.DVDRIP),
    (r"dvd(?:r|5|9)?", SourceTag.DVD),
    (r"sdtv|pdtv", SourceTag.SDTV),
    (r"telecine", SourceTag.TELECINE),
    (r"telesync|hdts", SourceTag.TELESYNC),
    (r"screener|dvdscr", SourceTag.SCREENER),
    (r"hdcam|camrip|cam", SourceTag.CAM),
))

# Tags libres : reconnus par tags() uniquement, sans categorie dediee
EXTRA_TABLE = _table((
    (r"remux", "REMUX"),
    (r"proper", "PROPER"),
    (r"repack", "REPACK"),
    (r"extended", "EXTENDED"),
    (r"unrated", "UNRATED"),
    (r"remastered", "REMASTERED"),
    (r"imax", "IMAX"),
    (r"hdr10\+", "HDR10+"),
    (r"hdr10", "HDR10"),
    (r"hdr", "HDR"),
    (r"dv|dovi", "DV"),
    (r"10-?bit", "10bit"),
    (r"dts-?hd(?:[ .-]?ma)?", "DTS-HD"),
    (r"dts", "DTS"),
    (r"truehd", "TrueHD"),
    (r"atmos", "Atmos"),
    (r"ddp(?:\d\.\d)?|e-?ac-?3", "DDP"),
    (r"ac-?3|dd\d\.\d", "AC3"),
    (r"aac(?:\d\.\d)?", "AAC"),
    (r"flac", "FLAC"),
    (r"multi", "MULTi"),
    (r"truefrench", "TRUEFRENCH"),
    (r"french", "FRENCH"),
    (r"vostfr", "VOSTFR"),
))
