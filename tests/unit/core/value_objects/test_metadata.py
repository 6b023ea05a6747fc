"""
Tests unitaires pour l'objet valeur Metadata.
"""

import pytest

from mediorg.core.value_objects import CodecTag, Metadata, QualityTag, SourceTag


class TestMetadataParse:
    """Tests pour la construction depuis un nom de release."""

    def test_parse_full_release(self) -> None:
        """Tous les champs sont extraits d'un nom de release complet."""
        metadata = Metadata.parse("Movie.Name.2020.1080p.BluRay.x264-GROUP")

        assert metadata.group == "GROUP"
        assert metadata.codec == CodecTag.X264
        assert metadata.quality == QualityTag.P1080
        assert metadata.source == SourceTag.BLURAY
        assert metadata.tags == ("1080p", "BluRay", "x264")

    def test_parse_without_tags(self) -> None:
        """Un nom sans mot-cle donne des champs inconnus."""
        metadata = Metadata.parse("Holiday Video")

        assert metadata == Metadata()
        assert metadata.codec == CodecTag.UNKNOWN

    def test_immutable(self) -> None:
        """Les metadonnees ne peuvent pas etre modifiees."""
        metadata = Metadata.parse("Movie.720p")
        with pytest.raises(AttributeError):
            metadata.group = "OTHER"  # type: ignore[misc]


class TestMetadataRendering:
    """Tests pour les representations texte et JSON."""

    def test_str_joins_fields(self) -> None:
        """__str__ joint groupe, codec, qualite et source."""
        metadata = Metadata.parse("Movie.Name.2020.1080p.BluRay.x264-GROUP")
        assert str(metadata) == "GROUP,x264,1080p,BluRay"

    def test_to_dict(self) -> None:
        """to_dict expose les valeurs des enums."""
        metadata = Metadata.parse("Movie.Name.2020.1080p.BluRay.x264-GROUP")
        assert metadata.to_dict() == {
            "group": "GROUP",
            "codec": "x264",
            "quality": "1080p",
            "source": "BluRay",
        }

    def test_unknown_display_is_empty(self) -> None:
        """Un tag inconnu s'affiche vide dans un nom de fichier."""
        assert QualityTag.UNKNOWN.display == ""
        assert QualityTag.P720.display == "720p"
