"""
Tests unitaires pour le Linker et ses strategies de placement.

Tous les tests travaillent sur de vrais fichiers dans tmp_path.
"""

import errno
import io
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mediorg.adapters.file_system import PathFile, StreamFile
from mediorg.core.errors import MediaExistsError, PathUnavailableError
from mediorg.services.linker import STRATEGIES, LinkAction, Linker

ALL_ACTIONS = list(LinkAction)
PATH_ACTIONS = [LinkAction.MOVE, LinkAction.SYMLINK, LinkAction.HARDLINK]


class _InterruptedReader(io.BytesIO):
    """Flux qui echoue a la deuxieme lecture, apres avoir livre un premier bloc."""

    def __init__(self) -> None:
        super().__init__(b"partial")
        self._reads = 0

    def read(self, size=-1):
        self._reads += 1
        if self._reads > 1:
            raise OSError("read error")
        return super().read(size)


@pytest.fixture
def source(write_file) -> Path:
    return write_file("downloads/Movie.2020.mkv", b"new content")


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    return tmp_path / "library" / "Movie (2020)" / "Movie (2020).mkv"


@pytest.fixture
def existing(write_file, tmp_path: Path) -> Path:
    """Destination deja occupee, avec une date de modification connue."""
    path = write_file("library/Movie (2020).mkv", b"old content")
    os.utime(path, ns=(1_000_000_000_000_000_000, 1_000_000_000_000_000_000))
    return path


# ====================
# Tests du registre
# ====================

class TestStrategies:
    """Tests pour la resolution des strategies."""

    def test_action_from_string(self) -> None:
        assert Linker("hardlink").action == LinkAction.HARDLINK

    def test_unknown_action_rejected(self) -> None:
        with pytest.raises(ValueError):
            Linker("teleport")

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            STRATEGIES[LinkAction.COPY] = STRATEGIES[LinkAction.MOVE]  # type: ignore[index]

    def test_only_copy_works_without_path(self) -> None:
        assert [a for a in ALL_ACTIONS if not STRATEGIES[a].requires_path] == [LinkAction.COPY]


# ====================
# Tests de placement
# ====================

class TestRename:
    """Tests pour le placement vers une destination libre."""

    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_creates_parent_directories(self, action, source: Path, destination: Path) -> None:
        result = Linker(action).rename(PathFile(source), destination)

        assert result == destination
        assert destination.read_bytes() == b"new content"

    def test_copy_keeps_source(self, source: Path, destination: Path) -> None:
        Linker(LinkAction.COPY).rename(PathFile(source), destination)
        assert source.exists()

    def test_move_removes_source(self, source: Path, destination: Path) -> None:
        Linker(LinkAction.MOVE).rename(PathFile(source), destination)
        assert not source.exists()

    def test_symlink_points_to_absolute_source(self, source: Path, destination: Path) -> None:
        Linker(LinkAction.SYMLINK).rename(PathFile(source), destination)

        assert destination.is_symlink()
        assert Path(os.readlink(destination)).is_absolute()
        assert destination.resolve() == source.resolve()

    def test_hardlink_shares_inode(self, source: Path, destination: Path) -> None:
        Linker(LinkAction.HARDLINK).rename(PathFile(source), destination)

        assert os.path.samefile(source, destination)
        assert not destination.is_symlink()

    def test_copy_from_stream(self, destination: Path) -> None:
        """La copie fonctionne sans chemin source."""
        Linker(LinkAction.COPY).rename(StreamFile("Movie.mkv", b"streamed"), destination)
        assert destination.read_bytes() == b"streamed"

    def test_interrupted_copy_leaves_no_file(self, destination: Path) -> None:
        """Une copie interrompue ne laisse ni destination tronquee ni fichier temporaire."""
        with pytest.raises(OSError):
            Linker(LinkAction.COPY).rename(StreamFile("Movie.mkv", _InterruptedReader), destination)

        assert not destination.exists()
        assert list(destination.parent.iterdir()) == []

    def test_rerun_after_interrupted_copy_succeeds(self, destination: Path) -> None:
        """Apres un echec, un nouvel essai n'est pas bloque par une destination existante."""
        linker = Linker(LinkAction.COPY)
        with pytest.raises(OSError):
            linker.rename(StreamFile("Movie.mkv", _InterruptedReader), destination)

        linker.rename(StreamFile("Movie.mkv", b"complete"), destination)

        assert destination.read_bytes() == b"complete"

    @pytest.mark.parametrize("action", PATH_ACTIONS)
    def test_stream_without_path_unavailable(self, action, destination: Path) -> None:
        """move/symlink/hardlink refusent un fichier sans chemin, sans rien creer."""
        with pytest.raises(PathUnavailableError) as exc_info:
            Linker(action).rename(StreamFile("Movie.mkv", b"x"), destination)

        assert exc_info.value.action == action.value
        assert not destination.parent.exists()

    def test_move_across_filesystems(self, source: Path, destination: Path) -> None:
        """EXDEV : copie vers un fichier temporaire, substitution puis suppression."""
        real_replace = os.replace
        calls = []

        def fake_replace(src, dst):
            calls.append((Path(src), Path(dst)))
            if len(calls) == 1:
                raise OSError(errno.EXDEV, "Invalid cross-device link")
            return real_replace(src, dst)

        with patch("mediorg.services.linker.os.replace", side_effect=fake_replace):
            Linker(LinkAction.MOVE).rename(PathFile(source), destination)

        assert destination.read_bytes() == b"new content"
        assert not source.exists()
        assert calls[1][1] == destination
        assert list(destination.parent.iterdir()) == [destination]


class TestExistingDestination:
    """Tests pour une destination deja occupee."""

    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_without_force_nothing_changes(self, action, source: Path, existing: Path) -> None:
        """Sans force : MediaExistsError, contenu et date inchanges."""
        before = existing.stat().st_mtime_ns

        with pytest.raises(MediaExistsError) as exc_info:
            Linker(action).rename(PathFile(source), existing)

        assert exc_info.value.destination == existing
        assert existing.read_bytes() == b"old content"
        assert existing.stat().st_mtime_ns == before
        assert source.exists()

    @pytest.mark.parametrize("action", ALL_ACTIONS)
    def test_force_leaves_only_new_content(self, action, source: Path, existing: Path) -> None:
        """Avec force : la destination porte exactement le nouveau contenu."""
        Linker(action).rename(PathFile(source), existing, force=True)

        assert existing.read_bytes() == b"new content"
        assert [p.name for p in existing.parent.iterdir()] == [existing.name]

    def test_stream_without_path_unavailable_before_force(self, existing: Path) -> None:
        """La precondition de chemin est verifiee avant toute suppression."""
        with pytest.raises(PathUnavailableError):
            Linker(LinkAction.HARDLINK).rename(StreamFile("Movie.mkv", b"x"), existing, force=True)

        assert existing.read_bytes() == b"old content"

    def test_same_file_is_media_exists_even_with_force(self, source: Path) -> None:
        """Une destination qui est deja la source n'est jamais supprimee."""
        with pytest.raises(MediaExistsError):
            Linker(LinkAction.COPY).rename(PathFile(source), source, force=True)

        assert source.read_bytes() == b"new content"

    def test_existing_hardlink_is_same_file(self, source: Path, destination: Path) -> None:
        linker = Linker(LinkAction.HARDLINK)
        linker.rename(PathFile(source), destination)

        with pytest.raises(MediaExistsError):
            linker.rename(PathFile(source), destination, force=True)

    def test_failed_replacement_keeps_old_file(self, existing: Path) -> None:
        """Un echec pendant le remplacement laisse l'ancien fichier intact."""

        def broken_opener():
            raise OSError("read error")

        with pytest.raises(OSError):
            Linker(LinkAction.COPY).rename(StreamFile("Movie.mkv", broken_opener), existing, force=True)

        assert existing.read_bytes() == b"old content"
        assert [p.name for p in existing.parent.iterdir()] == [existing.name]
