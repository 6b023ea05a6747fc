"""
Orchestration du traitement par lot de la mediatheque.

Pour chaque media local : scrape -> fusion -> rendu du chemin -> placement.

Politique d'erreur :
- mode strict : la premiere erreur est propagee, le lot s'arrete
- mode tolerant (defaut) : le media est journalise en echec et compte
- MediaExistsError : media ignore (WARNING) ; fatale seulement si strict
  et strict_existing sont tous deux actives
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from mediorg.core.entities.media import Media
from mediorg.core.errors import MediaExistsError, UnsupportedOperationError
from mediorg.services.linker import Linker
from mediorg.services.merger import merge
from mediorg.services.renamer import RenamerService
from mediorg.services.scraper_aggregator import ScraperAggregator


class OutcomeStatus(str, Enum):
    """Issue du traitement d'un media."""

    RENAMED = "renamed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class MediaOutcome:
    """
    Resultat du traitement d'un media.

    Attributs:
        source: Nom du fichier d'origine
        status: Issue du traitement
        destination: Chemin de destination (si calcule)
        error: Message d'erreur (si ignore ou en echec)
    """

    source: str
    status: OutcomeStatus
    destination: Optional[Path] = None
    error: Optional[str] = None


@dataclass
class ProcessReport:
    """Bilan d'un traitement par lot."""

    outcomes: list[MediaOutcome] = field(default_factory=list)

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def renamed(self) -> int:
        return self._count(OutcomeStatus.RENAMED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def total(self) -> int:
        return len(self.outcomes)


class LibraryService:
    """
    Service de renommage par lot.

    Coordonne:
    - L'agregateur de scrapers pour l'identite canonique
    - La fusion local/distant
    - Le renamer pour le chemin de destination
    - Le linker pour le placement sur disque
    """

    def __init__(
        self,
        aggregator: ScraperAggregator,
        renamer: RenamerService,
        linker: Linker,
        strict: bool = False,
        strict_existing: bool = False,
        force: bool = False,
    ) -> None:
        """
        Args:
            aggregator: Agregateur de scrapers
            renamer: Service de calcul des chemins
            linker: Strategie de placement
            strict: Arreter le lot a la premiere erreur
            strict_existing: En mode strict, traiter aussi une destination
                             existante comme fatale
            force: Remplacer les destinations existantes
        """
        self._aggregator = aggregator
        self._renamer = renamer
        self._linker = linker
        self._strict = strict
        self._strict_existing = strict_existing
        self._force = force

    def process_media(self, media: Media) -> Path:
        """
        Traite un seul media : scrape, fusion, rendu puis placement.

        Returns:
            Chemin de destination du media.

        Raises:
            MediorgError: Toute erreur du domaine
            OSError: Echec d'une operation sur le systeme de fichiers
        """
        if media.file is None:
            raise UnsupportedOperationError(f"media has no local file: {media}")
        remote = self._aggregator.scrape(media)
        merged = merge(media, remote)
        destination = self._renamer.render(merged)
        return self._linker.rename(media.file, destination, force=self._force)

    def process_library(self, media_list: Iterable[Media]) -> ProcessReport:
        """
        Traite une liste de medias locaux, dans l'ordre.

        Args:
            media_list: Medias locaux a renommer

        Returns:
            Bilan du lot (renommes, ignores, en echec)

        Raises:
            Exception: En mode strict, premiere erreur rencontree (domaine,
                       disque ou scraper)
        """
        report = ProcessReport()

        for media in media_list:
            source = media.file.name if media.file is not None else str(media)
            try:
                destination = self.process_media(media)
            except MediaExistsError as e:
                if self._strict and self._strict_existing:
                    raise
                logger.warning(f"Renommage ignore: {source} ({e})")
                report.outcomes.append(
                    MediaOutcome(source, OutcomeStatus.SKIPPED, e.destination, str(e))
                )
                continue
            except Exception as e:
                # Un scraper tiers peut lever n'importe quelle exception
                if self._strict:
                    raise
                logger.error(f"Echec du renommage: {source} ({e})")
                report.outcomes.append(
                    MediaOutcome(source, OutcomeStatus.FAILED, error=str(e))
                )
                continue

            logger.info(f"Media renomme: {source} -> {destination}")
            report.outcomes.append(
                MediaOutcome(source, OutcomeStatus.RENAMED, destination)
            )

        logger.info(
            f"Traitement termine: {report.renamed} renomme(s), "
            f"{report.skipped} ignore(s), {report.failed} echec(s)"
        )
        return report
