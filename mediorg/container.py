"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.guessit_parser import GuessitFilenameParser
from .adapters.scrapers.filename_scraper import FilenameScraper
from .config import Settings
from .services.library import LibraryService
from .services.linker import Linker
from .services.media_factory import MediaFactory
from .services.renamer import RenamerService
from .services.scanner import ScannerService
from .services.scraper_aggregator import ScraperAggregator


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        media_list = container.scanner_service().find_media(root)
        report = container.library_service().process_library(media_list)

    Les options de la ligne de commande surchargent la configuration :
        container.config.override(Settings(action="hardlink", strict=True))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    filename_parser = providers.Singleton(GuessitFilenameParser)

    # Scrapers, dans l'ordre de consultation
    filename_scraper = providers.Singleton(
        FilenameScraper,
        filename_parser=filename_parser,
    )
    scrapers = providers.List(filename_scraper)

    # Services sans etat - Singletons
    media_factory = providers.Singleton(
        MediaFactory,
        filename_parser=filename_parser,
    )
    scraper_aggregator = providers.Singleton(
        ScraperAggregator,
        scrapers=scrapers,
    )

    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        media_factory=media_factory,
    )

    # Services dependant de la configuration - Factory pour suivre les overrides
    renamer_service = providers.Factory(
        RenamerService,
        movies_dir=config.provided.movies_dir,
        movies_template=config.provided.movies_template,
        tvshows_dir=config.provided.tvshows_dir,
        tvshows_template=config.provided.tvshows_template,
    )
    linker = providers.Factory(
        Linker,
        action=config.provided.action,
    )
    library_service = providers.Factory(
        LibraryService,
        aggregator=scraper_aggregator,
        renamer=renamer_service,
        linker=linker,
        strict=config.provided.strict,
        strict_existing=config.provided.strict_existing,
        force=config.provided.force,
    )
