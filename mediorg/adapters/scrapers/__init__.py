"""Scrapers de metadonnees sans acces reseau."""

from mediorg.adapters.scrapers.filename_scraper import FilenameScraper

__all__ = ["FilenameScraper"]
