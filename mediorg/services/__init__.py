"""
Application services layer (use cases).

Services orchestrate the domain logic: scanning a library, resolving
identities through scrapers, merging local and remote metadata, rendering
destination paths and placing files on disk.

Services depend on ports (interfaces) from core/, never on concrete
scraper implementations from adapters/.
"""
