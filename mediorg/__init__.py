"""
MediOrg - Organisation de médiathèque locale.

Ce package classe les fichiers vidéo d'après leur nom de release,
fusionne ces métadonnées locales avec l'identité résolue par des scrapers,
puis renomme et place les fichiers selon des templates configurables.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, extraction de tags)
- services/ : Couche application (fusion, renommage, orchestration)
- adapters/ : Couche infrastructure (CLI, parsing guessit, système de fichiers, scrapers)
- web/ : API HTTP (FastAPI)
"""

__version__ = "0.1.0"
