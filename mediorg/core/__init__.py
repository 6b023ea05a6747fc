"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur,
exceptions du domaine et l'extracteur de tags de release.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Médias (Movie, Episode, Subtitle)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (Metadata, tags de release)
"""
