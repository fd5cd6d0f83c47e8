"""
Dynamic Library - Agregation de catalogues films/series et sous-titres.

Ce package interroge plusieurs sources de metadonnees externes (TMDB, TVDB,
addons Stremio) et les expose a travers un modele unifie. Il gere aussi la
recherche et le telechargement de sous-titres (OpenSubtitles) et leur conversion.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (sous-titres, maintenance)
- adapters/ : Couche infrastructure (clients API, fournisseurs de catalogue, CLI)
"""

__version__ = "0.1.0"
