"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, HTTP).

Sous-packages :
- entities/ : Modele de catalogue unifie (CatalogItem, CatalogItemDetails), sous-titres
- ports/ : Interfaces abstraites des clients API et des fournisseurs de catalogue
- value_objects/ : Objets valeur immutables (Lookup, options de configuration)
"""
