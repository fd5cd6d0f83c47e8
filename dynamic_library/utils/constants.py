"""
Constantes partagees par les normaliseurs.
"""

# Genres de films TMDB (noms anglais de l'API), pour les resultats de
# recherche qui ne fournissent que genre_ids
TMDB_MOVIE_GENRES = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

# Tailles d'images TMDB utilisees pour construire les URLs absolues
TMDB_POSTER_SIZE = "w500"
TMDB_BACKDROP_SIZE = "original"
TMDB_PROFILE_SIZE = "w185"

# Nombre maximum de membres du casting conserves dans les details
MAX_CAST_MEMBERS = 20
