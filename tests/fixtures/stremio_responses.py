"""
Mock Stremio addon responses (catalog and meta resources) for testing.

Cast, director and genres are declared as "string or array of strings" by
addons: both shapes are represented here.
"""

ADDON_URL = "https://addon.example.com/config-abc/manifest.json"
ADDON_BASE = "https://addon.example.com/config-abc"

# GET /catalog/movie/search/search=matrix.json
STREMIO_MOVIE_CATALOG_RESPONSE = {
    "metas": [
        {
            "id": "tt0133093",
            "type": "movie",
            "name": "The Matrix",
            "poster": "https://images.metahub.space/poster/medium/tt0133093/img",
            "background": "https://images.metahub.space/background/medium/tt0133093/img",
            "description": "A computer hacker learns about the true nature of reality.",
            "releaseInfo": "1999",
            "imdbRating": "8.7",
            "genres": ["Action", "Sci-Fi"],
        },
        {
            "id": "kitsu:1234",
            "type": "movie",
            "name": "Matrix Anime",
            "releaseInfo": "2003",
            "imdbRating": "0",
            "genres": "Animation",
        },
    ]
}

# GET /catalog/series/search/search=breaking%20bad.json
STREMIO_SERIES_CATALOG_RESPONSE = {
    "metas": [
        {
            "id": "tt0903747",
            "type": "series",
            "name": "Breaking Bad",
            "poster": "https://images.metahub.space/poster/medium/tt0903747/img",
            "releaseInfo": "2008-2013",
            "imdbRating": 9.5,
            "genres": ["Crime", "Drama"],
        }
    ]
}

STREMIO_EMPTY_CATALOG_RESPONSE = {"metas": []}

# GET /meta/movie/tt0133093.json
STREMIO_MOVIE_META_RESPONSE = {
    "meta": {
        "id": "tt0133093",
        "imdb_id": "tt0133093",
        "type": "movie",
        "name": "The Matrix",
        "poster": "https://images.metahub.space/poster/medium/tt0133093/img",
        "background": "https://images.metahub.space/background/medium/tt0133093/img",
        "description": "A computer hacker learns about the true nature of reality.",
        "releaseInfo": "1999",
        "released": "1999-03-31T00:00:00.000Z",
        "imdbRating": "8.7",
        "runtime": "2h 16min",
        "genres": ["Action", "Sci-Fi"],
        "cast": ["Keanu Reeves", "Laurence Fishburne", "Carrie-Anne Moss"],
        "director": "Lana Wachowski",
        "writer": ["Lilly Wachowski", "Lana Wachowski"],
        "country": "United States",
    }
}

# GET /meta/series/tt0903747.json
STREMIO_SERIES_META_RESPONSE = {
    "meta": {
        "id": "tt0903747",
        "type": "series",
        "name": "Breaking Bad",
        "description": "A high school chemistry teacher turned meth producer.",
        "releaseInfo": "2008–2013",
        "imdbRating": "9.5",
        "runtime": "49 min",
        "status": "Ended",
        "genres": "Drama",
        "cast": "Bryan Cranston",
        "director": None,
        "videos": [
            {"id": "tt0903747:2:1", "title": "Seven Thirty-Seven", "season": 2, "episode": 1, "released": "2009-03-08T00:00:00.000Z"},
            {"id": "tt0903747:1:2", "name": "Cat's in the Bag...", "season": 1, "episode": 2, "description": "Walt and Jesse attempt to tie up loose ends."},
            {"id": "tt0903747:1:1", "title": "Pilot", "season": 1, "episode": 1, "overview": "Diagnosed with terminal lung cancer...", "thumbnail": "https://episodes.metahub.space/tt0903747/1/1/w780.jpg"},
            {"id": "tt0903747:1:3", "title": "", "season": 1, "episode": 3},
        ],
    }
}

STREMIO_EMPTY_META_RESPONSE = {"meta": None}
