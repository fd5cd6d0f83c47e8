"""
Mock AniList GraphQL responses for testing.
"""

ANILIST_MEDIA_RESPONSE = {
    "data": {
        "Media": {
            "id": 1,
            "idMal": 1,
            "seasonYear": 1998,
            "episodes": 26,
            "format": "TV",
            "title": {"romaji": "Cowboy Bebop", "english": "Cowboy Bebop", "native": "カウボーイビバップ"},
        }
    }
}

ANILIST_NOT_FOUND_RESPONSE = {
    "errors": [{"message": "Not Found.", "status": 404}],
    "data": {"Media": None},
}

ANILIST_PAGE_RESPONSE = {
    "data": {
        "Page": {
            "media": [
                {"id": 20, "idMal": 20, "seasonYear": 2002, "title": {"romaji": "Naruto", "english": "Naruto"}},
                {"id": 1735, "idMal": 1735, "seasonYear": 2007, "title": {"romaji": "Naruto: Shippuuden", "english": "Naruto Shippuden"}},
                {"id": 97938, "idMal": 34566, "seasonYear": 2017, "title": {"romaji": "Boruto: Naruto Next Generations"}},
            ]
        }
    }
}

ANILIST_EMPTY_PAGE_RESPONSE = {"data": {"Page": {"media": []}}}
