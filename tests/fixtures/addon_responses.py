"""
Mock Embedarr and AIOStreams responses for testing.
"""

EMBEDARR_URL = "http://embedarr.local:5000"
AIOSTREAMS_URL = "https://aiostreams.example.com/stremio/abc/manifest.json"
AIOSTREAMS_BASE = "https://aiostreams.example.com/stremio/abc"

EMBEDARR_ADD_SUCCESS_RESPONSE = {
    "success": True,
    "message": "Movie added",
    "filesCreated": ["/library/movies/The Matrix (1999)/The Matrix (1999).strm"],
}

EMBEDARR_ADD_FAILURE_RESPONSE = {
    "success": False,
    "error": "Movie already exists",
}

EMBEDARR_MOVIE_URL_RESPONSE = {
    "url": "https://embed.example/movie/tt0133093",
    "id": "tt0133093",
    "type": "movie",
}

EMBEDARR_EPISODE_URL_RESPONSE = {
    "url": "https://embed.example/tv/tt0903747/1/1",
    "id": "tt0903747",
    "type": "tv",
    "season": 1,
    "episode": 1,
}

EMBEDARR_ANIME_URL_RESPONSE = {
    "url": "https://embed.example/anime/1/1/dub",
    "id": 1,
    "type": "anime",
    "episode": 1,
    "audioType": "dub",
}

AIOSTREAMS_RESPONSE = {
    "streams": [
        {
            "name": "[RD+] AIOStreams",
            "title": "The.Matrix.1999.2160p.UHD.BluRay\n💾 58.2 GB",
            "url": "https://debrid.example/dl/abc/matrix.mkv",
            "behaviorHints": {
                "bingeGroup": "aiostreams|2160p",
                "notWebReady": True,
                "filename": "The.Matrix.1999.2160p.mkv",
            },
        },
        {
            "name": "Torrent 1080p",
            "infoHash": "0123456789abcdef0123456789abcdef01234567",
            "fileIdx": 0,
        },
        {"url": "https://cdn.example/stream.m3u8"},
    ]
}
