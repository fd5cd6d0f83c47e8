"""
Codes de langue : conversion ISO 639-2 -> ISO 639-1 et noms d'affichage.

TVDB utilise des codes a 3 lettres ("fra"), TMDB et OpenSubtitles
des codes a 2 lettres ("fr").
"""

# Codes ISO 639-2 (bibliographiques et terminologiques) vers ISO 639-1
ISO_639_2_TO_1: dict[str, str] = {
    "eng": "en",
    "spa": "es",
    "fra": "fr",
    "fre": "fr",
    "deu": "de",
    "ger": "de",
    "ita": "it",
    "por": "pt",
    "rus": "ru",
    "jpn": "ja",
    "kor": "ko",
    "zho": "zh",
    "chi": "zh",
    "ara": "ar",
    "hin": "hi",
    "nld": "nl",
    "dut": "nl",
    "pol": "pl",
    "tur": "tr",
    "swe": "sv",
    "nor": "no",
    "dan": "da",
    "fin": "fi",
    "ces": "cs",
    "cze": "cs",
    "hun": "hu",
    "ron": "ro",
    "rum": "ro",
    "ell": "el",
    "gre": "el",
    "heb": "he",
    "ind": "id",
    "msa": "ms",
    "may": "ms",
    "ukr": "uk",
    "tha": "th",
    "vie": "vi",
}

LANGUAGE_DISPLAY_NAMES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ar": "Arabic",
    "hi": "Hindi",
    "nl": "Dutch",
    "pl": "Polish",
    "tr": "Turkish",
    "sv": "Swedish",
    "no": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "cs": "Czech",
    "hu": "Hungarian",
    "ro": "Romanian",
    "el": "Greek",
    "he": "Hebrew",
    "id": "Indonesian",
    "ms": "Malay",
    "uk": "Ukrainian",
    "th": "Thai",
    "vi": "Vietnamese",
}


def normalize_language_code(language: str) -> str:
    """
    Convertit un code de langue en ISO 639-1 (2 lettres).

    Les codes inconnus de plus de 2 lettres sont tronques a leurs
    2 premieres lettres. Une valeur vide donne "en".

    Args:
        language: Code de langue (ex: "fra", "FR", "eng")

    Returns:
        Code ISO 639-1 en minuscules

    Example:
        >>> normalize_language_code("fre")
        'fr'
    """
    if not language:
        return "en"
    code = language.strip().lower()
    if code in ISO_639_2_TO_1:
        return ISO_639_2_TO_1[code]
    return code[:2]


def language_display_name(language_code: str) -> str:
    """
    Retourne le nom anglais d'une langue a partir de son code ISO 639-1.

    Les codes inconnus sont retournes en majuscules, une valeur vide
    donne "Unknown".
    """
    if not language_code:
        return "Unknown"
    return LANGUAGE_DISPLAY_NAMES.get(language_code.lower(), language_code.upper())
