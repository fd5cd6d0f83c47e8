"""
Conversion des sous-titres a base de cues (SRT, WebVTT).

Fonctions sans etat et sans I/O :
- parse_cues() : texte -> liste de SubtitleEvent triee par debut
- convert() : SRT -> WebVTT
- events_to_json() : evenements -> JSON consommable par un lecteur

Les lignes d'en-tete ou de commentaire precedant la premiere cue (WEBVTT,
NOTE, STYLE, numeros de cue) sont ignorees. Le balisage (<i>, {\\an8}...)
est conserve tel quel dans le texte.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable

from dynamic_library.core.entities.subtitle import SubtitleEvent
from dynamic_library.utils.languages import language_display_name, normalize_language_code

__all__ = [
    "convert",
    "events_to_json",
    "format_timestamp",
    "language_display_name",
    "normalize_language_code",
    "parse_cues",
    "parse_timestamp",
]

# hh:mm:ss,mmm (SRT) ou hh:mm:ss.mmm / mm:ss.mmm (WebVTT)
_TIMESTAMP = r"(?:(\d+):)?(\d{1,2}):(\d{2})[,.](\d{1,3})"
_TIMING_LINE = re.compile(rf"^\s*{_TIMESTAMP}\s*-->\s*{_TIMESTAMP}")
_SINGLE_TIMESTAMP = re.compile(rf"^{_TIMESTAMP}$")
_BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


def _normalize(text: str) -> str:
    """Retire le BOM et unifie les fins de ligne."""
    return text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")


def _to_ms(hours: str | None, minutes: str, seconds: str, fraction: str) -> int:
    # "5" -> 500 ms, "05" -> 50 ms, "005" -> 5 ms
    millis = int(fraction.ljust(3, "0"))
    return ((int(hours or 0) * 60 + int(minutes)) * 60 + int(seconds)) * 1000 + millis


def parse_timestamp(value: str) -> int | None:
    """
    Convertit un horodatage SRT ou WebVTT en millisecondes.

    Example:
        >>> parse_timestamp("00:01:02,500")
        62500
    """
    match = _SINGLE_TIMESTAMP.match(value.strip())
    if match is None:
        return None
    return _to_ms(*match.groups())


def format_timestamp(ms: int) -> str:
    """Formate des millisecondes en horodatage WebVTT (hh:mm:ss.mmm)."""
    ms = max(0, ms)
    hours, rest = divmod(ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def parse_cues(text: str) -> list[SubtitleEvent]:
    """
    Extrait les cues d'un texte SRT ou WebVTT.

    Un bloc sans ligne de timing (en-tete, commentaire) est ignore. Les
    lignes de texte d'une cue sont jointes par "\\n" ; une cue sans texte
    est ignoree.

    Args:
        text: Contenu du fichier de sous-titres

    Returns:
        Evenements tries par instant de debut (ordre d'origine a egalite)
    """
    events: list[SubtitleEvent] = []
    for block in _BLOCK_SEPARATOR.split(_normalize(text).strip()):
        lines = block.split("\n")
        for index, line in enumerate(lines):
            match = _TIMING_LINE.match(line)
            if match is None:
                continue
            groups = match.groups()
            start, end = _to_ms(*groups[:4]), _to_ms(*groups[4:])
            body = "\n".join(part.rstrip() for part in lines[index + 1:]).strip("\n")
            if body:
                events.append(SubtitleEvent(start_ms=start, end_ms=end, text=body))
            break

    events.sort(key=lambda event: event.start_ms)
    return events


def convert(text: str) -> str:
    """
    Convertit un sous-titre SRT en WebVTT.

    Ajoute l'en-tete WEBVTT, remplace la virgule des horodatages par un
    point, retire le BOM et normalise les fins de ligne. Un contenu deja
    au format WebVTT est seulement normalise.

    Args:
        text: Contenu SRT (ou WebVTT)

    Returns:
        Contenu WebVTT
    """
    normalized = _normalize(text)
    if normalized.lstrip().startswith("WEBVTT"):
        return normalized.strip() + "\n"

    cues = [
        f"{format_timestamp(event.start_ms)} --> {format_timestamp(event.end_ms)}\n{event.text}"
        for event in parse_cues(normalized)
    ]
    return "WEBVTT\n\n" + "\n\n".join(cues) + ("\n" if cues else "")


def events_to_json(events: Iterable[SubtitleEvent], indent: int | None = None) -> str:
    """
    Serialise des evenements en JSON pour un lecteur.

    Format : [{"start": ms, "end": ms, "text": "..."}]
    """
    payload = [
        {"start": event.start_ms, "end": event.end_ms, "text": event.text}
        for event in events
    ]
    return json.dumps(payload, indent=indent, ensure_ascii=False)
