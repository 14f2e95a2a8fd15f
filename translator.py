import logging
from typing import Any, Optional

import requests

from config import Settings
from schemas import TranslationResult

logger = logging.getLogger("Translator")


def _segments(data: Any) -> list:
    if isinstance(data, list) and data and isinstance(data[0], list):
        return [seg for seg in data[0] if isinstance(seg, list) and seg]
    return []


def _detected_language(data: Any, segments: list) -> str:
    # data[2] is the detected source language; older payloads carry it in the first segment
    if isinstance(data, list) and len(data) > 2 and isinstance(data[2], str) and data[2]:
        return data[2]
    if segments and len(segments[0]) > 2 and isinstance(segments[0][2], str) and segments[0][2]:
        return segments[0][2]
    return "auto"


def parse_translation(data: Any, original: str) -> TranslationResult:
    """Extract translated text and detected language from a translate_a/single payload."""
    if not isinstance(data, list):
        raise ValueError(f"Unexpected translation payload: {type(data).__name__}")
    segments = _segments(data)
    translated = "".join(seg[0] for seg in segments if isinstance(seg[0], str))
    return TranslationResult(
        translated=translated or original,
        detected=_detected_language(data, segments),
    )


def translate_to_english(text: str, settings: Optional[Settings] = None, session=None) -> TranslationResult:
    settings = settings or Settings()
    http = session or requests
    params = {
        "client": settings.translate_client,
        "sl": "auto",
        "tl": "en",
        "dt": "t",
        "q": text,
    }
    try:
        r = http.get(settings.translate_url, params=params, timeout=settings.http_timeout_sec)
        if r.status_code != 200:
            raise ValueError(f"Translate failed with status {r.status_code}")
        return parse_translation(r.json(), text)
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Translate error: {e}")
        return TranslationResult(translated=text, detected="unknown")
