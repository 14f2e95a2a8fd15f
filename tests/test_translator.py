import requests
from unittest.mock import MagicMock

from conftest import make_response
from translator import parse_translation, translate_to_english


def _session(response):
    session = MagicMock()
    session.get.return_value = response
    return session


def test_translate_spanish_question(settings):
    payload = [[["price of solana", "precio de solana", None, None, 10]], None, "es"]
    session = _session(make_response(payload=payload))

    result = translate_to_english("precio de solana", settings, session=session)

    assert result.translated == "price of solana"
    assert result.detected == "es"
    args, kwargs = session.get.call_args
    assert args[0] == settings.translate_url
    assert kwargs["params"] == {"client": "gtx", "sl": "auto", "tl": "en", "dt": "t", "q": "precio de solana"}
    assert kwargs["timeout"] == 5


def test_multiple_segments_are_joined():
    payload = [[["Hello. ", "Hola. ", None, None], ["What is the price of bitcoin?", "¿Cuál es el precio de bitcoin?", None, None]], None, "es"]
    result = parse_translation(payload, "Hola. ¿Cuál es el precio de bitcoin?")
    assert result.translated == "Hello. What is the price of bitcoin?"


def test_detected_language_falls_back_to_segment_then_auto():
    assert parse_translation([[["hi", "oi", "pt"]]], "oi").detected == "pt"
    assert parse_translation([[["hi", "oi"]]], "oi").detected == "auto"


def test_empty_translation_keeps_original_text():
    result = parse_translation([[], None, "ja"], "ビットコイン")
    assert result.translated == "ビットコイン"
    assert result.detected == "ja"


def test_network_error_returns_original(settings, broken_session):
    result = translate_to_english("prix du bitcoin", settings, session=broken_session)
    assert result.translated == "prix du bitcoin"
    assert result.detected == "unknown"


def test_non_ok_status_returns_original(settings):
    session = _session(make_response(status_code=429, payload=None, text="Too Many Requests"))
    result = translate_to_english("prezzo di ethereum", settings, session=session)
    assert result.translated == "prezzo di ethereum"
    assert result.detected == "unknown"


def test_malformed_payload_returns_original(settings):
    for response in (
        make_response(payload=ValueError("not json")),
        make_response(payload={"error": "nope"}),
        make_response(payload=requests.exceptions.JSONDecodeError("bad", "doc", 0)),
    ):
        result = translate_to_english("cena bnb", settings, session=_session(response))
        assert (result.translated, result.detected) == ("cena bnb", "unknown")
