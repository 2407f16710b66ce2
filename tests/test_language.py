import pytest

from sevalink.engine.language_detector import LanguageDetector
from sevalink.engine.normalizer import Normalizer


@pytest.fixture
def detector():
    return LanguageDetector()


@pytest.fixture
def normalizer():
    return Normalizer()


@pytest.mark.parametrize("text, expected", [
    ("I need O positive blood urgently", "en"),
    ("O positive blood needed at the hospital", "en"),
    ("मुझे ओ पॉजिटिव खून चाहिए", "hi"),
    ("నాకు ఓ పాజిటివ్ రక్తం కావాలి", "te"),
    ("mujhe khoon chahiye jaldi", "hi"),
    ("naaku blood kavali", "te"),
    ("Please help, मदद चाहिए", "hi"),
    ("", "en"),
])
def test_detect(detector, text, expected):
    assert detector.detect(text) == expected


def test_devanagari_wins_over_telugu_keywords(detector):
    assert detector.detect("khoon kavali मदद") == "hi"


def test_resolve_prefers_declared_language(detector):
    assert detector.resolve("te", "I need blood") == "te"


def test_resolve_detects_when_declared_is_missing_or_unknown(detector):
    assert detector.resolve(None, "मुझे खून चाहिए") == "hi"
    assert detector.resolve("fr", "I need blood") == "en"


def test_hindi_sentence_is_normalized(normalizer):
    assert normalizer.translate_to_english("मुझे ओ पॉजिटिव खून चाहिए") == "मुझे O positive blood need"


def test_telugu_sentence_is_normalized(normalizer):
    assert normalizer.translate_to_english("నాకు ఓ పాజిటివ్ రక్తం కావాలి") == "నాకు O positive blood need"


def test_ab_group_is_not_split(normalizer):
    assert normalizer.translate_to_english("एबी नेगेटिव खून") == "AB negative blood"


def test_english_text_is_untouched(normalizer):
    text = "Street lights not working near MG Road"
    assert normalizer.translate_to_english(text) == text


@pytest.mark.parametrize("text", [
    "मुझे ओ पॉजिटिव खून चाहिए",
    "దయచేసి ఎబి నెగటివ్ రక్తం అవసరం, ఆసుపత్రి",
    "बुजुर्ग को दवाई और किराना चाहिए",
    "I need blood",
])
def test_normalization_is_idempotent(normalizer, text):
    once = normalizer.translate_to_english(text)
    assert normalizer.translate_to_english(once) == once


def test_compound_term_before_single_term(normalizer):
    assert normalizer.translate_to_english("रक्तदान") == "blood donation"
