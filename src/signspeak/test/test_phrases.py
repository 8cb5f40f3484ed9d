import pytest

from signspeak.core.classifier import Gesture
from signspeak.patterns.phrases import (
    SUPPORTED_LANGUAGES, TRANSLATIONS, construct_sentence, gesture_label, get_language,
)

G = Gesture


def test_empty_and_unknown_only():
    assert construct_sentence([], "en") == ""
    assert construct_sentence([G.UNKNOWN, G.UNKNOWN], "es") == ""


def test_words_joined_in_order():
    assert construct_sentence([G.HELLO, G.YOU], "en") == "Hello you"
    assert construct_sentence([G.HI, G.UNKNOWN, G.I], "de") == "Hi Ich"


@pytest.mark.parametrize("code,expected", [
    ("en", "I love you"), ("es", "Yo te amo"), ("fr", "Je t'aime"), ("de", "Ich liebe dich"),
    ("zh", "我爱你"), ("pt", "Eu amo você"),
])
def test_i_love_you_special_phrase(code, expected):
    assert construct_sentence([G.YOU, G.HELLO, G.LOVE, G.I], code) == expected


def test_unknown_language_falls_back_to_english():
    assert construct_sentence([G.HELLO], "xx") == "Hello"
    assert get_language("xx").code == "en"


def test_every_language_has_every_gesture():
    assert {l.code for l in SUPPORTED_LANGUAGES} == set(TRANSLATIONS)
    for table in TRANSLATIONS.values():
        assert set(table) == {G.HELLO, G.HI, G.I, G.LOVE, G.YOU}


def test_labels():
    assert gesture_label(G.HI) == "✌️ Hi"
    assert get_language("ja").voice_lang == "ja-JP"
