#src/signspeak/patterns/phrases.py
# Tablas de idiomas y traducciones por gesto.
# construct_sentence() arma la frase traducida a partir de los gestos confirmados.
from typing import Dict, Iterable, List, NamedTuple

from signspeak.core.classifier import Gesture


class Language(NamedTuple):
    code: str
    name: str
    flag: str
    voice_lang: str


SUPPORTED_LANGUAGES: List[Language] = [
    Language("en", "English", "🇺🇸", "en-US"),
    Language("es", "Spanish", "🇪🇸", "es-ES"),
    Language("fr", "French", "🇫🇷", "fr-FR"),
    Language("de", "German", "🇩🇪", "de-DE"),
    Language("hi", "Hindi", "🇮🇳", "hi-IN"),
    Language("ja", "Japanese", "🇯🇵", "ja-JP"),
    Language("zh", "Chinese", "🇨🇳", "zh-CN"),
    Language("pt", "Portuguese", "🇧🇷", "pt-BR"),
]

DEFAULT_CODE = "en"

TRANSLATIONS: Dict[str, Dict[Gesture, str]] = {
    "en": {Gesture.HELLO: "Hello", Gesture.HI: "Hi", Gesture.I: "I",
           Gesture.LOVE: "love", Gesture.YOU: "you"},
    "es": {Gesture.HELLO: "Hola", Gesture.HI: "Hola", Gesture.I: "Yo",
           Gesture.LOVE: "amo", Gesture.YOU: "te"},
    "fr": {Gesture.HELLO: "Bonjour", Gesture.HI: "Salut", Gesture.I: "Je",
           Gesture.LOVE: "aime", Gesture.YOU: "te"},
    "de": {Gesture.HELLO: "Hallo", Gesture.HI: "Hi", Gesture.I: "Ich",
           Gesture.LOVE: "liebe", Gesture.YOU: "dich"},
    "hi": {Gesture.HELLO: "नमस्ते", Gesture.HI: "नमस्ते", Gesture.I: "मैं",
           Gesture.LOVE: "प्यार करता हूं", Gesture.YOU: "तुमसे"},
    "ja": {Gesture.HELLO: "こんにちは", Gesture.HI: "やあ", Gesture.I: "私は",
           Gesture.LOVE: "愛してる", Gesture.YOU: "あなたを"},
    "zh": {Gesture.HELLO: "你好", Gesture.HI: "嗨", Gesture.I: "我",
           Gesture.LOVE: "爱", Gesture.YOU: "你"},
    "pt": {Gesture.HELLO: "Olá", Gesture.HI: "Oi", Gesture.I: "Eu",
           Gesture.LOVE: "amo", Gesture.YOU: "você"},
}

# Frase fija cuando aparecen I + LOVE + YOU (en cualquier orden)
I_LOVE_YOU = {
    "en": "I love you",
    "es": "Yo te amo",
    "fr": "Je t'aime",
    "de": "Ich liebe dich",
    "hi": "मैं तुमसे प्यार करता हूं",
    "ja": "私はあなたを愛してる",
    "zh": "我爱你",
    "pt": "Eu amo você",
}

GESTURE_EMOJIS = {
    Gesture.HELLO: "👋",
    Gesture.HI: "✌️",
    Gesture.I: "🤙",
    Gesture.LOVE: "❤️",
    Gesture.YOU: "👆",
    Gesture.UNKNOWN: "❓",
}

GESTURE_INSTRUCTIONS = {
    Gesture.HELLO: "Open palm, all fingers extended",
    Gesture.HI: "Peace sign - index & middle fingers up",
    Gesture.I: "Only pinky finger extended",
    Gesture.LOVE: "L shape - thumb & index finger",
    Gesture.YOU: "Pointing - only index finger",
}


def get_language(code: str) -> Language:
    """Idioma por código; si no existe se usa inglés."""
    for lang in SUPPORTED_LANGUAGES:
        if lang.code == code:
            return lang
    return SUPPORTED_LANGUAGES[0]


def gesture_label(gesture: Gesture) -> str:
    return f"{GESTURE_EMOJIS[gesture]} {gesture.value.capitalize()}"


def translate(gesture: Gesture, code: str) -> str:
    table = TRANSLATIONS.get(code, TRANSLATIONS[DEFAULT_CODE])
    return table.get(gesture, "")


def construct_sentence(gestures: Iterable[Gesture], code: str) -> str:
    gestures = [g for g in gestures if g is not Gesture.UNKNOWN]
    if not gestures:
        return ""
    if code not in TRANSLATIONS:
        code = DEFAULT_CODE

    if Gesture.I in gestures and Gesture.LOVE in gestures and Gesture.YOU in gestures:
        return I_LOVE_YOU[code]

    return " ".join(translate(g, code) for g in gestures)
