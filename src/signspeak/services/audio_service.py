#src/signspeak/services/audio_service.py
# Narración con pyttsx3 en un hilo aparte (no bloquea la UI ni el procesamiento).
import threading

import pyttsx3

from signspeak import config
from signspeak.patterns.phrases import get_language
from signspeak.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _normalize(tag) -> str:
    if isinstance(tag, bytes):
        tag = tag.decode("utf-8", errors="ignore")
    return str(tag).lower().replace("_", "-").strip("\x05 ")


def find_voice_id(voices, voice_lang: str):
    """Busca una voz cuyo idioma (o id) coincida con el locale, p. ej. 'es-ES' o 'es'."""
    wanted = voice_lang.lower()
    prefix = wanted.split("-")[0]
    fallback = None
    for voice in voices:
        tags = [_normalize(t) for t in (getattr(voice, "languages", None) or [])]
        tags.append(_normalize(getattr(voice, "id", "")))
        if any(t == wanted or t.endswith(wanted) for t in tags):
            return voice.id
        if fallback is None and any(t == prefix or t.startswith(prefix + "-") for t in tags):
            fallback = voice.id
    return fallback


class AudioService:
    def __init__(self, rate=config.SPEECH_RATE, engine=None):
        self._engine = engine or pyttsx3.init()
        self._engine.setProperty("rate", rate)
        self._lock = threading.Lock()
        self._speaking = threading.Event()

    @property
    def speaking(self) -> bool:
        return self._speaking.is_set()

    def _select_voice(self, language_code):
        lang = get_language(language_code)
        voice_id = find_voice_id(self._engine.getProperty("voices"), lang.voice_lang)
        if voice_id:
            self._engine.setProperty("voice", voice_id)
        else:
            LOGGER.warning(f"No hay voz instalada para {lang.voice_lang}; se usa la voz por defecto.")

    def say(self, text, language_code=config.DEFAULT_LANGUAGE) -> bool:
        """Narra en segundo plano. Si ya hay una narración en curso se descarta el pedido."""
        if not text:
            return False
        # no encolamos: pulsar Speak varias veces no acumula narraciones
        if not self._lock.acquire(blocking=False):
            LOGGER.debug("Narración en curso; se ignora el pedido.")
            return False
        self._speaking.set()

        def _job(t, code):
            try:
                self._select_voice(code)
                self._engine.say(t)
                self._engine.runAndWait()
            except Exception:
                LOGGER.exception("Error en síntesis de voz")
            finally:
                self._speaking.clear()
                self._lock.release()
        threading.Thread(target=_job, args=(text, language_code), daemon=True).start()
        return True
