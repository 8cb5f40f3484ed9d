#src/signspeak/games/sentence_game.py
# Juego "Arma la frase": cada gesto confirmado se agrega a la frase y suma puntos.
# - Thread-safe: on_gesture llega desde el hilo de procesamiento.
# - No toca la UI: publica "game_update" con el estado en el EventBus.
# - Persiste puntos y progreso por seña en DB si hay db y usuario.
import threading
from typing import Dict, List, Optional, Set

from signspeak import config as default_config
from signspeak.core.classifier import Gesture
from signspeak.core.events import GAME_UPDATE
from signspeak.games.game_base import GameBase
from signspeak.patterns import phrases
from signspeak.utils.logger import get_logger

LOGGER = get_logger(__name__)


class SentenceGame(GameBase):
    name = "SENTENCE"

    def __init__(self, event_bus, db=None, config=None, user=None, audio=None,
                 language: Optional[str] = None):
        super().__init__(event_bus, db=db, config=config or default_config, user=user)
        self.audio = audio
        self.language = language or self.config.DEFAULT_LANGUAGE
        self._lock = threading.RLock()

        # estado del juego
        self.gestures: List[Gesture] = []
        self.discovered: Set[Gesture] = set()
        self.points = 0
        self.streak = 0
        self.total_gestures = 0

    # --------------------------
    # Lógica de juego
    # --------------------------
    def add_gesture(self, gesture: Gesture) -> bool:
        """Agrega un gesto confirmado. Retorna False si se ignoró (unknown)."""
        gesture = Gesture(gesture)
        if gesture is Gesture.UNKNOWN:
            return False
        with self._lock:
            bonus = 1 + self.streak // self.config.STREAK_BONUS_EVERY
            self.gestures.append(gesture)
            self.discovered.add(gesture)
            self.total_gestures += 1
            self.streak += 1
            self.points += self.config.POINTS_PER_GESTURE * bonus
            LOGGER.info(f"[SentenceGame] +{gesture.value} puntos={self.points} racha={self.streak}")
        self._record_progress(gesture)
        self._publish_update()
        return True

    def on_gesture(self, gesture):
        if gesture is None or not self.running:
            return
        self.add_gesture(gesture)

    def clear(self):
        """Vacía la frase y reinicia la racha (puntos y totales se conservan)."""
        with self._lock:
            self.gestures = []
            self.streak = 0
        self._publish_update()

    def set_language(self, code: str):
        with self._lock:
            self.language = phrases.get_language(code).code
        self._publish_update()

    def sentence(self) -> str:
        with self._lock:
            return phrases.construct_sentence(self.gestures, self.language)

    def speak(self) -> bool:
        text = self.sentence()
        if not text or self.audio is None:
            return False
        self.audio.say(text, self.language)
        return True

    def get_state(self) -> Dict:
        """Devuelve un dict serializable con el estado actual del juego."""
        with self._lock:
            return {
                "game": self.name,
                "gestures": [g.value for g in self.gestures],
                "sentence": phrases.construct_sentence(self.gestures, self.language),
                "language": self.language,
                "discovered": sorted(g.value for g in self.discovered),
                "points": self.points,
                "streak": self.streak,
                "total_gestures": self.total_gestures,
            }

    # --------------------------
    # Integración con GameBase
    # --------------------------
    def start(self):
        super().start()
        self._publish_update()

    def stop(self):
        was_running = self.running
        super().stop()
        if was_running:
            self._persist_score()

    # --------------------------
    # Persistencia y eventos
    # --------------------------
    def _record_progress(self, gesture: Gesture):
        try:
            uid = self.user_id()
            if uid:
                self.db.record_sign(uid, gesture.value, success=True)
        except Exception as e:
            LOGGER.exception(f"[SentenceGame] Error guardando progreso: {e}")

    def _persist_score(self):
        try:
            uid = self.user_id()
            if not uid:
                LOGGER.debug("[SentenceGame] DB o user no disponibles; no se persiste resultado.")
                return
            self.db.save_score(uid, self.name, self.points,
                               details=f"gestures={self.total_gestures}")
            LOGGER.info(f"[SentenceGame] Resultado persistido. user_id={uid}, puntos={self.points}")
        except Exception as e:
            LOGGER.exception(f"[SentenceGame] Error persistiendo resultado: {e}")

    def _publish_update(self):
        if self.event_bus:
            self.event_bus.publish(GAME_UPDATE, self.get_state())
