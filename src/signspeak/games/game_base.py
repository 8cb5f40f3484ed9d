#src/signspeak/games/game_base.py
# Clase abstracta que define la interfaz de un juego guiado por gestos confirmados
import abc

from signspeak.core.events import GESTURE_CONFIRMED


class GameBase(abc.ABC):
    """
    Interfaz base que los juegos deben seguir.
    start() se suscribe a "gesture_confirmed" y stop() se desuscribe.
    """
    name = "base"

    def __init__(self, event_bus, db=None, config=None, user=None):
        self.event_bus = event_bus
        self.db = db
        self.config = config
        self.user = user
        self.running = False

    def start(self):
        """Inicia el juego (subscribir eventos)."""
        if self.running:
            return
        self.running = True
        if self.event_bus:
            self.event_bus.subscribe(GESTURE_CONFIRMED, self.on_gesture)

    def stop(self):
        """Detener y limpiar recursos (desubscribir eventos)."""
        if not self.running:
            return
        self.running = False
        if self.event_bus:
            self.event_bus.unsubscribe(GESTURE_CONFIRMED, self.on_gesture)

    @abc.abstractmethod
    def on_gesture(self, gesture):
        """Callback que recibe gestos confirmados (se llama desde el hilo de procesamiento)."""
        raise NotImplementedError()

    def user_id(self):
        """Resuelve el id del usuario actual (dict con 'id' o 'username')."""
        if not self.db or not self.user:
            return None
        if isinstance(self.user, dict):
            if self.user.get("id"):
                return self.user["id"]
            username = self.user.get("username")
        else:
            username = str(self.user)
        if not username:
            return None
        u = self.db.get_user(username)
        return u["id"] if u else self.db.create_user(username)
