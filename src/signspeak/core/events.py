#src/signspeak/core/events.py
# Bus de eventos sencillo para desacoplar detector -> UI / juego / logger
import threading
from collections import defaultdict

from signspeak.utils.logger import get_logger

LOGGER = get_logger(__name__)

# Nombres de eventos publicados por el pipeline
FRAME_CAPTURED = "frame_captured"
FRAME = "frame"
GESTURE_FRAME = "gesture_frame"
GESTURE_DISPLAY = "gesture_display"
GESTURE_CONFIRMED = "gesture_confirmed"
GAME_UPDATE = "game_update"
PROCESSING_ERROR = "processing_error"
CAMERA_ERROR = "camera_error"


class EventBus:
    """Pub/Sub simple y thread-safe."""
    def __init__(self):
        self._subs = defaultdict(list)
        self._lock = threading.RLock()

    def subscribe(self, event_name, callback):
        with self._lock:
            self._subs[event_name].append(callback)

    def unsubscribe(self, event_name, callback):
        with self._lock:
            if callback in self._subs[event_name]:
                self._subs[event_name].remove(callback)

    def subscribers(self, event_name):
        with self._lock:
            return list(self._subs[event_name])

    def publish(self, event_name, *args, **kwargs):
        for cb in self.subscribers(event_name):
            try:
                cb(*args, **kwargs)
            except Exception:
                # Solo logueamos, no fallamos todo el bus
                LOGGER.exception(f"[EventBus] handler error for {event_name}")
