#src/signspeak/core/processing.py
# Toma frames desde una queue, ejecuta detector -> clasificador -> estabilizador
# y publica los resultados en el EventBus.
#
# Un paso por frame: la clasificación es O(1) y el estado del estabilizador
# pertenece solo a este hilo.
import threading
from queue import Empty, Queue

from signspeak import config
from signspeak.core.classifier import classify
from signspeak.core.events import (
    FRAME, GESTURE_CONFIRMED, GESTURE_DISPLAY, GESTURE_FRAME, PROCESSING_ERROR, EventBus,
)
from signspeak.core.stabilizer import Stabilizer
from signspeak.utils.logger import get_logger


class ProcessingThread(threading.Thread):
    """
    Hilo que toma frames desde frame_queue, obtiene landmarks con el detector
    y publica resultados en el EventBus.
    Parámetros:
        - frame_queue: Queue donde se obtienen frames (BGR OpenCV).
        - event_bus: EventBus para publicar eventos.
        - detector: objeto con detect(frame) -> (landmarks | None, annotated).
        - stabilizer: Stabilizer (si None, se crea uno con los valores de config).
        - frame_timeout: segundos de espera sin frames antes de reiniciar el estabilizador.
    """
    def __init__(self, frame_queue: Queue, event_bus: EventBus, detector,
                 stabilizer: Stabilizer = None, logger=None,
                 frame_timeout: float = config.FRAME_TIMEOUT):
        super().__init__(daemon=True)
        self.frame_queue = frame_queue
        self.event_bus = event_bus or EventBus()
        self.detector = detector
        self.stabilizer = stabilizer or Stabilizer(config.STABLE_FRAMES, config.CONFIDENCE_FLOOR)
        self.logger = logger or get_logger("signspeak.processing")
        self.frame_timeout = frame_timeout
        self._stop_event = threading.Event()

    def handle_landmarks(self, landmarks):
        """
        Un paso del pipeline para los landmarks de un frame (None = sin mano).
        Retorna el gesto confirmado en este frame o None.
        """
        if landmarks is None:
            confirmed = self.stabilizer.update(None)
        else:
            result = classify(landmarks)
            self.event_bus.publish(GESTURE_FRAME, result)
            confirmed = self.stabilizer.update(result)

        self.event_bus.publish(GESTURE_DISPLAY, self.stabilizer.display_label)
        if confirmed is not None:
            self.logger.info(f"Gesto confirmado: {confirmed.value}")
            self.event_bus.publish(GESTURE_CONFIRMED, confirmed)
        return confirmed

    def process_frame(self, frame):
        landmarks, annotated = self.detector.detect(frame)
        self.event_bus.publish(FRAME, annotated)
        return self.handle_landmarks(landmarks)

    def run(self):
        self.logger.info("ProcessingThread iniciado.")
        while not self._stop_event.is_set():
            try:
                frame = self.frame_queue.get(timeout=self.frame_timeout)
            except Empty:
                # sin frames: igual que "sin mano", no se conserva la racha
                self.handle_landmarks(None)
                continue

            try:
                self.process_frame(frame)
            except Exception as e:
                # registrar error y publicar evento de error para que UI / monitoring lo vea
                self.logger.exception(f"Error procesando frame: {e}")
                self.stabilizer.reset()
                self.event_bus.publish(PROCESSING_ERROR, str(e))

        self.stabilizer.reset()
        self.logger.info("ProcessingThread detenido.")

    def stop(self):
        self.logger.info("Stop solicitado en ProcessingThread.")
        self._stop_event.set()
