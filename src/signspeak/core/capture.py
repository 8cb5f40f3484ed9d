# src/signspeak/core/capture.py
# Captura frames de la cámara en un hilo y los pone en una queue (thread-safe)
import sys
import threading
import time
from queue import Empty, Full, Queue

import cv2

from signspeak import config
from signspeak.core.events import CAMERA_ERROR, FRAME_CAPTURED
from signspeak.utils.logger import get_logger

LOGGER = get_logger(__name__)


def put_latest(frame_queue: Queue, frame):
    """Encola sin bloquear; si la cola está llena descarta el frame más antiguo."""
    try:
        frame_queue.put(frame, block=False)
    except Full:
        try:
            frame_queue.get_nowait()
        except Empty:
            pass
        try:
            frame_queue.put(frame, block=False)
        except Full:
            LOGGER.debug("[CaptureThread] cola llena, frame descartado.")


class CaptureThread(threading.Thread):
    """
    Lector de cámara en un hilo. Publica frames por event_bus y también los pone en frame_queue.
    """
    def __init__(self, event_bus, src=config.CAMERA_INDEX, target_fps=config.TARGET_FPS,
                 frame_queue: Queue = None, mirror=True):
        super().__init__(daemon=True)
        self.src = src
        self.cap = None
        self.running = False
        self.event_bus = event_bus
        self.target_fps = target_fps
        self.frame_queue = frame_queue or Queue(maxsize=2)
        self.mirror = mirror
        self._stop_event = threading.Event()

    def _open(self):
        backend = cv2.CAP_DSHOW if sys.platform.startswith("win") else cv2.CAP_ANY
        cap = cv2.VideoCapture(self.src, backend)
        cap.set(cv2.CAP_PROP_FRAME_WIDTH, config.FRAME_WIDTH)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, config.FRAME_HEIGHT)
        return cap

    def run(self):
        self.cap = self._open()
        if not self.cap.isOpened():
            LOGGER.error(f"[CaptureThread] No se pudo abrir la cámara {self.src}")
            self.event_bus.publish(CAMERA_ERROR, f"No se pudo abrir la cámara {self.src}")
            self.cap.release()
            return
        self.running = True
        LOGGER.info("[CaptureThread] Cámara abierta.")
        interval = 1.0 / max(1, self.target_fps)
        while not self._stop_event.is_set():
            t0 = time.time()
            ret, frame = self.cap.read()
            if not ret:
                time.sleep(0.05)
                continue
            if self.mirror:
                frame = cv2.flip(frame, 1)
            put_latest(self.frame_queue, frame)
            self.event_bus.publish(FRAME_CAPTURED, frame)
            sleep = interval - (time.time() - t0)
            if sleep > 0:
                time.sleep(sleep)
        # liberamos la cámara desde el mismo hilo que la usa
        self.cap.release()
        self.running = False
        LOGGER.info("[CaptureThread] Cámara liberada.")

    def stop(self):
        self._stop_event.set()
