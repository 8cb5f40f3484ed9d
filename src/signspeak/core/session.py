#src/signspeak/core/session.py
# Sesión de captura: agrupa cola de frames, hilo de cámara, detector y hilo de
# procesamiento. stop() deja de pedir frames, libera la cámara y el grafo de
# MediaPipe y descarta el estado del estabilizador.
from queue import Queue

from signspeak import config
from signspeak.core.capture import CaptureThread
from signspeak.core.processing import ProcessingThread
from signspeak.core.stabilizer import Stabilizer
from signspeak.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CaptureSession:
    def __init__(self, event_bus, camera_src=config.CAMERA_INDEX, fps=config.TARGET_FPS,
                 detector_factory=None, capture_factory=CaptureThread):
        self.event_bus = event_bus
        self.camera_src = camera_src
        self.fps = fps
        self.detector_factory = detector_factory
        self.capture_factory = capture_factory

        self.frame_q = None
        self.capture = None
        self.detector = None
        self.processing = None

    @property
    def running(self) -> bool:
        # si la cámara no abrió, el hilo de captura ya terminó
        return (self.processing is not None and self.processing.is_alive()
                and self.capture is not None and self.capture.is_alive())

    def start(self):
        """Inicia capture + processing si no están corriendo. Siempre con estado nuevo."""
        if self.running:
            return
        # restos de una sesión fallida (p. ej. la cámara no abrió)
        self.stop()
        LOGGER.info("Iniciando captura y procesamiento...")
        factory = self.detector_factory
        if factory is None:
            from signspeak.core.detector import DetectorSenias
            factory = DetectorSenias
        self.frame_q = Queue(maxsize=2)
        self.detector = factory()
        self.capture = self.capture_factory(self.event_bus, src=self.camera_src,
                                            target_fps=self.fps, frame_queue=self.frame_q)
        self.processing = ProcessingThread(self.frame_q, self.event_bus, self.detector,
                                           stabilizer=Stabilizer())
        self.capture.start()
        self.processing.start()

    def stop(self, timeout=2.0):
        """Detiene la sesión y libera recursos. Idempotente."""
        if self.capture is None and self.processing is None:
            return
        LOGGER.info("Deteniendo captura y procesamiento...")
        if self.capture is not None:
            self.capture.stop()
            if self.capture.is_alive():
                self.capture.join(timeout)
        if self.processing is not None:
            self.processing.stop()
            if self.processing.is_alive():
                self.processing.join(timeout)
        if self.detector is not None and hasattr(self.detector, "close"):
            self.detector.close()
        self.frame_q = None
        self.capture = None
        self.detector = None
        self.processing = None
        LOGGER.info("Sesión detenida.")
