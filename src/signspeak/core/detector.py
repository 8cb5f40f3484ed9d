# src/signspeak/core/detector.py
# Wrapper alrededor de MediaPipe Hands.
# API: detect(frame_bgr) -> (landmarks | None, annotated_frame)
# Solo se considera la primera mano (max_num_hands=1).
import cv2
import mediapipe as mp

from signspeak import config
from signspeak.core.landmarks import first_hand
from signspeak.utils.logger import get_logger

LOGGER = get_logger(__name__)


class DetectorSenias:
    """
    Detector de landmarks de mano. Si MediaPipe falla en un frame se devuelve
    None (equivalente a "no hay mano") para no romper el hilo de procesamiento.
    """
    def __init__(self, max_num_hands=config.HANDS_MAX_NUM,
                 model_complexity=config.HANDS_MODEL_COMPLEXITY,
                 min_detection_confidence=config.HANDS_MIN_DETECTION_CONFIDENCE,
                 min_tracking_confidence=config.HANDS_MIN_TRACKING_CONFIDENCE,
                 draw=True):
        self.mp_hands = mp.solutions.hands
        self.mp_drawing = mp.solutions.drawing_utils
        self.hands = self.mp_hands.Hands(static_image_mode=False,
                                         max_num_hands=max_num_hands,
                                         model_complexity=model_complexity,
                                         min_detection_confidence=min_detection_confidence,
                                         min_tracking_confidence=min_tracking_confidence)
        self.draw = draw

    def detect(self, frame):
        """Procesa un frame BGR. Retorna (lista de 21 Landmark | None, frame anotado)."""
        try:
            rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            resultado = self.hands.process(rgb)
        except Exception as e:
            LOGGER.warning(f"[DetectorSenias] fallo procesando frame: {e}")
            return None, frame

        if not resultado.multi_hand_landmarks:
            return None, frame

        hand = resultado.multi_hand_landmarks[0]
        if self.draw:
            self.mp_drawing.draw_landmarks(frame, hand, self.mp_hands.HAND_CONNECTIONS)
        return first_hand(resultado.multi_hand_landmarks), frame

    def close(self):
        try:
            self.hands.close()
        except Exception as e:
            LOGGER.debug(f"[DetectorSenias] close: {e}")
