#src/signspeak/core/classifier.py
"""Clasificador geométrico de gestos a partir de 21 landmarks.

Función pura: landmarks -> ClassificationResult(gesture, confidence).
Cada gesto es una regla independiente (predicado + confianza fija). Se evalúan
todas en el orden declarado y gana la confianza estrictamente mayor; en caso de
empate se queda la primera. Si la ganadora no supera MATCH_THRESHOLD el
resultado es (unknown, 0.0).

Notas:
- "curled" NO es la negación de "extended": curled solo compara tip con pip,
  extended exige tip < pip < mcp. En poses ambiguas ambos pueden ser falsos.
- Las condiciones de "love" implican las de "you" y "you" tiene más confianza,
  así que con esta tabla "you" gana siempre que "love" se cumple.
"""
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple

from signspeak import config
from signspeak.core.landmarks import (
    FINGER_JOINTS, NUM_LANDMARKS, THUMB_IP, THUMB_MCP, THUMB_TIP, Landmark,
)


class Gesture(str, Enum):
    HELLO = "hello"
    HI = "hi"
    I = "i"
    LOVE = "love"
    YOU = "you"
    UNKNOWN = "unknown"


class ClassificationResult(NamedTuple):
    gesture: Gesture
    confidence: float


UNKNOWN_RESULT = ClassificationResult(Gesture.UNKNOWN, 0.0)


# ---------------- predicados geométricos ----------------

def is_finger_extended(landmarks: Sequence[Landmark], finger: str) -> bool:
    """Dedo estirado: tip por encima de pip y pip por encima de mcp (y menor = más arriba)."""
    tip, pip, mcp = FINGER_JOINTS[finger]
    return landmarks[tip].y < landmarks[pip].y < landmarks[mcp].y


def is_finger_curled(landmarks: Sequence[Landmark], finger: str) -> bool:
    """Dedo doblado: tip por debajo de pip. Ignora el mcp."""
    tip, pip, _ = FINGER_JOINTS[finger]
    return landmarks[tip].y > landmarks[pip].y


def is_thumb_extended(landmarks: Sequence[Landmark], spread: float = config.THUMB_SPREAD) -> bool:
    """El pulgar se abre en horizontal: separación tip-mcp en x y tip por encima de ip."""
    tip = landmarks[THUMB_TIP]
    return abs(tip.x - landmarks[THUMB_MCP].x) > spread and tip.y < landmarks[THUMB_IP].y


# ---------------- reglas ----------------

def _hello(lm):
    return (is_finger_extended(lm, "index") and is_finger_extended(lm, "middle")
            and is_finger_extended(lm, "ring") and is_finger_extended(lm, "pinky")
            and is_thumb_extended(lm))


def _hi(lm):
    # signo de paz: índice y medio arriba
    return (is_finger_extended(lm, "index") and is_finger_extended(lm, "middle")
            and is_finger_curled(lm, "ring") and is_finger_curled(lm, "pinky"))


def _i(lm):
    return (is_finger_curled(lm, "index") and is_finger_curled(lm, "middle")
            and is_finger_curled(lm, "ring") and is_finger_extended(lm, "pinky"))


def _love(lm):
    # forma de L: pulgar + índice
    return (is_thumb_extended(lm) and is_finger_extended(lm, "index")
            and is_finger_curled(lm, "middle") and is_finger_curled(lm, "ring")
            and is_finger_curled(lm, "pinky"))


def _you(lm):
    # señalar con el índice
    return (is_finger_extended(lm, "index") and is_finger_curled(lm, "middle")
            and is_finger_curled(lm, "ring") and is_finger_curled(lm, "pinky"))


class GestureRule(NamedTuple):
    gesture: Gesture
    predicate: Callable[[Sequence[Landmark]], bool]
    confidence: float

    def score(self, landmarks: Sequence[Landmark]) -> float:
        return self.confidence if self.predicate(landmarks) else 0.0


# El orden importa: desempata a favor de la primera regla.
RULES: Tuple[GestureRule, ...] = (
    GestureRule(Gesture.HELLO, _hello, 0.90),
    GestureRule(Gesture.HI, _hi, 0.85),
    GestureRule(Gesture.I, _i, 0.90),
    GestureRule(Gesture.LOVE, _love, 0.85),
    GestureRule(Gesture.YOU, _you, 0.90),
)


def evaluate(landmarks: Sequence[Landmark], rules: Sequence[GestureRule] = RULES) -> List[ClassificationResult]:
    """Puntuación de cada regla, en orden de declaración (0.0 si no se cumple)."""
    return [ClassificationResult(r.gesture, r.score(landmarks)) for r in rules]


def _as_points(landmarks) -> List[Landmark]:
    """Acepta Landmark, objetos con .x/.y (MediaPipe) o tuplas (x, y[, z])."""
    return [p if hasattr(p, "y") else Landmark(*p) for p in landmarks]


def classify(landmarks: Optional[Sequence[Landmark]],
             rules: Sequence[GestureRule] = RULES,
             threshold: float = config.MATCH_THRESHOLD) -> ClassificationResult:
    """
    Clasifica una mano. Nunca lanza excepciones: una entrada vacía, con un
    número de puntos distinto de 21 o con puntos malformados se devuelve
    como (unknown, 0.0).
    """
    if landmarks is None:
        return UNKNOWN_RESULT
    try:
        if len(landmarks) != NUM_LANDMARKS:
            return UNKNOWN_RESULT
        scores = evaluate(_as_points(landmarks), rules)
    except (TypeError, ValueError, AttributeError):
        # puntos malformados (None, tuplas de otro tamaño, ...)
        return UNKNOWN_RESULT

    best = None
    for result in scores:
        if best is None or result.confidence > best.confidence:
            best = result

    if best is not None and best.confidence > threshold:
        return best
    return UNKNOWN_RESULT
