#src/signspeak/core/stabilizer.py
"""Estabilizador temporal (debounce) de la salida del clasificador.

Convierte la clasificación ruidosa frame a frame en eventos discretos: un gesto
se confirma cuando aparece en STABLE_FRAMES frames consecutivos con confianza
mayor que CONFIDENCE_FLOOR. Cada racha se reporta una sola vez.

Uso funcional:
    state = StabilizerState()
    state, confirmed = step(state, result)   # result=None -> no hay mano

o con la envoltura con estado `Stabilizer` (una instancia por sesión de cámara).
"""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from signspeak import config
from signspeak.core.classifier import ClassificationResult, Gesture


@dataclass(frozen=True)
class StabilizerState:
    last_label: Gesture = Gesture.UNKNOWN
    count: int = 0
    reported: bool = False

    @property
    def display_label(self) -> Gesture:
        """Gesto a mostrar en la UI: el confirmado mientras su racha continúe."""
        return self.last_label if self.reported else Gesture.UNKNOWN


INITIAL_STATE = StabilizerState()


def step(state: StabilizerState, result: Optional[ClassificationResult],
         required_frames: int = config.STABLE_FRAMES,
         confidence_floor: float = config.CONFIDENCE_FLOOR) -> Tuple[StabilizerState, Optional[Gesture]]:
    """
    Avanza un frame. Devuelve (nuevo_estado, gesto_confirmado | None).

    - result None (sin mano) o confianza <= floor: reinicia, no emite.
    - mismo gesto que el anterior: incrementa la racha.
    - gesto distinto: nueva racha con count = 1.
    - emite solo en el frame en que la racha alcanza required_frames.
    """
    if result is None or result.gesture is Gesture.UNKNOWN or result.confidence <= confidence_floor:
        return INITIAL_STATE, None

    if result.gesture == state.last_label:
        state = replace(state, count=state.count + 1)
    else:
        state = StabilizerState(last_label=result.gesture, count=1, reported=False)

    if state.count >= required_frames and not state.reported:
        return replace(state, reported=True), state.last_label
    return state, None


class Stabilizer:
    """Envoltura con estado para una sesión de captura."""

    def __init__(self, required_frames: int = config.STABLE_FRAMES,
                 confidence_floor: float = config.CONFIDENCE_FLOOR):
        self.required_frames = int(required_frames)
        self.confidence_floor = float(confidence_floor)
        self.state = INITIAL_STATE

    def update(self, result: Optional[ClassificationResult]) -> Optional[Gesture]:
        self.state, confirmed = step(self.state, result, self.required_frames, self.confidence_floor)
        return confirmed

    @property
    def display_label(self) -> Gesture:
        return self.state.display_label

    def reset(self):
        self.state = INITIAL_STATE
