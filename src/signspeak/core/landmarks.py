#src/signspeak/core/landmarks.py
"""Puntos de referencia de la mano (landmarks).

MediaPipe Hands entrega 21 puntos por mano con coordenadas normalizadas:
x, y en [0, 1] relativas al ancho/alto del frame y z como profundidad relativa
a la muñeca. Una y menor significa un punto más alto en la imagen.

Este módulo define el tipo de punto que usa el clasificador, los índices fijos
de cada articulación y la conversión desde los objetos de MediaPipe.
"""
from typing import List, NamedTuple, Optional, Sequence

NUM_LANDMARKS = 21


class Landmark(NamedTuple):
    x: float
    y: float
    z: float = 0.0


# Índices fijos de MediaPipe Hands
WRIST = 0
THUMB_CMC, THUMB_MCP, THUMB_IP, THUMB_TIP = 1, 2, 3, 4
INDEX_MCP, INDEX_PIP, INDEX_DIP, INDEX_TIP = 5, 6, 7, 8
MIDDLE_MCP, MIDDLE_PIP, MIDDLE_DIP, MIDDLE_TIP = 9, 10, 11, 12
RING_MCP, RING_PIP, RING_DIP, RING_TIP = 13, 14, 15, 16
PINKY_MCP, PINKY_PIP, PINKY_DIP, PINKY_TIP = 17, 18, 19, 20

# (tip, pip, mcp) de los cuatro dedos largos
FINGER_JOINTS = {
    "index": (INDEX_TIP, INDEX_PIP, INDEX_MCP),
    "middle": (MIDDLE_TIP, MIDDLE_PIP, MIDDLE_MCP),
    "ring": (RING_TIP, RING_PIP, RING_MCP),
    "pinky": (PINKY_TIP, PINKY_PIP, PINKY_MCP),
}


def from_mediapipe(hand_landmarks) -> List[Landmark]:
    """
    Convierte un objeto hand_landmarks de MediaPipe (con .landmark[i].x/.y/.z)
    en una lista de Landmark. No valida la longitud: eso lo decide el clasificador.
    """
    return [Landmark(p.x, p.y, p.z) for p in hand_landmarks.landmark]


def from_tuples(points: Sequence[Sequence[float]]) -> List[Landmark]:
    """Convierte una lista de (x, y) o (x, y, z) en Landmark (útil en pruebas y replays)."""
    return [Landmark(*p) for p in points]


def first_hand(multi_hand_landmarks) -> Optional[List[Landmark]]:
    """Devuelve los landmarks de la primera mano detectada o None si no hay ninguna."""
    if not multi_hand_landmarks:
        return None
    return from_mediapipe(multi_hand_landmarks[0])
