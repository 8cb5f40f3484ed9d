# src/signspeak/test/conftest.py
# Manos sintéticas para las pruebas (coordenadas normalizadas, y menor = más arriba).
import pytest

from signspeak.core.events import EventBus
from signspeak.core.landmarks import Landmark
from signspeak.persistence.db_manager import DBManager

FINGER_X = {"index": 0.45, "middle": 0.50, "ring": 0.55, "pinky": 0.60}
UP = (0.60, 0.50, 0.45, 0.40)      # mcp, pip, dip, tip
DOWN = (0.60, 0.50, 0.55, 0.58)

THUMB_OUT = [(0.42, 0.80), (0.38, 0.75), (0.32, 0.70), (0.27, 0.65)]
THUMB_IN = [(0.42, 0.80), (0.40, 0.75), (0.43, 0.70), (0.42, 0.72)]


def make_hand(index="up", middle="up", ring="up", pinky="up", thumb=True, dx=0.0, dy=0.0):
    """21 landmarks con cada dedo 'up' (estirado) o 'down' (doblado)."""
    pts = [(0.50, 0.90)]
    pts += THUMB_OUT if thumb else THUMB_IN
    for name, pose in (("index", index), ("middle", middle), ("ring", ring), ("pinky", pinky)):
        ys = UP if pose == "up" else DOWN
        pts += [(FINGER_X[name], y) for y in ys]
    return [Landmark(x + dx, y + dy, 0.0) for x, y in pts]


HANDS = {
    "hello": dict(index="up", middle="up", ring="up", pinky="up", thumb=True),
    "hi": dict(index="up", middle="up", ring="down", pinky="down", thumb=False),
    "i": dict(index="down", middle="down", ring="down", pinky="up", thumb=False),
    "love": dict(index="up", middle="down", ring="down", pinky="down", thumb=True),
    "you": dict(index="up", middle="down", ring="down", pinky="down", thumb=False),
    "fist": dict(index="down", middle="down", ring="down", pinky="down", thumb=False),
}


@pytest.fixture
def hand():
    def _hand(name, **kwargs):
        params = dict(HANDS[name])
        params.update(kwargs)
        return make_hand(**params)
    return _hand


class Recorder:
    """Suscriptor que guarda todo lo publicado en un EventBus."""
    def __init__(self, bus, *names):
        self.events = {n: [] for n in names}
        for n in names:
            bus.subscribe(n, self.events[n].append)

    def __getitem__(self, name):
        return self.events[name]


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def db(tmp_path):
    DBManager._instance = None
    manager = DBManager(str(tmp_path / "test.db"))
    yield manager
    manager.close()
