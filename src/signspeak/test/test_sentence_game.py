from signspeak import config
from signspeak.core.classifier import Gesture
from signspeak.core.events import GAME_UPDATE, GESTURE_CONFIRMED
from signspeak.games.sentence_game import SentenceGame

from conftest import Recorder


class FakeAudio:
    def __init__(self):
        self.said = []

    def say(self, text, language_code):
        self.said.append((text, language_code))


def test_points_streak_and_bonus(bus):
    game = SentenceGame(bus)
    for _ in range(6):
        game.add_gesture(Gesture.HI)
    state = game.get_state()
    # 5 x 10 y el sexto con multiplicador x2
    assert state["points"] == 5 * config.POINTS_PER_GESTURE + 2 * config.POINTS_PER_GESTURE
    assert state["streak"] == 6
    assert state["total_gestures"] == 6
    assert state["discovered"] == ["hi"]


def test_unknown_is_ignored(bus):
    game = SentenceGame(bus)
    assert not game.add_gesture(Gesture.UNKNOWN)
    assert game.get_state()["total_gestures"] == 0


def test_clear_keeps_points(bus):
    game = SentenceGame(bus)
    game.add_gesture(Gesture.HELLO)
    game.clear()
    state = game.get_state()
    assert state["gestures"] == [] and state["sentence"] == ""
    assert state["streak"] == 0
    assert state["points"] == 10 and state["total_gestures"] == 1


def test_subscribes_only_while_running(bus):
    rec = Recorder(bus, GAME_UPDATE)
    game = SentenceGame(bus, language="es")
    bus.publish(GESTURE_CONFIRMED, Gesture.I)
    assert game.get_state()["gestures"] == []
    game.start()
    bus.publish(GESTURE_CONFIRMED, Gesture.I)
    bus.publish(GESTURE_CONFIRMED, Gesture.LOVE)
    bus.publish(GESTURE_CONFIRMED, Gesture.YOU)
    game.stop()
    bus.publish(GESTURE_CONFIRMED, Gesture.HELLO)
    assert game.sentence() == "Yo te amo"
    assert rec[GAME_UPDATE][-1]["gestures"] == ["i", "love", "you"]


def test_language_and_speak(bus):
    audio = FakeAudio()
    game = SentenceGame(bus, audio=audio)
    assert not game.speak()
    game.add_gesture(Gesture.HELLO)
    game.set_language("fr")
    assert game.sentence() == "Bonjour"
    assert game.speak()
    assert audio.said == [("Bonjour", "fr")]
    game.set_language("klingon")
    assert game.language == "en"


def test_persists_score_and_progress(bus, db):
    game = SentenceGame(bus, db=db, user={"username": "ana"})
    game.start()
    bus.publish(GESTURE_CONFIRMED, Gesture.HELLO)
    bus.publish(GESTURE_CONFIRMED, Gesture.HELLO)
    game.stop()
    uid = db.get_user("ana")["id"]
    assert db.get_progress(uid)["hello"]["successes"] == 2
    scores = db.get_scores(uid)
    assert scores[0]["game"] == "SENTENCE" and scores[0]["score"] == 20
