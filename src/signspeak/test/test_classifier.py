import itertools
from types import SimpleNamespace

import pytest

from signspeak.core import classifier
from signspeak.core.classifier import (
    RULES, UNKNOWN_RESULT, ClassificationResult, Gesture, GestureRule, classify, evaluate,
    is_finger_curled, is_finger_extended, is_thumb_extended,
)
from signspeak.core.landmarks import Landmark, from_mediapipe, from_tuples

from conftest import make_hand

MAX_CONFIDENCE = {r.gesture: r.confidence for r in RULES}


@pytest.mark.parametrize("n", [0, 1, 20, 22, 42])
def test_wrong_number_of_landmarks_is_unknown(n):
    assert classify([Landmark(0.5, 0.5, 0.0)] * n) == UNKNOWN_RESULT


def test_none_is_unknown():
    assert classify(None) == UNKNOWN_RESULT


def test_hello(hand):
    assert classify(hand("hello")) == ClassificationResult(Gesture.HELLO, 0.90)


def test_hello_is_translation_invariant(hand):
    assert classify(hand("hello", dx=0.1, dy=-0.05)).gesture is Gesture.HELLO


def test_hello_requires_thumb(hand):
    assert classify(hand("hello", thumb=False)) == UNKNOWN_RESULT


@pytest.mark.parametrize("thumb", [True, False])
def test_hi_ignores_thumb(hand, thumb):
    assert classify(hand("hi", thumb=thumb)) == ClassificationResult(Gesture.HI, 0.85)


def test_i(hand):
    assert classify(hand("i")) == ClassificationResult(Gesture.I, 0.90)


def test_you(hand):
    assert classify(hand("you")) == ClassificationResult(Gesture.YOU, 0.90)


def test_love_pose_is_shadowed_by_you(hand):
    # las condiciones de love implican las de you y you tiene más confianza
    scores = dict(evaluate(hand("love")))
    assert scores[Gesture.LOVE] == 0.85
    assert scores[Gesture.YOU] == 0.90
    assert classify(hand("love")) == ClassificationResult(Gesture.YOU, 0.90)


@pytest.mark.parametrize("name", ["hello", "hi", "i", "you"])
def test_positive_example_wins(hand, name):
    result = classify(hand(name))
    assert result.gesture.value == name
    assert result.confidence > 0.7
    assert all(r.confidence <= result.confidence for r in evaluate(hand(name)))


def test_fist_is_unknown(hand):
    assert classify(hand("fist")) == UNKNOWN_RESULT


def test_confidence_bounds_over_all_poses():
    for poses in itertools.product(["up", "down"], repeat=4):
        for thumb in (True, False):
            lm = make_hand(*poses, thumb=thumb)
            result = classify(lm)
            assert result.confidence >= 0
            if result.gesture is Gesture.UNKNOWN:
                assert result.confidence == 0
            else:
                assert 0 < result.confidence <= MAX_CONFIDENCE[result.gesture]
            for r in evaluate(lm):
                assert r.confidence in (0.0, MAX_CONFIDENCE[r.gesture])


def test_tie_goes_to_first_rule(hand):
    rules = (
        GestureRule(Gesture.HI, lambda lm: True, 0.8),
        GestureRule(Gesture.YOU, lambda lm: True, 0.8),
    )
    assert classify(hand("fist"), rules=rules) == ClassificationResult(Gesture.HI, 0.8)


def test_threshold_is_strict(hand):
    rules = (GestureRule(Gesture.HI, lambda lm: True, 0.7),)
    assert classify(hand("fist"), rules=rules) == UNKNOWN_RESULT


def test_rule_order():
    assert [r.gesture for r in RULES] == [Gesture.HELLO, Gesture.HI, Gesture.I, Gesture.LOVE, Gesture.YOU]


def test_curled_is_not_negation_of_extended(hand):
    lm = hand("fist")
    # tip arriba del pip pero pip debajo del mcp: ni estirado ni doblado
    lm[5] = Landmark(0.45, 0.50)
    lm[6] = Landmark(0.45, 0.55)
    lm[8] = Landmark(0.45, 0.45)
    assert not is_finger_extended(lm, "index")
    assert not is_finger_curled(lm, "index")


def test_thumb_spread(hand):
    assert is_thumb_extended(hand("hello"))
    assert not is_thumb_extended(hand("hello", thumb=False))
    lm = hand("hello")
    lm[4] = Landmark(lm[2].x - 0.03, lm[3].y - 0.05)   # arriba pero sin separación
    assert not is_thumb_extended(lm)
    assert is_thumb_extended(lm, spread=0.01)


def test_accepts_mediapipe_like_objects(hand):
    pts = hand("hi")
    fake = SimpleNamespace(landmark=[SimpleNamespace(x=p.x, y=p.y, z=p.z) for p in pts])
    assert classify(from_mediapipe(fake)).gesture is Gesture.HI
    assert classify(from_tuples([(p.x, p.y) for p in pts])).gesture is Gesture.HI


def test_gesture_values():
    assert {g.value for g in classifier.Gesture} == {"hello", "hi", "i", "love", "you", "unknown"}


def test_plain_tuples_are_accepted(hand):
    pts = [(p.x, p.y, p.z) for p in hand("you")]
    assert classify(pts) == ClassificationResult(Gesture.YOU, 0.90)


def test_malformed_points_never_raise(hand):
    lm = hand("hello")
    lm[8] = None
    assert classify(lm) == UNKNOWN_RESULT
    assert classify([None] * 21) == UNKNOWN_RESULT
    assert classify([(0.5,)] * 21) == UNKNOWN_RESULT
    assert classify([(0.1, 0.2, 0.3, 0.4)] * 21) == UNKNOWN_RESULT
    assert classify(42) == UNKNOWN_RESULT
