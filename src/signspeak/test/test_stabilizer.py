from signspeak.core.classifier import UNKNOWN_RESULT, ClassificationResult, Gesture
from signspeak.core.stabilizer import INITIAL_STATE, Stabilizer, StabilizerState, step

HI = ClassificationResult(Gesture.HI, 0.85)
LOVE = ClassificationResult(Gesture.LOVE, 0.85)
I = ClassificationResult(Gesture.I, 0.9)
YOU = ClassificationResult(Gesture.YOU, 0.9)


def feed(stabilizer, results):
    return [stabilizer.update(r) for r in results]


def test_interrupted_run_forfeits_progress():
    out = feed(Stabilizer(), [HI] * 4 + [UNKNOWN_RESULT] + [HI] * 5)
    assert [e for e in out if e] == [Gesture.HI]
    assert out[-1] is Gesture.HI
    assert all(e is None for e in out[:-1])


def test_emits_once_per_run():
    out = feed(Stabilizer(), [LOVE] * 6)
    assert out[4] is Gesture.LOVE
    assert out[5] is None
    assert [e for e in out if e] == [Gesture.LOVE]


def test_alternating_labels_never_emit():
    s = Stabilizer()
    assert all(e is None for e in feed(s, [I, YOU] * 50))
    assert s.state.count == 1


def test_no_hand_resets_and_replay_is_identical():
    s = Stabilizer()
    first = feed(s, [HI] * 5)
    assert s.update(None) is None
    assert s.state == INITIAL_STATE
    assert feed(s, [HI] * 5) == first


def test_low_confidence_resets():
    s = Stabilizer()
    feed(s, [HI] * 4)
    assert s.update(ClassificationResult(Gesture.HI, 0.7)) is None
    assert s.state == INITIAL_STATE
    assert feed(s, [HI] * 4) == [None] * 4


def test_label_change_starts_new_run():
    state, _ = step(INITIAL_STATE, HI)
    state, _ = step(state, HI)
    state, emitted = step(state, YOU)
    assert emitted is None
    assert state == StabilizerState(Gesture.YOU, 1, False)


def test_step_is_pure():
    state = StabilizerState(Gesture.HI, 4, False)
    new_state, emitted = step(state, HI)
    assert emitted is Gesture.HI
    assert state == StabilizerState(Gesture.HI, 4, False)
    assert new_state == StabilizerState(Gesture.HI, 5, True)


def test_display_label_follows_confirmed_run():
    s = Stabilizer()
    feed(s, [HI] * 4)
    assert s.display_label is Gesture.UNKNOWN
    s.update(HI)
    assert s.display_label is Gesture.HI
    feed(s, [HI] * 10)
    assert s.display_label is Gesture.HI
    s.update(None)
    assert s.display_label is Gesture.UNKNOWN


def test_custom_window():
    s = Stabilizer(required_frames=2)
    assert feed(s, [YOU, YOU, YOU]) == [None, Gesture.YOU, None]
