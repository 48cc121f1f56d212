from PySide6.QtCore import QPointF

from scrollsnap.widgets.gesture_classifier import GestureClassifier, GestureState


def _drag(classifier, start_x, end_x, ticks, **kwargs):
    classifier.begin_drag(QPointF(start_x, 0))
    for _ in range(ticks):
        classifier.tick()
    return classifier.end_drag(QPointF(end_x, 0), **kwargs)


def test_begin_moves_to_dragging_once():
    classifier = GestureClassifier()
    assert classifier.state is GestureState.IDLE
    assert classifier.begin_drag(QPointF(-600, 0)) is True
    assert classifier.state is GestureState.DRAGGING
    assert classifier.begin_drag(QPointF(-650, 0)) is False
    # The second begin must not overwrite the start offset.
    assert classifier.session.start_offset.x() == -600


def test_ticks_count_only_while_dragging():
    classifier = GestureClassifier()
    classifier.tick()
    classifier.begin_drag(QPointF(0, 0))
    classifier.tick()
    classifier.tick()
    assert classifier.session.elapsed_ticks == 2


def test_quick_long_drag_left_is_fast_swipe_forward():
    classifier = GestureClassifier(fast_swipe_threshold=100, fast_swipe_ticks=30)
    result = _drag(classifier, -600, -750, ticks=10)
    assert result["kind"] == "fast_swipe"
    assert result["direction"] == 1
    assert result["elapsed_ticks"] == 10


def test_quick_long_drag_right_is_fast_swipe_back():
    classifier = GestureClassifier(fast_swipe_threshold=100, fast_swipe_ticks=30)
    result = _drag(classifier, -600, -450, ticks=10)
    assert result["kind"] == "fast_swipe"
    assert result["direction"] == -1


def test_short_drag_falls_back_to_snap():
    classifier = GestureClassifier(fast_swipe_threshold=100, fast_swipe_ticks=30)
    result = _drag(classifier, -600, -650, ticks=10)
    assert result["kind"] == "snap"
    assert result["direction"] == 0


def test_slow_drag_falls_back_to_snap():
    classifier = GestureClassifier(fast_swipe_threshold=100, fast_swipe_ticks=30)
    result = _drag(classifier, -600, -750, ticks=31)
    assert result["kind"] == "snap"


def test_tick_target_is_inclusive():
    classifier = GestureClassifier(fast_swipe_threshold=100, fast_swipe_ticks=30)
    result = _drag(classifier, -600, -750, ticks=30)
    assert result["kind"] == "fast_swipe"


def test_threshold_is_exclusive():
    classifier = GestureClassifier(fast_swipe_threshold=100, fast_swipe_ticks=30)
    result = _drag(classifier, -600, -700, ticks=1)
    assert result["kind"] == "snap"


def test_fast_swipe_disabled_always_snaps():
    classifier = GestureClassifier(use_fast_swipe=False)
    result = _drag(classifier, -600, -900, ticks=1)
    assert result["kind"] == "snap"


def test_horizontal_disabled_makes_no_decision():
    classifier = GestureClassifier()
    result = _drag(classifier, -600, -900, ticks=1, horizontal_enabled=False)
    assert result["kind"] == "none"
    assert classifier.state is GestureState.IDLE


def test_end_without_begin_is_harmless():
    classifier = GestureClassifier()
    result = classifier.end_drag(QPointF(0, 0))
    assert result["kind"] == "none"
    assert classifier.session is None


def test_end_destroys_session_and_allows_new_gesture():
    classifier = GestureClassifier()
    _drag(classifier, 0, -200, ticks=3)
    assert classifier.state is GestureState.IDLE
    assert classifier.session is None
    assert classifier.begin_drag(QPointF(-300, 0)) is True
    assert classifier.session.elapsed_ticks == 0
