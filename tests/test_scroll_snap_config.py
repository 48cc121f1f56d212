from scrollsnap.utils.settings import (DEFAULT_SETTINGS, TRANSITION_SPEED_MIN, ScrollSnapConfig,
                                       clamp_page_step)


class FakeSettings:
    def __init__(self, values=None):
        self._values = values or {}
        self.requested = []

    def value(self, key, defaultValue=None, type=None):
        self.requested.append((key, type))
        raw = self._values.get(key, defaultValue)
        return type(raw) if type is not None else raw


def test_defaults_match_settings_table():
    config = ScrollSnapConfig()
    assert config.starting_page == DEFAULT_SETTINGS['scroll_snap_starting_page']
    assert config.transition_speed == 7.5
    assert config.use_fast_swipe is True
    assert config.fast_swipe_threshold == 100
    assert config.fast_swipe_ticks == 30


def test_from_settings_reads_typed_values():
    source = FakeSettings({
        'scroll_snap_starting_page': '3',
        'scroll_snap_page_step': '2',
        'scroll_snap_fast_swipe_threshold': 150,
    })
    config = ScrollSnapConfig.from_settings(source)
    assert config.starting_page == 3
    assert config.page_step == 2.0
    assert config.fast_swipe_threshold == 150
    assert config.fast_swipe_ticks == 30
    assert ('scroll_snap_use_fast_swipe', bool) in source.requested


def test_validated_clamps_starting_page():
    assert ScrollSnapConfig(starting_page=7).validated(5).starting_page == 4
    assert ScrollSnapConfig(starting_page=-2).validated(5).starting_page == 0
    assert ScrollSnapConfig(starting_page=3).validated(0).starting_page == 0


def test_validated_clamps_page_step():
    assert ScrollSnapConfig(page_step=0).validated(3).page_step == 3.0
    assert ScrollSnapConfig(page_step=0.5).validated(3).page_step == 1.0
    assert ScrollSnapConfig(page_step=12).validated(3).page_step == 8.0
    assert ScrollSnapConfig(page_step=2.5).validated(3).page_step == 2.5


def test_validated_keeps_original_untouched():
    config = ScrollSnapConfig(starting_page=9, fast_swipe_threshold=-5)
    validated = config.validated(2)
    assert config.starting_page == 9
    assert validated.starting_page == 1
    assert validated.fast_swipe_threshold == 0


def test_clamp_page_step_zero_fallback():
    assert clamp_page_step(0) == 3.0
    assert clamp_page_step(8) == 8.0


def test_validated_keeps_transition_speed_positive():
    assert ScrollSnapConfig(transition_speed=0).validated(3).transition_speed == TRANSITION_SPEED_MIN
    assert ScrollSnapConfig(transition_speed=-4).validated(3).transition_speed == TRANSITION_SPEED_MIN
    assert ScrollSnapConfig(transition_speed=12).validated(3).transition_speed == 12.0
