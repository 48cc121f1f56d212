from dataclasses import dataclass, replace

from PySide6.QtCore import QSettings, Signal

# Defaults for settings that are accessed from multiple places.
DEFAULT_SETTINGS = {
    'scroll_snap_starting_page': 0,  # 0-based, clamped into the page range
    'scroll_snap_page_step': 1.0,  # Page spacing as a multiple of the page width (1-8, 0 = 3)
    'scroll_snap_transition_speed': 7.5,
    'scroll_snap_use_fast_swipe': True,
    'scroll_snap_fast_swipe_threshold': 100,  # Horizontal travel in pixels
    'scroll_snap_fast_swipe_ticks': 30,  # Max ticks a drag may last and still count as a swipe
    'scroll_snap_tick_interval_ms': 16,
    'flow_trace_logs': False,
}

PAGE_STEP_MIN = 1.0
PAGE_STEP_MAX = 8.0
# A zero step would stack every page on top of each other.
PAGE_STEP_ZERO_FALLBACK = 3.0
# Slower than this and a snap would never settle.
TRANSITION_SPEED_MIN = 0.1


class Settings(QSettings):
    # Signal that shows that the setting with the given string was changes
    change = Signal(str, object, name='settingsChanged')

    def __init__(self):
        super().__init__('scrollsnap', 'scrollsnap')

    def setValue(self, key, value):
        super().setValue(key, value)
        self.change.emit(key, value)

# Common shared instance to ensure the Signal is also shared
settings = Settings()


def clamp_page_step(page_step: float) -> float:
    page_step = float(page_step)
    if page_step == 0:
        return PAGE_STEP_ZERO_FALLBACK
    return max(PAGE_STEP_MIN, min(PAGE_STEP_MAX, page_step))


@dataclass(frozen=True)
class ScrollSnapConfig:
    """Tunables for one scroll-snap carousel."""

    starting_page: int = DEFAULT_SETTINGS['scroll_snap_starting_page']
    page_step: float = DEFAULT_SETTINGS['scroll_snap_page_step']
    transition_speed: float = DEFAULT_SETTINGS['scroll_snap_transition_speed']
    use_fast_swipe: bool = DEFAULT_SETTINGS['scroll_snap_use_fast_swipe']
    fast_swipe_threshold: int = DEFAULT_SETTINGS['scroll_snap_fast_swipe_threshold']
    fast_swipe_ticks: int = DEFAULT_SETTINGS['scroll_snap_fast_swipe_ticks']
    tick_interval_ms: int = DEFAULT_SETTINGS['scroll_snap_tick_interval_ms']

    @classmethod
    def from_settings(cls, source=None) -> 'ScrollSnapConfig':
        """Read every scroll-snap key from a QSettings-like object."""
        source = settings if source is None else source

        def _value(key, value_type):
            return source.value(key, defaultValue=DEFAULT_SETTINGS[key], type=value_type)

        return cls(
            starting_page=_value('scroll_snap_starting_page', int),
            page_step=_value('scroll_snap_page_step', float),
            transition_speed=_value('scroll_snap_transition_speed', float),
            use_fast_swipe=_value('scroll_snap_use_fast_swipe', bool),
            fast_swipe_threshold=_value('scroll_snap_fast_swipe_threshold', int),
            fast_swipe_ticks=_value('scroll_snap_fast_swipe_ticks', int),
            tick_interval_ms=_value('scroll_snap_tick_interval_ms', int),
        )

    def validated(self, page_count: int) -> 'ScrollSnapConfig':
        """Return a copy with every value clamped into its usable range."""
        last_page = max(0, int(page_count) - 1)
        return replace(
            self,
            starting_page=max(0, min(last_page, int(self.starting_page))),
            page_step=clamp_page_step(self.page_step),
            transition_speed=max(TRANSITION_SPEED_MIN, float(self.transition_speed)),
            use_fast_swipe=bool(self.use_fast_swipe),
            fast_swipe_threshold=max(0, int(self.fast_swipe_threshold)),
            fast_swipe_ticks=max(0, int(self.fast_swipe_ticks)),
            tick_interval_ms=max(1, int(self.tick_interval_ms)),
        )
