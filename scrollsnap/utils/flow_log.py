import os
import time

_flow_log_last: dict[str, float] = {}

# Always printed, even with flow tracing switched off.
_ALWAYS_LEVELS = ("WARNING", "ERROR")


def _trace_enabled() -> bool:
    if os.getenv('SCROLLSNAP_ENVIRONMENT') == 'development':
        return True
    try:
        from scrollsnap.utils.settings import settings
        return bool(settings.value("flow_trace_logs", False, type=bool))
    except Exception:
        return False


def log_flow(component: str, message: str, *, level: str = "DEBUG",
             throttle_key: str | None = None, every_s: float | None = None):
    """Timestamped, optionally throttled flow logging for carousel diagnostics."""
    if level not in _ALWAYS_LEVELS and not _trace_enabled():
        return

    now = time.time()
    if throttle_key and every_s is not None:
        last = _flow_log_last.get(throttle_key, 0.0)
        if (now - last) < every_s:
            return
        _flow_log_last[throttle_key] = now
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    print(f"[{ts}][TRACE][{component}][{level}] {message}")
