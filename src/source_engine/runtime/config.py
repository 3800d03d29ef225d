"""Engine defaults read from ``SOURCE_ENGINE_*`` environment variables."""

from __future__ import annotations

from dataclasses import dataclass

from .telemetry import env, env_flag

DEFAULT_RESYNC_WINDOW = 20


@dataclass(frozen=True, slots=True)
class EngineSettings:
    resync_window: int = DEFAULT_RESYNC_WINDOW
    report_mismatches: bool = True

    def __post_init__(self) -> None:
        if self.resync_window <= 0:
            raise ValueError("resync_window must be positive")


def _env_int(name: str, fallback: int) -> int:
    value = env(name)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def load_settings() -> EngineSettings:
    return EngineSettings(
        resync_window=_env_int("RESYNC_WINDOW", DEFAULT_RESYNC_WINDOW),
        report_mismatches=env_flag("REPORT_MISMATCHES", True),
    )


__all__ = ["DEFAULT_RESYNC_WINDOW", "EngineSettings", "load_settings"]
