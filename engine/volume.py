from __future__ import annotations

from dataclasses import dataclass

from core.config import AssumptionRecord


@dataclass(frozen=True)
class SessionVolume:
    """Monthly session counts before and after no-shows."""
    gross: float
    net: float


def compute_sessions(assumptions: AssumptionRecord) -> SessionVolume:
    """
    gross = hot/day × hot days + cold/day × cold days; net removes no-shows.

    Nothing is clamped here: a no-show rate above 1 yields negative net
    sessions. Range checks belong to the input layer.
    """
    a = assumptions
    gross = a.hot_daily_attendance * a.hot_days + a.cold_daily_attendance * a.cold_days
    net = gross * (1 - a.no_show_rate)
    return SessionVolume(gross=gross, net=net)
