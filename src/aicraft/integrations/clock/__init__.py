from aicraft.integrations.clock.abc import Clock, format_timestamp
from aicraft.integrations.clock.real import RealClock

__all__ = [
    "Clock",
    "RealClock",
    "format_timestamp",
]
