from prbranch.core.time.abc import Time
from prbranch.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
