from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

from ..config import settings

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current wall-clock time in the configured zone."""
    return datetime.now(ZoneInfo(settings.timezone))


def fixed_clock(moment: datetime) -> Clock:
    return lambda: moment
