"""SQLModel table exports."""

from .category import AxisCategory
from .checkin import CheckIn
from .profile import Profile
from .streak import Streak

__all__ = [
    "AxisCategory",
    "CheckIn",
    "Profile",
    "Streak",
]
