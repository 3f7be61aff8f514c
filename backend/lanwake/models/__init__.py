"""SQLAlchemy ORM models for LanWake."""

from lanwake.models.base import Base
from lanwake.models.computer import Computer

__all__ = [
    "Base",
    "Computer",
]
