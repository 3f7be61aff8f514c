"""Registered computer — a name and the MAC address to wake."""

from datetime import datetime

from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from lanwake.models.base import Base


class Computer(Base):
    __tablename__ = "computers"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    mac: Mapped[str] = mapped_column(String(17), nullable=False)  # AA:BB:CC:DD:EE:FF
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<Computer(id={self.id}, name='{self.name}', mac='{self.mac}')>"
