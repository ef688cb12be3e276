# models.py
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()

STATUS_SCHEDULED = "marcado"


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False, default="")
    date_time = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(String(20), nullable=False, default=STATUS_SCHEDULED, index=True)
    created_at = Column(DateTime, nullable=True, server_default=func.now())

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"<Appointment(id={self.id!r}, title={self.title!r}, "
            f"date_time={self.date_time!r}, status={self.status!r})>"
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "date_time": self.date_time.isoformat() if self.date_time else None,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
