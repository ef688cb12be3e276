# schemas.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from agenda import Strictness


# -----------------------------
# Request
# -----------------------------
class MessageRequest(BaseModel):
    mensagem: Optional[str] = None
    # 'estrito' / 'tolerante' (or 'strict' / 'lenient'); None -> configured mode
    modo: Optional[Strictness] = None

    @field_validator("modo", mode="before")
    @classmethod
    def _parse_mode(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        if not isinstance(v, str):
            raise ValueError("modo must be a string")
        return Strictness.parse(v)


# -----------------------------
# Responses
# -----------------------------
class AppointmentOut(BaseModel):
    id: int
    title: str
    date_time: datetime
    status: str
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,  # ORM mode
    }


class ConfirmationResponse(BaseModel):
    mensagem: str
    compromisso: Optional[AppointmentOut] = None


class ErrorResponse(BaseModel):
    error: str
    kind: Optional[str] = None
