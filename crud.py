# crud.py

import logging
from datetime import date as _date, datetime as _dt, time as _time
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agenda import AgendaError, AppointmentDraft, ErrorKind
from models import STATUS_SCHEDULED, Appointment

logger = logging.getLogger(__name__)


def create_appointment(db: Session, draft: AppointmentDraft, status: str = STATUS_SCHEDULED) -> Appointment:
    """
    Persist a draft. Storage errors are rolled back and surface as
    PersistenceFailure carrying the driver's message; nothing is retried here.
    """
    appt = Appointment(title=draft.title, date_time=draft.date_time, status=status)
    try:
        db.add(appt)
        db.commit()
        db.refresh(appt)
    except SQLAlchemyError as e:
        db.rollback()
        raise AgendaError(ErrorKind.PERSISTENCE_FAILURE, str(getattr(e, "orig", None) or e)) from e
    logger.info("stored appointment id=%s at %s", appt.id, draft.date_time.isoformat())
    return appt


def get_appointment_by_id(db: Session, appt_id: int) -> Optional[Appointment]:
    """Fetch a single appointment by primary key."""
    return db.get(Appointment, appt_id)


def list_appointments(
    db: Session,
    start: Optional[_date] = None,
    end: Optional[_date] = None,
    limit: int = 200,
) -> List[Appointment]:
    """Appointments ordered by date-time, optionally within [start, end] (inclusive days)."""
    q = db.query(Appointment)
    if start:
        q = q.filter(Appointment.date_time >= _dt.combine(start, _time.min))
    if end:
        q = q.filter(Appointment.date_time <= _dt.combine(end, _time.max))
    return q.order_by(Appointment.date_time, Appointment.id).limit(limit).all()
