# salon/core.py

from datetime import date
from typing import List, Optional

from sqlmodel import Session, select

from .config import BOOKING_TIME_SLOTS
from .models import Appointment
from .schemas import AppointmentStatus


def daily_time_slots() -> List[str]:
    return list(BOOKING_TIME_SLOTS)


def booked_times(session: Session, day: date, exclude_id: Optional[int] = None) -> List[str]:
    """Times already taken on ``day``. Cancelled appointments free their slot.

    ``exclude_id`` leaves one appointment out, for checking an edit against the rest.
    """
    stmt = (
        select(Appointment)
        .where(Appointment.date == day)
        .where(Appointment.status != AppointmentStatus.cancelled.value)
    )
    if exclude_id is not None:
        stmt = stmt.where(Appointment.id != exclude_id)
    appts = session.exec(stmt).all()
    return sorted({a.time for a in appts})


def offerable_times(
    session: Session,
    day: date,
    today: Optional[date] = None,
    time_slots: Optional[List[str]] = None,
) -> List[str]:
    """Daily slots for ``day`` that nobody has booked yet.

    Past dates offer nothing. Order follows the daily slot list.
    """
    if today is None:
        today = date.today()
    if day < today:
        return []
    slots = daily_time_slots() if time_slots is None else time_slots
    taken = set(booked_times(session, day))
    return [t for t in slots if t not in taken]


def is_offerable(session: Session, day: date, time: str, today: Optional[date] = None) -> bool:
    return time in offerable_times(session, day, today=today)
