# salon/routers/appointments_routes.py

import logging
from datetime import date
from typing import Optional, List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select

from salon.db import get_session
from salon.models import Appointment
from salon.schemas import (
    AppointmentCreate,
    AppointmentPublic,
    AppointmentStatus,
    AppointmentUpdate,
    BookedSlot,
    MessageResponse,
)
from salon.auth import get_current_user
from salon.deps import require_admin, get_or_404
from salon.core import booked_times, daily_time_slots

logger = logging.getLogger(__name__)

# Appointment fields that may be cleared with an explicit null
NULLABLE_FIELDS = ("stylist_id", "comments")

router = APIRouter(
    tags=["appointments"],
)


@router.get("/api/appointments/{on_date}", response_model=List[BookedSlot])
def appointments_for_date(
    on_date: date,
    session: Session = Depends(get_session),
):
    """Booked slots for a day, without customer details."""
    appts = session.exec(
        select(Appointment)
        .where(Appointment.date == on_date)
        .order_by(Appointment.time)
    ).all()
    return [{"date": a.date, "time": a.time, "status": a.status} for a in appts]


@router.post("/api/appointments", response_model=AppointmentPublic, status_code=201)
def create_appointment(
    appt: AppointmentCreate,
    session: Session = Depends(get_session),
):
    # 1) No bookings in the past
    if appt.date < date.today():
        logger.warning("Rejected booking for past date %s", appt.date)
        raise HTTPException(status_code=422, detail="Cannot book an appointment in the past")

    # 2) Time must be one of the daily slots
    if appt.time not in daily_time_slots():
        logger.warning("Rejected booking for unknown slot %s", appt.time)
        raise HTTPException(status_code=422, detail="Time slot not offered")

    # 3) Already booked filter
    if appt.time in booked_times(session, appt.date):
        logger.warning("Rejected booking for taken slot %s %s", appt.date, appt.time)
        raise HTTPException(status_code=409, detail="Time slot already booked")

    db_appt = Appointment(
        **appt.model_dump(),
        status=AppointmentStatus.pending.value,
    )
    session.add(db_appt)
    session.commit()
    session.refresh(db_appt)

    logger.info("Booked appointment %s for %s %s", db_appt.id, db_appt.date, db_appt.time)
    return db_appt


@router.get("/api/admin/appointments", response_model=List[AppointmentPublic])
def list_appointments(
    status: Optional[AppointmentStatus] = None,
    on_date: Optional[date] = Query(default=None, alias="date"),
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    stmt = select(Appointment)
    if status is not None:
        stmt = stmt.where(Appointment.status == status.value)
    if on_date is not None:
        stmt = stmt.where(Appointment.date == on_date)

    stmt = stmt.order_by(Appointment.date, Appointment.time)
    return session.exec(stmt).all()


@router.get("/api/admin/appointments/{appt_id}", response_model=AppointmentPublic)
def get_appointment(
    appt_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    return get_or_404(session, Appointment, appt_id, "Appointment")


@router.put("/api/admin/appointments/{appt_id}", response_model=AppointmentPublic)
def update_appointment(
    appt_id: int,
    appt: AppointmentUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    target = get_or_404(session, Appointment, appt_id, "Appointment")

    changes = {}
    for key, value in appt.model_dump(exclude_unset=True).items():
        if value is None and key not in NULLABLE_FIELDS:
            continue
        if isinstance(value, AppointmentStatus):
            value = value.value
        changes[key] = value

    # Status changes go straight through; no transition rules. The resulting
    # row still has to pass the already booked filter unless it is cancelled.
    new_date = changes.get("date", target.date)
    new_time = changes.get("time", target.time)
    new_status = changes.get("status", target.status)
    if (
        {"date", "time", "status"} & set(changes)
        and new_status != AppointmentStatus.cancelled.value
        and new_time in booked_times(session, new_date, exclude_id=appt_id)
    ):
        logger.warning("Rejected edit of appointment %s onto taken slot %s %s", appt_id, new_date, new_time)
        raise HTTPException(status_code=409, detail="Time slot already booked")

    for key, value in changes.items():
        setattr(target, key, value)

    session.add(target)
    session.commit()
    session.refresh(target)

    logger.info("Appointment %s updated by %r: %s", appt_id, current_user["username"], sorted(changes))
    return target


@router.delete("/api/admin/appointments/{appt_id}", response_model=MessageResponse)
def delete_appointment(
    appt_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    target = get_or_404(session, Appointment, appt_id, "Appointment")

    session.delete(target)
    session.commit()

    logger.info("Appointment %s deleted by %r", appt_id, current_user["username"])
    return {"message": "Appointment deleted successfully"}
