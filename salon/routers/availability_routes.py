# salon/routers/availability_routes.py

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, select

from salon.db import get_session
from salon.models import AvailableDay, AvailableTimeSlot
from salon.schemas import (
    AvailabilityResponse,
    AvailableDayCreate, AvailableDayUpdate,
    AvailableTimeSlotCreate, AvailableTimeSlotUpdate,
    MessageResponse,
)
from salon.auth import get_current_user
from salon.deps import require_admin, get_or_404, commit_unique
from salon.core import booked_times, daily_time_slots, offerable_times

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["availability"],
)


@router.get("/api/availability", response_model=AvailabilityResponse)
def availability(
    on_date: date = Query(alias="date"),
    session: Session = Depends(get_session),
):
    return {
        "date": on_date,
        "time_slots": daily_time_slots(),
        "booked_times": booked_times(session, on_date),
        "available_times": offerable_times(session, on_date),
    }


# ---- available days ----

@router.get("/api/available-days", response_model=List[AvailableDay])
def list_available_days(session: Session = Depends(get_session)):
    return session.exec(select(AvailableDay).order_by(AvailableDay.date)).all()


@router.post("/api/admin/available-days", response_model=AvailableDay, status_code=201)
def create_available_day(
    day: AvailableDayCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_day = commit_unique(session, AvailableDay(**day.model_dump()), "Date already exists")
    logger.info("Available day %s created (available=%s)", db_day.date, db_day.is_available)
    return db_day


@router.put("/api/admin/available-days/{day_id}", response_model=AvailableDay)
def update_available_day(
    day_id: int,
    day: AvailableDayUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_day = get_or_404(session, AvailableDay, day_id, "Available day")
    for key, value in day.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_day, key, value)

    db_day = commit_unique(session, db_day, "Date already exists")
    logger.info("Available day %s updated (available=%s)", db_day.date, db_day.is_available)
    return db_day


@router.delete("/api/admin/available-days/{day_id}", response_model=MessageResponse)
def delete_available_day(
    day_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_day = get_or_404(session, AvailableDay, day_id, "Available day")
    session.delete(db_day)
    session.commit()
    return {"message": "Available day deleted successfully"}


# ---- available time slots ----

@router.get("/api/available-time-slots", response_model=List[AvailableTimeSlot])
def list_available_time_slots(session: Session = Depends(get_session)):
    return session.exec(select(AvailableTimeSlot).order_by(AvailableTimeSlot.time)).all()


@router.post("/api/admin/available-time-slots", response_model=AvailableTimeSlot, status_code=201)
def create_available_time_slot(
    slot: AvailableTimeSlotCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_slot = commit_unique(session, AvailableTimeSlot(**slot.model_dump()), "Time slot already exists")
    logger.info("Time slot %s created (available=%s)", db_slot.time, db_slot.is_available)
    return db_slot


@router.put("/api/admin/available-time-slots/{slot_id}", response_model=AvailableTimeSlot)
def update_available_time_slot(
    slot_id: int,
    slot: AvailableTimeSlotUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_slot = get_or_404(session, AvailableTimeSlot, slot_id, "Available time slot")
    for key, value in slot.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_slot, key, value)

    db_slot = commit_unique(session, db_slot, "Time slot already exists")
    logger.info("Time slot %s updated (available=%s)", db_slot.time, db_slot.is_available)
    return db_slot


@router.delete("/api/admin/available-time-slots/{slot_id}", response_model=MessageResponse)
def delete_available_time_slot(
    slot_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_slot = get_or_404(session, AvailableTimeSlot, slot_id, "Available time slot")
    session.delete(db_slot)
    session.commit()
    return {"message": "Available time slot deleted successfully"}
