# tests/test_core.py

from datetime import date, timedelta

from sqlmodel import select

from salon.core import booked_times, daily_time_slots, offerable_times, is_offerable
from salon.models import Appointment

TODAY = date(2030, 5, 10)


def add_appointment(session, day, time, status="pending"):
    session.add(Appointment(
        service_id=1,
        first_name="Ana",
        last_name="Pérez",
        email="ana@example.com",
        phone="555-0100",
        date=day,
        time=time,
        status=status,
    ))
    session.commit()


def test_daily_slots_are_hourly_ten_to_six():
    slots = daily_time_slots()
    assert slots[0] == "10:00"
    assert slots[-1] == "18:00"
    assert len(slots) == 9


def test_empty_day_offers_every_slot(session):
    assert offerable_times(session, TODAY, today=TODAY) == daily_time_slots()


def test_booked_times_are_filtered_out(session):
    add_appointment(session, TODAY, "11:00")
    add_appointment(session, TODAY, "15:00", status="confirmed")

    assert booked_times(session, TODAY) == ["11:00", "15:00"]
    offered = offerable_times(session, TODAY, today=TODAY)
    assert "11:00" not in offered
    assert "15:00" not in offered
    assert offered == [t for t in daily_time_slots() if t not in ("11:00", "15:00")]


def test_other_dates_do_not_affect_availability(session):
    add_appointment(session, TODAY + timedelta(days=1), "11:00")
    assert "11:00" in offerable_times(session, TODAY, today=TODAY)


def test_cancelled_appointment_frees_its_slot(session):
    add_appointment(session, TODAY, "12:00", status="cancelled")
    assert booked_times(session, TODAY) == []
    assert is_offerable(session, TODAY, "12:00", today=TODAY)


def test_completed_appointment_still_blocks(session):
    add_appointment(session, TODAY, "12:00", status="completed")
    assert not is_offerable(session, TODAY, "12:00", today=TODAY)


def test_past_dates_offer_nothing(session):
    assert offerable_times(session, TODAY - timedelta(days=1), today=TODAY) == []


def test_custom_slot_list_keeps_its_order(session):
    add_appointment(session, TODAY, "09:30")
    slots = ["16:00", "09:30", "08:00"]
    assert offerable_times(session, TODAY, today=TODAY, time_slots=slots) == ["16:00", "08:00"]


def test_booked_times_can_leave_one_appointment_out(session):
    add_appointment(session, TODAY, "11:00")
    add_appointment(session, TODAY, "12:00")
    own = session.exec(select(Appointment).where(Appointment.time == "12:00")).one()

    assert booked_times(session, TODAY, exclude_id=own.id) == ["11:00"]
