# salon/models.py

from typing import Optional
from datetime import datetime, timezone, date as Date

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    password_hash: str
    is_admin: bool = False


class Service(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    price: int
    duration: int  # minutes
    image_url: str
    icon: str


class Stylist(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    role: str
    description: str
    image_url: str


class Appointment(SQLModel, table=True):
    # No foreign keys: service_id/stylist_id are plain references
    id: Optional[int] = Field(default=None, primary_key=True)

    service_id: int
    stylist_id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    phone: str
    date: Date = Field(index=True)
    time: str  # "HH:MM"
    comments: Optional[str] = None
    status: str = "pending"


class AvailableDay(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    date: Date = Field(unique=True)
    is_available: bool = True


class AvailableTimeSlot(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    time: str = Field(unique=True)  # "HH:MM"
    is_available: bool = True


class GalleryItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    image_url: str
    description: str


class ContactMessage(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
