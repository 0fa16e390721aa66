# salon/schemas.py

from pydantic import BaseModel, EmailStr, Field
from enum import Enum
from datetime import date as Date
from typing import List, Optional

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"  # HH:MM, 24h


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"
    completed = "completed"


class UserPublic(BaseModel):
    id: int
    username: str
    is_admin: bool


class UserCreate(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=8, max_length=72)


class ServiceCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str
    price: int = Field(ge=0)
    duration: int = Field(gt=0, description="Duration in minutes")
    image_url: str
    icon: str


class ServiceUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, gt=0)
    image_url: Optional[str] = None
    icon: Optional[str] = None


class StylistCreate(BaseModel):
    name: str = Field(min_length=1)
    role: str
    description: str
    image_url: str


class StylistUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    role: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None


class GalleryItemCreate(BaseModel):
    image_url: str
    description: str


class GalleryItemUpdate(BaseModel):
    image_url: Optional[str] = None
    description: Optional[str] = None


class AppointmentCreate(BaseModel):
    service_id: int
    stylist_id: Optional[int] = None
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=8)
    date: Date
    time: str = Field(pattern=TIME_PATTERN)
    comments: Optional[str] = None


class AppointmentUpdate(BaseModel):
    service_id: Optional[int] = None
    stylist_id: Optional[int] = None
    first_name: Optional[str] = Field(default=None, min_length=2)
    last_name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=8)
    date: Optional[Date] = None
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    comments: Optional[str] = None
    status: Optional[AppointmentStatus] = None


class AppointmentPublic(BaseModel):
    id: int
    service_id: int
    stylist_id: Optional[int]
    first_name: str
    last_name: str
    email: str
    phone: str
    date: Date
    time: str
    comments: Optional[str]
    status: AppointmentStatus


class BookedSlot(BaseModel):
    date: Date
    time: str
    status: AppointmentStatus


class AvailabilityResponse(BaseModel):
    date: Date
    time_slots: List[str]
    booked_times: List[str]
    available_times: List[str]


class AvailableDayCreate(BaseModel):
    date: Date
    is_available: bool = True


class AvailableDayUpdate(BaseModel):
    date: Optional[Date] = None
    is_available: Optional[bool] = None


class AvailableTimeSlotCreate(BaseModel):
    time: str = Field(pattern=TIME_PATTERN)
    is_available: bool = True


class AvailableTimeSlotUpdate(BaseModel):
    time: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    is_available: Optional[bool] = None


class ContactMessageCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)
