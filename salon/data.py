# salon/data.py

import logging
from datetime import date, timedelta
from typing import Optional

from sqlmodel import Session, select

from .auth import hash_password
from .config import ADMIN_USERNAME, ADMIN_PASSWORD
from .models import User, Service, Stylist, GalleryItem, AvailableDay, AvailableTimeSlot

logger = logging.getLogger(__name__)

SAMPLE_SERVICES = [
    {
        "name": "Corte de Cabello",
        "description": "Cortes personalizados según tu tipo de rostro, estilo y preferencias.",
        "price": 1200,
        "duration": 45,
        "image_url": "https://images.unsplash.com/photo-1560066984-138dadb4c035?auto=format&fit=crop&w=500&q=80",
        "icon": "scissors",
    },
    {
        "name": "Coloración",
        "description": "Coloración integral, mechas, balayage y técnicas modernas para un look actual.",
        "price": 2500,
        "duration": 90,
        "image_url": "https://images.unsplash.com/photo-1527799820374-dcf8d9d4a388?auto=format&fit=crop&w=500&q=80",
        "icon": "palette",
    },
    {
        "name": "Peinados",
        "description": "Peinados para eventos especiales, bodas, fiestas y cualquier ocasión.",
        "price": 1800,
        "duration": 60,
        "image_url": "https://images.unsplash.com/photo-1522337360788-8b13dee7a37e?auto=format&fit=crop&w=500&q=80",
        "icon": "wind",
    },
    {
        "name": "Tratamientos Capilares",
        "description": "Hidratación, reestructuración y tratamientos especializados para tu cabello.",
        "price": 2000,
        "duration": 60,
        "image_url": "https://images.unsplash.com/photo-1607008829749-c8051e257672?auto=format&fit=crop&w=500&q=80",
        "icon": "droplet",
    },
    {
        "name": "Alisado y Keratina",
        "description": "Técnicas de alisado permanente y tratamientos con keratina para un cabello disciplinado.",
        "price": 3500,
        "duration": 120,
        "image_url": "https://images.unsplash.com/photo-1634302904768-15c1f3860bdc?auto=format&fit=crop&w=500&q=80",
        "icon": "feather",
    },
    {
        "name": "Barbería",
        "description": "Corte de barba, perfilado y tratamientos para el cuidado del rostro masculino.",
        "price": 900,
        "duration": 30,
        "image_url": "https://images.unsplash.com/photo-1503951914875-452162b0f3f1?auto=format&fit=crop&w=500&q=80",
        "icon": "scissors",
    },
]

SAMPLE_STYLISTS = [
    {
        "name": "Carlos",
        "role": "Fundador & Estilista Principal",
        "description": "Especialista en cortes modernos y coloración avanzada con más de 20 años de experiencia.",
        "image_url": "https://images.unsplash.com/photo-1537832816519-689ad163238b?auto=format&fit=crop&w=400&q=80",
    },
    {
        "name": "Laura",
        "role": "Colorista Experta",
        "description": "Especializada en balayage, mechas y las últimas tendencias en coloración internacional.",
        "image_url": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&w=400&q=80",
    },
    {
        "name": "Martín",
        "role": "Barbero Profesional",
        "description": "Experto en cortes masculinos, arreglo de barba y tratamientos faciales para hombres.",
        "image_url": "https://images.unsplash.com/photo-1566492031773-4f4e44671857?auto=format&fit=crop&w=400&q=80",
    },
]

SAMPLE_GALLERY = [
    ("https://images.unsplash.com/photo-1605497788044-5a32c7078486?auto=format&fit=crop&w=300&q=80", "Corte moderno mujer"),
    ("https://images.unsplash.com/photo-1541576980233-97577392c3b1?auto=format&fit=crop&w=300&q=80", "Coloración balayage"),
    ("https://images.unsplash.com/photo-1513531926349-466f15ec8cc7?auto=format&fit=crop&w=300&q=80", "Corte masculino"),
    ("https://images.unsplash.com/photo-1508474722893-c3ccb98db1a6?auto=format&fit=crop&w=300&q=80", "Peinado recogido"),
    ("https://images.unsplash.com/photo-1587297516206-19ae9250bdbd?auto=format&fit=crop&w=300&q=80", "Tratamiento capilar"),
    ("https://images.unsplash.com/photo-1505033575518-a36ea2ef75ae?auto=format&fit=crop&w=300&q=80", "Coloración rubia"),
    ("https://images.unsplash.com/photo-1585314614250-d213876625e1?auto=format&fit=crop&w=300&q=80", "Arreglo de barba"),
    ("https://images.unsplash.com/photo-1602798415391-06d4fc4825c7?auto=format&fit=crop&w=300&q=80", "Peinado para evento"),
]

# 13:00 is lunch
SAMPLE_TIME_SLOTS = {
    "09:00": True,
    "10:00": True,
    "11:00": True,
    "12:00": True,
    "13:00": False,
    "14:00": True,
    "15:00": True,
    "16:00": True,
    "17:00": True,
    "18:00": True,
    "19:00": True,
}

SAMPLE_DAYS_AHEAD = 30


def seed_sample_data(session: Session, today: Optional[date] = None) -> bool:
    """Fill an empty database with the admin account and the salon's sample catalog.

    Returns False without touching anything if users already exist.
    """
    if session.exec(select(User)).first() is not None:
        logger.info("Database already populated, skipping sample data")
        return False

    if today is None:
        today = date.today()

    session.add(User(
        username=ADMIN_USERNAME,
        password_hash=hash_password(ADMIN_PASSWORD),
        is_admin=True,
    ))

    for s in SAMPLE_SERVICES:
        session.add(Service(**s))
    for s in SAMPLE_STYLISTS:
        session.add(Stylist(**s))
    for image_url, description in SAMPLE_GALLERY:
        session.add(GalleryItem(image_url=image_url, description=description))
    for time, is_available in SAMPLE_TIME_SLOTS.items():
        session.add(AvailableTimeSlot(time=time, is_available=is_available))

    # Sundays closed
    for i in range(SAMPLE_DAYS_AHEAD):
        day = today + timedelta(days=i)
        session.add(AvailableDay(date=day, is_available=day.weekday() != 6))

    session.commit()
    logger.info("Sample data loaded (admin user %r)", ADMIN_USERNAME)
    return True
