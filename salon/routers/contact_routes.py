# salon/routers/contact_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, col, select

from salon.db import get_session
from salon.models import ContactMessage
from salon.schemas import ContactMessageCreate, MessageResponse
from salon.auth import get_current_user
from salon.deps import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["contact"],
)


@router.post("/api/contact", response_model=MessageResponse)
def submit_contact_message(
    msg: ContactMessageCreate,
    session: Session = Depends(get_session),
):
    db_msg = ContactMessage(**msg.model_dump())
    session.add(db_msg)
    session.commit()

    logger.info("Contact message received from %s", msg.email)
    return {"message": "Message sent successfully"}


@router.get("/api/admin/contact-messages", response_model=List[ContactMessage])
def list_contact_messages(
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)
    return session.exec(select(ContactMessage).order_by(col(ContactMessage.created_at).desc())).all()
