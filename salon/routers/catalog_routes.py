# salon/routers/catalog_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from salon.db import get_session
from salon.models import Service, Stylist, GalleryItem
from salon.schemas import (
    ServiceCreate, ServiceUpdate,
    StylistCreate, StylistUpdate,
    GalleryItemCreate, GalleryItemUpdate,
    MessageResponse,
)
from salon.auth import get_current_user
from salon.deps import require_admin, get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["catalog"],
)


def apply_changes(target, changes):
    # Catalog columns are all required, so a null in the body means "leave as is"
    for key, value in changes.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(target, key, value)


# ---- services ----

@router.get("/api/services", response_model=List[Service])
def list_services(session: Session = Depends(get_session)):
    return session.exec(select(Service).order_by(Service.id)).all()


@router.get("/api/services/{service_id}", response_model=Service)
def get_service(service_id: int, session: Session = Depends(get_session)):
    return get_or_404(session, Service, service_id, "Service")


@router.post("/api/admin/services", response_model=Service, status_code=201)
def create_service(
    service: ServiceCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_service = Service(**service.model_dump())
    session.add(db_service)
    session.commit()
    session.refresh(db_service)

    logger.info("Service %s created by %r", db_service.id, current_user["username"])
    return db_service


@router.put("/api/admin/services/{service_id}", response_model=Service)
def update_service(
    service_id: int,
    service: ServiceUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_service = get_or_404(session, Service, service_id, "Service")
    apply_changes(db_service, service)
    session.add(db_service)
    session.commit()
    session.refresh(db_service)

    logger.info("Service %s updated by %r", service_id, current_user["username"])
    return db_service


@router.delete("/api/admin/services/{service_id}", response_model=MessageResponse)
def delete_service(
    service_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    # Appointments keep their service_id; nothing cascades
    db_service = get_or_404(session, Service, service_id, "Service")
    session.delete(db_service)
    session.commit()

    logger.info("Service %s deleted by %r", service_id, current_user["username"])
    return {"message": "Service deleted successfully"}


# ---- stylists ----

@router.get("/api/stylists", response_model=List[Stylist])
def list_stylists(session: Session = Depends(get_session)):
    return session.exec(select(Stylist).order_by(Stylist.id)).all()


@router.get("/api/stylists/{stylist_id}", response_model=Stylist)
def get_stylist(stylist_id: int, session: Session = Depends(get_session)):
    return get_or_404(session, Stylist, stylist_id, "Stylist")


@router.post("/api/admin/stylists", response_model=Stylist, status_code=201)
def create_stylist(
    stylist: StylistCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_stylist = Stylist(**stylist.model_dump())
    session.add(db_stylist)
    session.commit()
    session.refresh(db_stylist)

    logger.info("Stylist %s created by %r", db_stylist.id, current_user["username"])
    return db_stylist


@router.put("/api/admin/stylists/{stylist_id}", response_model=Stylist)
def update_stylist(
    stylist_id: int,
    stylist: StylistUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_stylist = get_or_404(session, Stylist, stylist_id, "Stylist")
    apply_changes(db_stylist, stylist)
    session.add(db_stylist)
    session.commit()
    session.refresh(db_stylist)

    logger.info("Stylist %s updated by %r", stylist_id, current_user["username"])
    return db_stylist


@router.delete("/api/admin/stylists/{stylist_id}", response_model=MessageResponse)
def delete_stylist(
    stylist_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_stylist = get_or_404(session, Stylist, stylist_id, "Stylist")
    session.delete(db_stylist)
    session.commit()

    logger.info("Stylist %s deleted by %r", stylist_id, current_user["username"])
    return {"message": "Stylist deleted successfully"}


# ---- gallery ----

@router.get("/api/gallery", response_model=List[GalleryItem])
def list_gallery(session: Session = Depends(get_session)):
    return session.exec(select(GalleryItem).order_by(GalleryItem.id)).all()


@router.post("/api/admin/gallery", response_model=GalleryItem, status_code=201)
def create_gallery_item(
    item: GalleryItemCreate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_item = GalleryItem(**item.model_dump())
    session.add(db_item)
    session.commit()
    session.refresh(db_item)
    return db_item


@router.put("/api/admin/gallery/{item_id}", response_model=GalleryItem)
def update_gallery_item(
    item_id: int,
    item: GalleryItemUpdate,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_item = get_or_404(session, GalleryItem, item_id, "Gallery item")
    apply_changes(db_item, item)
    session.add(db_item)
    session.commit()
    session.refresh(db_item)
    return db_item


@router.delete("/api/admin/gallery/{item_id}", response_model=MessageResponse)
def delete_gallery_item(
    item_id: int,
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    require_admin(current_user)

    db_item = get_or_404(session, GalleryItem, item_id, "Gallery item")
    session.delete(db_item)
    session.commit()
    return {"message": "Gallery item deleted successfully"}
