# salon/deps.py

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError


def require_admin(user: dict):
    if not user["is_admin"]:
        raise HTTPException(status_code=403, detail="Forbidden")


def get_or_404(session, model, item_id: int, label: str):
    item = session.get(model, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return item


def commit_unique(session, obj, detail: str):
    # Unique constraint hit on commit -> 409
    session.add(obj)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise HTTPException(status_code=409, detail=detail)
    session.refresh(obj)
    return obj
