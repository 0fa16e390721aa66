# salon/routers/auth_routes.py

import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session, select

from salon.db import get_session
from salon.models import User
from salon.schemas import Token, UserCreate, UserPublic, MessageResponse
from salon.auth import verify_password, create_access_token, get_current_user, hash_password
from salon.deps import commit_unique
from salon.config import ACCESS_TOKEN_EXPIRE_MINUTES, SESSION_COOKIE_NAME, SESSION_COOKIE_SECURE

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)


def set_session_cookie(response: Response, token: str):
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=SESSION_COOKIE_SECURE,
        samesite="lax",
    )


@router.post("/register", status_code=201, response_model=UserPublic)
def register(
    user: UserCreate,
    response: Response,
    session: Session = Depends(get_session),
):
    existing = session.exec(
        select(User).where(User.username == user.username)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Username already registered")

    # New accounts are never admins
    db_user = User(
        username=user.username,
        password_hash=hash_password(user.password),
        is_admin=False,
    )
    # unique index backs up the pre-check
    db_user = commit_unique(session, db_user, "Username already registered")

    set_session_cookie(response, create_access_token({"sub": db_user.username}))
    logger.info("Registered user %r", db_user.username)

    return {
        "id": db_user.id,
        "username": db_user.username,
        "is_admin": db_user.is_admin,
    }


@router.post("/login", response_model=Token)
def login(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    session: Session = Depends(get_session),
):
    user = session.exec(
        select(User).where(User.username == form_data.username)
    ).first()

    if user is None or not verify_password(form_data.password, user.password_hash):
        logger.warning("Failed login for %r", form_data.username)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": user.username})
    set_session_cookie(response, token)
    logger.info("User %r logged in", user.username)
    return {"access_token": token, "token_type": "bearer"}


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserPublic)
def me(current_user: dict = Depends(get_current_user)):
    return {
        "id": current_user["id"],
        "username": current_user["username"],
        "is_admin": current_user["is_admin"],
    }
