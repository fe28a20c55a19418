# crewhub/routers/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from crewhub.core.auth import (
    get_current_session,
    require_auth,
    start_session,
)
from crewhub.core.config import get_settings
from crewhub.core.errors import UnauthenticatedError
from crewhub.database import get_session
from crewhub.models.session import UserSession
from crewhub.models.user import User
from crewhub.repositories.session_repo import SessionRepository
from crewhub.repositories.user_repo import UserRepository
from crewhub.schemas.user import LoginRequest, UserRead, UserRegister
from crewhub.services.auth_service import AuthService

router = APIRouter(tags=["Auth"])

settings = get_settings()
service = AuthService(UserRepository(), SessionRepository())


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: UserRegister,
    response: Response,
    session: Session = Depends(get_session),
):
    """
    Create a customer or worker account and log it in.
    """
    user = service.register(session, payload)
    start_session(session, response, user)
    return UserRead.from_user(user)


@router.post("/login", response_model=UserRead)
def login(
    payload: LoginRequest,
    response: Response,
    session: Session = Depends(get_session),
):
    """
    Authenticate and start a session.

    401 with the same message for unknown usernames and wrong passwords.
    """
    user = service.authenticate(session, payload)
    start_session(session, response, user)
    return UserRead.from_user(user)


@router.post("/logout")
def logout(
    response: Response,
    session: Session = Depends(get_session),
    user_session: UserSession | None = Depends(get_current_session),
):
    """
    End the current session; its token stops working immediately.
    """
    if user_session is None:
        raise UnauthenticatedError()
    service.logout(session, user_session)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserRead)
def read_me(current_user: User = Depends(require_auth)):
    """
    Return the authenticated identity (401 without a session).
    """
    return UserRead.from_user(current_user)
