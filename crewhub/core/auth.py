# crewhub/core/auth.py
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any

from fastapi import Depends, Request, Response
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from sqlmodel import Session

from crewhub.core.config import get_settings
from crewhub.core.errors import UnauthenticatedError
from crewhub.core.permissions import ensure_role
from crewhub.database import get_session
from crewhub.models.session import UserSession
from crewhub.models.user import User
from crewhub.repositories.session_repo import SessionRepository
from crewhub.repositories.user_repo import UserRepository

settings = get_settings()

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately;
#   the session cookie is the primary carrier, the header is a fallback
#   for non-browser clients.
bearer_scheme = HTTPBearer(auto_error=False)

session_repo = SessionRepository()
user_repo = UserRepository()


def create_session_token(user_id: int, session_id: str, expire: datetime) -> str:
    """
    Sign a session token referencing a stored UserSession row.

    Claims:
      - sub: user id (string, per JWT convention)
      - sid: UserSession.id
      - exp: `expire` (the stored row's expires_at)
    """
    claims = {"sub": str(user_id), "sid": session_id, "exp": expire}
    return jwt.encode(claims, settings.SESSION_SECRET, algorithm=settings.SESSION_ALG)


def decode_session_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a session token.

    Verification:
      - signature (SESSION_ALG using SESSION_SECRET)
      - expiration time (exp)

    Raises:
        UnauthenticatedError: if token is invalid/expired.
    """
    try:
        return jwt.decode(
            token,
            settings.SESSION_SECRET,
            algorithms=[settings.SESSION_ALG],
        )
    except JWTError:
        raise UnauthenticatedError("Invalid or expired session")


def start_session(session: Session, response: Response, user: User) -> str:
    """
    Persist a new login session for `user` and attach its token to the
    response as an HttpOnly cookie. Returns the token.

    Sessions whose token has already expired are pruned first.
    """
    now = datetime.now(timezone.utc)
    session_repo.delete_expired(session, now)

    expire = now + timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)
    user_session = session_repo.create(
        session,
        UserSession(id=secrets.token_urlsafe(32), user_id=user.id, expires_at=expire),
    )
    token = create_session_token(user.id, user_session.id, expire)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return token


def _extract_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None,
) -> str | None:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


def get_current_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> UserSession | None:
    """
    Resolve the stored session behind the request's token.

    Flow:
      1. No cookie and no Authorization header => guest => None.
      2. Decode token => extract 'sub' and 'sid'.
      3. Load the UserSession row; it must exist (not logged out)
         and belong to 'sub'.

    Raises:
        UnauthenticatedError: token present but unusable.
    """
    token = _extract_token(request, credentials)
    if token is None:
        return None

    payload = decode_session_token(token)
    sub = payload.get("sub")
    sid = payload.get("sid")
    if not sub or not sid:
        raise UnauthenticatedError("Session token missing sub/sid")

    user_session = session_repo.get(session, sid)
    if user_session is None or str(user_session.user_id) != sub:
        raise UnauthenticatedError("Session has ended")

    return user_session


def get_current_user(
    user_session: UserSession | None = Depends(get_current_session),
    session: Session = Depends(get_session),
) -> User | None:
    """
    Identity behind the current session, or None for guests.
    """
    if user_session is None:
        return None

    user = user_repo.get_by_id(session, user_session.user_id)
    if user is None:
        raise UnauthenticatedError("Session has ended")
    return user


def require_auth(user: User | None = Depends(get_current_user)) -> User:
    """
    Enforce authentication.

    Returns:
        The authenticated User.

    Raises:
        UnauthenticatedError(401): if there is no session.
    """
    if user is None:
        raise UnauthenticatedError()
    return user


def require_admin(user: User = Depends(require_auth)) -> User:
    """
    Enforce admin role.

    Raises:
        ForbiddenError(403): if role is not admin.
    """
    ensure_role(user, "admin")
    return user


def require_customer(user: User = Depends(require_auth)) -> User:
    """
    Enforce that only customers (role='customer') can access a route.

    Use this for booking, reviewing and reporting.
    """
    ensure_role(user, "customer")
    return user


def require_worker(user: User = Depends(require_auth)) -> User:
    """Enforce role='worker'."""
    ensure_role(user, "worker")
    return user
