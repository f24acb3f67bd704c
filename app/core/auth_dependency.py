import logging
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from app.core.config import SESSION_COOKIE_NAME
from app.core.security import decode_access_token
from app.db.session import SessionLocal
from app.schemas.feedback import Identity
from app.services.lookups import get_user_by_id

logger = logging.getLogger(__name__)

# auto_error=False: an anonymous visitor is redirected, not rejected
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def get_db():
    """Database session dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_token(
    request: Request,
    bearer_token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[str]:
    """Session token from the Authorization header, else from the session cookie."""
    return bearer_token or request.cookies.get(SESSION_COOKIE_NAME)


def resolve_identity(token: Optional[str], db: Session) -> Optional[Identity]:
    """
    Resolve the user behind a session token.

    Missing, invalid or expired tokens and tokens for deleted users all
    resolve to None.
    """
    if not token:
        return None
    user_id = decode_access_token(token)
    if user_id is None:
        return None
    return get_user_by_id(db, user_id)
