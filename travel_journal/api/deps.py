from typing import Optional
from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from travel_journal.core.config import SESSION_COOKIE_NAME
from travel_journal.core.database import get_db
from travel_journal.core.errors import UnauthorizedError
from travel_journal.models.domain import Principal
from travel_journal.repositories import users as user_store
from travel_journal.services.auth import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token", auto_error=False)


def get_current_principal(
    request: Request,
    bearer_token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Optional[Principal]:
    """
    Resolves the caller from the bearer token, falling back to the session
    cookie. Invalid or expired tokens and deleted users resolve to None.
    """
    token = bearer_token or request.cookies.get(SESSION_COOKIE_NAME)
    user_id = decode_access_token(token)
    if user_id is None:
        return None

    user = user_store.find_by_id(db, user_id)
    if user is None:
        return None
    return Principal(id=user.id, name=user.name, email=user.email)


def require_principal(
    principal: Optional[Principal] = Depends(get_current_principal),
) -> Principal:
    if principal is None:
        raise UnauthorizedError()
    return principal
