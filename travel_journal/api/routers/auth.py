import logging
from fastapi import APIRouter, Depends, Response
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from travel_journal.api.deps import require_principal
from travel_journal.core.config import ACCESS_TOKEN_EXPIRE_MINUTES, SESSION_COOKIE_NAME
from travel_journal.core.database import get_db
from travel_journal.core.errors import (
    MSG_BAD_CREDENTIALS,
    MSG_EMAIL_TAKEN,
    BadRequestError,
    UnauthorizedError,
    internal_errors,
)
from travel_journal.models.domain import (
    Message,
    Principal,
    RegisterRequest,
    Token,
    UserOut,
)
from travel_journal.repositories import users as user_store
from travel_journal.services.auth import (
    create_access_token,
    get_password_hash,
    verify_password,
)

logger = logging.getLogger("travel_journal.auth")

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _issue_session(response: Response, user_id: int) -> Token:
    token = create_access_token(user_id)
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    return Token(access_token=token)


@router.post("/register", response_model=Token)
def register(
    item: RegisterRequest, response: Response, db: Session = Depends(get_db)
):
    email = item.email.lower()
    with internal_errors("registering a user"):
        if user_store.find_by_email(db, email):
            raise BadRequestError(MSG_EMAIL_TAKEN)
        try:
            user = user_store.create(
                db,
                name=item.name,
                email=email,
                hashed_password=get_password_hash(item.password),
            )
        except IntegrityError:
            # Concurrent registration with the same email
            db.rollback()
            raise BadRequestError(MSG_EMAIL_TAKEN)

        logger.info(f"Registered user {user.id} ({email})")
        return _issue_session(response, user.id)


@router.post("/token", response_model=Token)
def login(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    with internal_errors("logging in"):
        user = user_store.find_by_email(db, form_data.username.lower())
        if not user or not verify_password(form_data.password, user.hashed_password):
            logger.warning(f"Failed login attempt for {form_data.username}")
            raise UnauthorizedError(MSG_BAD_CREDENTIALS)
        return _issue_session(response, user.id)


@router.post("/logout", response_model=Message)
def logout(response: Response):
    response.delete_cookie(SESSION_COOKIE_NAME)
    return Message(message="Вы вышли из аккаунта")


@router.get("/me", response_model=UserOut)
def me(
    principal: Principal = Depends(require_principal),
    db: Session = Depends(get_db),
):
    with internal_errors("loading the current user"):
        user = user_store.find_by_id(db, principal.id)
        if user is None:
            raise UnauthorizedError()
        return user
