"""
Error taxonomy for the travel journal API.

Every error carries an HTTP status and a fixed user-facing message (Russian,
shown as-is by the web client). Internal details never reach the response
body; they go to the log instead.
"""

import logging
from contextlib import contextmanager

logger = logging.getLogger("travel_journal.errors")


MSG_UNAUTHORIZED = "Необходимо авторизоваться"
MSG_TRIP_NOT_FOUND = "Путешествие не найдено"
MSG_TRIP_FORBIDDEN = "Нет доступа к этому путешествию"
MSG_CREATE_FORBIDDEN = "Нет доступа к созданию путешествия для другого пользователя"
MSG_UPDATE_FORBIDDEN = "Нет доступа к редактированию этого путешествия"
MSG_DELETE_FORBIDDEN = "Нет доступа к удалению этого путешествия"
MSG_REQUIRED_FIELDS = "Необходимо заполнить все обязательные поля"
MSG_INVALID_DATE = "Некорректный формат даты"
MSG_INVALID_REQUEST = "Некорректные данные запроса"
MSG_EMAIL_TAKEN = "Пользователь с таким email уже существует"
MSG_BAD_CREDENTIALS = "Неверный email или пароль"
MSG_INTERNAL = "Внутренняя ошибка сервера"


class TravelJournalError(Exception):
    """Base exception for all errors surfaced to API clients."""

    http_status = 500
    default_message = MSG_INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"message": self.message}


class BadRequestError(TravelJournalError):
    http_status = 400
    default_message = MSG_REQUIRED_FIELDS


class UnauthorizedError(TravelJournalError):
    http_status = 401
    default_message = MSG_UNAUTHORIZED


class ForbiddenError(TravelJournalError):
    http_status = 403
    default_message = MSG_TRIP_FORBIDDEN


class NotFoundError(TravelJournalError):
    http_status = 404
    default_message = MSG_TRIP_NOT_FOUND


class InternalError(TravelJournalError):
    http_status = 500
    default_message = MSG_INTERNAL


@contextmanager
def internal_errors(action: str):
    """
    Lets domain errors through and turns anything else into InternalError,
    logging the original failure with its traceback.
    """
    try:
        yield
    except TravelJournalError:
        raise
    except Exception as e:
        logger.exception(f"Failed while {action}: {e}")
        raise InternalError() from e
