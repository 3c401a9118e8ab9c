# orders_api/utils/errors.py

"""
Ошибки API.
Все классы наследуют HTTPException, поэтому FastAPI сам превращает их
в ответ {"detail": "..."} с нужным статусом.
"""

from fastapi import HTTPException, status
from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError


class NotFoundError(HTTPException):
    """Запрошенная запись не существует (404)."""

    def __init__(self, detail: str = "Запись не найдена"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """Не удалось создать, обновить или удалить запись (400)."""

    def __init__(self, detail: str = "Некорректный запрос"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class StoreUnavailableError(HTTPException):
    """База данных недоступна (503)."""

    def __init__(self, detail: str = "База данных недоступна"):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)


class UnauthorizedError(HTTPException):
    """Неверные учётные данные или токен (401)."""

    def __init__(self, detail: str = "Не удалось выполнить вход!"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


# ошибки соединения с базой, а не ошибки данных
UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, DisconnectionError)


def map_store_error(exc: Exception, message: str) -> HTTPException:
    """
    Переводит исключение из слоя базы в одну из ошибок API.

    :param exc: исключение, пойманное в сервисе
    :param message: текст для BadRequestError
    :return: HTTPException, который нужно пробросить
    """
    if isinstance(exc, HTTPException):
        return exc
    if isinstance(exc, UNAVAILABLE_ERRORS):
        return StoreUnavailableError()
    return BadRequestError(message)
