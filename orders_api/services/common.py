# orders_api/services/common.py

from typing import Iterable, Optional
from fastapi import HTTPException, Request
from pydantic import BaseModel

from orders_api.config import settings
from orders_api.utils.errors import BadRequestError, NotFoundError, map_store_error

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0


def resolve_pagination(limit: Optional[int] = None, offset: Optional[int] = None) -> tuple[int, int]:
    """
    Подставляет значения по умолчанию: limit=10, offset=0.
    Верхняя граница limit не ограничивается.
    """
    effective_limit = DEFAULT_LIMIT if limit is None else limit
    effective_offset = DEFAULT_OFFSET if offset is None else offset
    return effective_limit, effective_offset


def collect_changes(update: BaseModel, fields: Iterable[str]) -> dict:
    """
    Возвращает только переданные поля обновления.

    Поле считается переданным, если оно есть в запросе и не равно None.
    Пустая строка тоже считается отсутствием значения, а 0 - нет.
    """
    changes = {}
    for name in fields:
        if name not in update.model_fields_set:
            continue
        value = getattr(update, name)
        if value is None or value == "":
            continue
        changes[name] = value
    return changes


async def store_failure(request: Request, target: str, exc: Exception, message: str) -> HTTPException:
    """
    Откатывает сессию, пишет ошибку в лог и возвращает ошибку API.
    """
    await request.state.db.rollback()
    await request.app.state.log.log_error(target, message, {"error": str(exc)})
    return map_store_error(exc, message)


async def missing_on_write(request: Request, target: str, id: int, not_found: str, failed: str) -> HTTPException:
    """
    Запись для update/delete не найдена.
    При MASK_NOT_FOUND_ON_WRITE отдаём общую 400, иначе честную 404.
    """
    await request.app.state.log.log_error(target, not_found, {"id": id})
    if settings.MASK_NOT_FOUND_ON_WRITE:
        return BadRequestError(failed)
    return NotFoundError(not_found)
