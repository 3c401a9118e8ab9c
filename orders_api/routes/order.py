# orders_api/routes/order.py

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from orders_api.schemas.order import Order, OrderCreate, OrderStatus, OrderUpdate
from orders_api.services.order import (
    create_order_service,
    read_orders_service,
    read_order_service,
    update_order_service,
    delete_order_service,
)

router = APIRouter()

# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=OrderStatus,
    status_code=status.HTTP_201_CREATED,
    summary="Создать заказ",
    response_description="Возвращает ID и статус созданного заказа",
    responses={
        201: {"description": "Заказ успешно создан со статусом PENDING"},
        400: {"description": "Заказ не был создан"},
        422: {"description": "Неверные данные запроса"},
        503: {"description": "База данных недоступна"},
    },
)
async def create_order(request: Request, order: OrderCreate):
    return await create_order_service(order, request)


# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Order],
    status_code=status.HTTP_200_OK,
    summary="Получить список заказов",
    response_description="Возвращает страницу заказов, новые первыми",
    responses={
        200: {"description": "Список заказов успешно получен"},
        422: {"description": "Неверные параметры пагинации"},
        503: {"description": "База данных недоступна"},
    },
)
async def read_orders(
    request: Request,
    limit: Optional[int] = Query(None, ge=0, description="Сколько записей вернуть (по умолчанию 10, 0 - пустая страница)"),
    offset: Optional[int] = Query(None, ge=0, description="Сколько записей пропустить (по умолчанию 0)"),
):
    return await read_orders_service(request, limit, offset)


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=OrderStatus,
    status_code=status.HTTP_200_OK,
    summary="Получить заказ по ID",
    response_description="Возвращает ID и статус заказа",
    responses={
        200: {"description": "Заказ найден и возвращён"},
        404: {"description": "Заказ не найден"},
    },
)
async def read_order(id: int, request: Request):
    return await read_order_service(id, request)


# ────────────── UPDATE ──────────────
@router.patch(
    "/{id}",
    response_model=OrderStatus,
    status_code=status.HTTP_200_OK,
    summary="Обновить статус заказа",
    response_description="Возвращает ID и новый статус заказа",
    responses={
        200: {"description": "Заказ успешно обновлён"},
        400: {"description": "Не удалось обновить заказ"},
        404: {"description": "Заказ не найден"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def update_order(id: int, order_update: OrderUpdate, request: Request):
    return await update_order_service(id, order_update, request)


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    summary="Удалить заказ",
    response_description="Текстовое подтверждение удаления",
    responses={
        200: {"description": "Заказ успешно удалён"},
        400: {"description": "Не удалось удалить заказ"},
        404: {"description": "Заказ не найден"},
    },
)
async def delete_order(id: int, request: Request):
    return await delete_order_service(id, request)
