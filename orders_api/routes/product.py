# orders_api/routes/product.py

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import PlainTextResponse
from typing import List, Optional
from orders_api.schemas.product import Product, ProductCreate, ProductUpdate
from orders_api.services.product import (
    create_product_service,
    read_products_service,
    read_product_service,
    update_product_service,
    delete_product_service,
)

router = APIRouter()

# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Создать продукт",
    response_description="Возвращает созданный продукт целиком",
    responses={
        201: {"description": "Продукт успешно создан"},
        400: {"description": "Продукт не был создан (например, заказа не существует)"},
        422: {"description": "Неверные данные запроса"},
        503: {"description": "База данных недоступна"},
    },
)
async def create_product(request: Request, product: ProductCreate):
    return await create_product_service(product, request)


# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Product],
    status_code=status.HTTP_200_OK,
    summary="Получить список продуктов",
    response_description="Возвращает страницу продуктов, новые первыми",
    responses={
        200: {"description": "Список продуктов успешно получен"},
        422: {"description": "Неверные параметры пагинации"},
    },
)
async def read_products(
    request: Request,
    limit: Optional[int] = Query(None, ge=0, description="Сколько записей вернуть (по умолчанию 10, 0 - пустая страница)"),
    offset: Optional[int] = Query(None, ge=0, description="Сколько записей пропустить (по умолчанию 0)"),
):
    return await read_products_service(request, limit, offset)


# ────────────── READ ONE ──────────────
@router.get(
    "/{id}",
    response_model=Product,
    status_code=status.HTTP_200_OK,
    summary="Получить продукт по ID",
    responses={
        200: {"description": "Продукт найден и возвращён"},
        404: {"description": "Продукт не найден"},
    },
)
async def read_product(id: int, request: Request):
    return await read_product_service(id, request)


# ────────────── UPDATE ──────────────
@router.patch(
    "/{id}",
    response_model=Product,
    status_code=status.HTTP_200_OK,
    summary="Обновить продукт",
    response_description="Возвращает продукт после обновления",
    responses={
        200: {"description": "Продукт успешно обновлён"},
        400: {"description": "Не удалось обновить продукт"},
        404: {"description": "Продукт не найден"},
        422: {"description": "Неверные данные запроса"},
    },
)
async def update_product(id: int, product_update: ProductUpdate, request: Request):
    return await update_product_service(id, product_update, request)


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    response_class=PlainTextResponse,
    status_code=status.HTTP_200_OK,
    summary="Удалить продукт",
    response_description="Текстовое подтверждение удаления",
    responses={
        200: {"description": "Продукт успешно удалён"},
        400: {"description": "Не удалось удалить продукт"},
        404: {"description": "Продукт не найден"},
    },
)
async def delete_product(id: int, request: Request):
    return await delete_product_service(id, request)
