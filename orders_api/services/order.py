# orders_api/services/order.py

from sqlalchemy import delete, select, update
from fastapi import Request

from orders_api.models.order import Order as OrderModel
from orders_api.schemas.order import OrderCreate, OrderUpdate
from orders_api.services.common import (
    collect_changes,
    missing_on_write,
    resolve_pagination,
    store_failure,
)
from orders_api.utils.errors import NotFoundError
from orders_api.utils.security import hash_password

DEFAULT_STATUS = "PENDING"

NOT_CREATED = "Заказ не был создан!"
NOT_FOUND = "Заказ не найден!"
NOT_UPDATED = "Не удалось обновить заказ!"
NOT_DELETED = "Не удалось удалить заказ!"
DELETED = "Заказ успешно удалён!"


async def read_orders_service(request: Request, limit: int | None = None, offset: int | None = None) -> list[OrderModel]:
    """
    Получение списка заказов, новые первыми.
    """
    db = request.state.db
    log = request.app.state.log
    limit, offset = resolve_pagination(limit, offset)

    query = (
        select(OrderModel)
        .order_by(OrderModel.created.desc(), OrderModel.id.desc())
        .offset(offset)
        .limit(limit)
    )
    try:
        result = await db.execute(query)
        orders = result.scalars().all()
    except Exception as e:
        raise await store_failure(request, "order", e, "Не удалось получить список заказов!") from e

    await log.log_info("order", f"{len(orders)} заказов загружено", {"limit": limit, "offset": offset})
    return orders


async def create_order_service(order: OrderCreate, request: Request) -> OrderModel:
    """
    Создание нового заказа. Статус из запроса игнорируется.
    """
    db = request.state.db
    log = request.app.state.log

    try:
        db_order = OrderModel(
            status=DEFAULT_STATUS,
            client_email=order.client_email,
            client_password_hash=hash_password(order.client_password) if order.client_password else None,
        )
        db.add(db_order)
        await db.commit()
        await db.refresh(db_order)
    except Exception as e:
        raise await store_failure(request, "order", e, NOT_CREATED) from e

    await log.log_info("order", "Заказ создан", {"id": db_order.id})
    return db_order


async def read_order_service(id: int, request: Request) -> OrderModel:
    """
    Чтение заказа по ID (первое совпадение).
    """
    db = request.state.db
    log = request.app.state.log

    try:
        result = await db.execute(select(OrderModel).where(OrderModel.id == id).limit(1))
        db_order = result.scalars().first()
    except Exception as e:
        raise await store_failure(request, "order", e, "Не удалось получить заказ!") from e

    if db_order is None:
        await log.log_error("order", NOT_FOUND, {"id": id})
        raise NotFoundError(NOT_FOUND)

    await log.log_info("order", "Заказ загружен", {"id": id})
    return db_order


async def update_order_service(id: int, order_update: OrderUpdate, request: Request):
    """
    Обновление статуса заказа одним запросом UPDATE ... RETURNING.
    Если статус не передан, остаётся прежний.
    """
    db = request.state.db
    log = request.app.state.log

    changes = collect_changes(order_update, ("status",))
    query = (
        update(OrderModel)
        .where(OrderModel.id == id)
        # без изменений всё равно трогаем строку, чтобы узнать, существует ли она
        .values(changes or {OrderModel.status: OrderModel.status})
        .returning(OrderModel.id, OrderModel.status)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(query)
        row = result.first()
        await db.commit()
    except Exception as e:
        raise await store_failure(request, "order", e, NOT_UPDATED) from e

    if row is None:
        raise await missing_on_write(request, "order", id, NOT_FOUND, NOT_UPDATED)

    await log.log_info("order", "Заказ обновлён", {"id": id, "changes": changes})
    return row


async def delete_order_service(id: int, request: Request) -> str:
    """
    Удаление заказа по ID. Продукты заказа удаляются каскадно.
    """
    db = request.state.db
    log = request.app.state.log

    query = (
        delete(OrderModel)
        .where(OrderModel.id == id)
        .returning(OrderModel.id)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(query)
        row = result.first()
        await db.commit()
    except Exception as e:
        raise await store_failure(request, "order", e, NOT_DELETED) from e

    if row is None:
        raise await missing_on_write(request, "order", id, NOT_FOUND, NOT_DELETED)

    await log.log_info("order", "Заказ удалён", {"id": id})
    return DELETED
