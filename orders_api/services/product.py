# orders_api/services/product.py

from sqlalchemy import delete, select, update
from fastapi import Request

from orders_api.models.product import Product as ProductModel
from orders_api.schemas.product import ProductCreate, ProductUpdate
from orders_api.services.common import (
    collect_changes,
    missing_on_write,
    resolve_pagination,
    store_failure,
)
from orders_api.utils.errors import NotFoundError

# orderId после создания не меняется
UPDATABLE_FIELDS = ("name", "description", "price", "quantity")

NOT_CREATED = "Продукт не был создан!"
NOT_FOUND = "Продукт не найден!"
NOT_UPDATED = "Не удалось обновить продукт!"
NOT_DELETED = "Не удалось удалить продукт!"
DELETED = "Продукт успешно удалён!"


async def read_products_service(request: Request, limit: int | None = None, offset: int | None = None) -> list[ProductModel]:
    """
    Получение списка продуктов, новые первыми.
    """
    db = request.state.db
    log = request.app.state.log
    limit, offset = resolve_pagination(limit, offset)

    query = (
        select(ProductModel)
        .order_by(ProductModel.created.desc(), ProductModel.id.desc())
        .offset(offset)
        .limit(limit)
    )
    try:
        result = await db.execute(query)
        products = result.scalars().all()
    except Exception as e:
        raise await store_failure(request, "product", e, "Не удалось получить список продуктов!") from e

    await log.log_info("product", f"{len(products)} продуктов загружено", {"limit": limit, "offset": offset})
    return products


async def create_product_service(product: ProductCreate, request: Request) -> ProductModel:
    """
    Создание продукта. Существование заказа проверяет внешний ключ в базе.
    """
    db = request.state.db
    log = request.app.state.log

    try:
        db_product = ProductModel(**product.model_dump())
        db.add(db_product)
        await db.commit()
        await db.refresh(db_product)
    except Exception as e:
        raise await store_failure(request, "product", e, NOT_CREATED) from e

    await log.log_info("product", "Продукт создан", {"id": db_product.id, "order_id": db_product.order_id})
    return db_product


async def read_product_service(id: int, request: Request) -> ProductModel:
    """
    Чтение продукта по ID.
    Продукт без названия считается несуществующим.
    """
    db = request.state.db
    log = request.app.state.log

    try:
        result = await db.execute(select(ProductModel).where(ProductModel.id == id).limit(1))
        db_product = result.scalars().first()
    except Exception as e:
        raise await store_failure(request, "product", e, "Не удалось получить продукт!") from e

    if db_product is None or not db_product.name:
        await log.log_error("product", NOT_FOUND, {"id": id})
        raise NotFoundError(NOT_FOUND)

    await log.log_info("product", "Продукт загружен", {"id": id})
    return db_product


async def update_product_service(id: int, product_update: ProductUpdate, request: Request):
    """
    Частичное обновление продукта одним запросом UPDATE ... RETURNING.
    Непереданные поля сохраняют текущие значения.
    """
    db = request.state.db
    log = request.app.state.log

    changes = collect_changes(product_update, UPDATABLE_FIELDS)
    query = (
        update(ProductModel)
        .where(ProductModel.id == id)
        .values(changes or {ProductModel.name: ProductModel.name})
        .returning(*ProductModel.__table__.c)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(query)
        row = result.first()
        await db.commit()
    except Exception as e:
        raise await store_failure(request, "product", e, NOT_UPDATED) from e

    if row is None:
        raise await missing_on_write(request, "product", id, NOT_FOUND, NOT_UPDATED)

    await log.log_info("product", "Продукт обновлён", {"id": id, "changes": changes})
    return row


async def delete_product_service(id: int, request: Request) -> str:
    """
    Удаление продукта по ID.
    """
    db = request.state.db
    log = request.app.state.log

    query = (
        delete(ProductModel)
        .where(ProductModel.id == id)
        .returning(ProductModel.id)
        .execution_options(synchronize_session=False)
    )
    try:
        result = await db.execute(query)
        row = result.first()
        await db.commit()
    except Exception as e:
        raise await store_failure(request, "product", e, NOT_DELETED) from e

    if row is None:
        raise await missing_on_write(request, "product", id, NOT_FOUND, NOT_DELETED)

    await log.log_info("product", "Продукт удалён", {"id": id})
    return DELETED
