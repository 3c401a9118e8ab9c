# orders_api/services/auth.py

from sqlalchemy import select
from fastapi import Request

from orders_api.models.order import Order as OrderModel
from orders_api.schemas.auth import SignIn
from orders_api.services.common import store_failure
from orders_api.utils.errors import UnauthorizedError
from orders_api.utils.security import create_access_token, verify_password


async def find_order_by_email(client_email: str, request: Request) -> OrderModel | None:
    db = request.state.db
    try:
        result = await db.execute(
            select(OrderModel).where(OrderModel.client_email == client_email).limit(1)
        )
        return result.scalars().first()
    except Exception as e:
        raise await store_failure(request, "auth", e, "Не удалось выполнить вход!") from e


async def authenticate_service(sign_in: SignIn, request: Request) -> dict:
    """
    Вход клиента по email и паролю заказа.

    Неизвестный email и неверный пароль дают одну и ту же ошибку 401,
    чтобы не раскрывать существование клиента.
    """
    log = request.app.state.log

    order = await find_order_by_email(sign_in.client_email, request)
    if order is None or not verify_password(sign_in.client_password, order.client_password_hash):
        await log.log_warning("auth", "Неудачная попытка входа", {"client_email": sign_in.client_email})
        raise UnauthorizedError()

    token = create_access_token(order.id, order.client_email)
    await log.log_info("auth", "Клиент успешно авторизован", {"id": order.id})

    return {
        "id": order.id,
        "status": order.status,
        "client_email": order.client_email,
        "token": token,
    }
