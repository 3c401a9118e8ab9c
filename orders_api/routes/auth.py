# orders_api/routes/auth.py

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import OAuth2PasswordBearer
from jwt import ExpiredSignatureError, InvalidTokenError
from sqlalchemy import select

from orders_api.models.order import Order as OrderModel
from orders_api.schemas.auth import SignIn, TokenResponse
from orders_api.schemas.order import OrderClient
from orders_api.services.auth import authenticate_service
from orders_api.services.common import store_failure
from orders_api.utils.errors import UnauthorizedError
from orders_api.utils.security import decode_access_token

router = APIRouter()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth")


async def get_current_order(request: Request, token: str = Depends(oauth2_scheme)) -> OrderModel:
    """
    Проверяет JWT токен и возвращает заказ, которому он выдан.

    **Статусы:**
    - 401 Unauthorized – токен истёк, неверный или заказ удалён
    """
    log = request.app.state.log
    try:
        payload = decode_access_token(token)
        order_id = int(payload["sub"])
    except ExpiredSignatureError:
        await log.log_warning("auth", "Токен истёк")
        raise UnauthorizedError("Токен истёк")
    except (InvalidTokenError, KeyError, ValueError):
        await log.log_warning("auth", "Неверный токен")
        raise UnauthorizedError("Неверный токен")

    try:
        result = await request.state.db.execute(select(OrderModel).where(OrderModel.id == order_id).limit(1))
        order = result.scalars().first()
    except Exception as e:
        raise await store_failure(request, "auth", e, "Не удалось проверить токен!") from e

    if order is None:
        await log.log_warning("auth", "Заказ из токена не найден", {"id": order_id})
        raise UnauthorizedError("Неверный токен")

    await log.log_info("auth", "Токен проверен", {"id": order_id})
    return order


# ────────────── SIGN IN ──────────────
@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Вход клиента по email и паролю заказа",
    responses={
        200: {
            "description": "Токен успешно получен",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "status": "PENDING",
                        "clientEmail": "client@example.com",
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."
                    }
                }
            }
        },
        401: {"description": "Неверный email или пароль"},
        422: {"description": "Ошибка валидации входных данных"},
    },
)
async def sign_in(request: Request, body: SignIn):
    return await authenticate_service(body, request)


# ────────────── ME ──────────────
@router.get(
    "/me",
    response_model=OrderClient,
    status_code=status.HTTP_200_OK,
    summary="Заказ текущего токена",
    responses={
        200: {"description": "Токен действителен, заказ возвращён"},
        401: {"description": "Токен отсутствует, истёк или неверный"},
    },
)
async def read_me(current_order: OrderModel = Depends(get_current_order)):
    return current_order
