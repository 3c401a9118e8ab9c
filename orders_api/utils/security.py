# orders_api/utils/security.py

"""
Модуль для работы с хэшированием паролей и JWT токенами клиентов.
Используется passlib с sha256_crypt, чтобы избежать проблем с bcrypt на Windows.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jwt import encode, decode
from passlib.context import CryptContext

from orders_api.config import settings

# Создаём контекст для хэширования паролей
# schemes=["sha256_crypt"] - используем SHA-256 с солью
# deprecated="auto" - автоматически помечает устаревшие схемы
pwd_context = CryptContext(schemes=["sha256_crypt"], deprecated="auto")

ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL = 604800  # 7 дней в секундах


def hash_password(password: str) -> str:
    """
    Хэширует пароль.

    :param password: строка пароля клиента
    :return: хэшированный пароль в виде строки
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Проверяет совпадение пароля с его хэшем.

    :param plain_password: строка пароля клиента
    :param hashed_password: хэшированный пароль из базы (может отсутствовать)
    :return: True если пароль совпадает с хэшем, иначе False
    """
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def token_ttl() -> int:
    return settings.JWT_TTL if settings.JWT_TTL else DEFAULT_TOKEN_TTL


def create_access_token(order_id: int, client_email: str) -> str:
    """
    Создаёт JWT токен для заказа.
    Вход: id заказа и email клиента
    Выход: JWT строка с sub, clientEmail, aud, iss, iat, exp
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(order_id),
        "clientEmail": client_email,
        "aud": settings.JWT_AUDIENCE,
        "iss": settings.JWT_ISSUER,
        "iat": now,
        "exp": now + timedelta(seconds=token_ttl()),
    }
    return encode(payload, settings.JWT_SECRET, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    """
    Проверяет подпись, срок действия, audience и issuer токена.
    Бросает jwt.InvalidTokenError (и наследников) при любой ошибке.
    """
    return decode(
        token,
        settings.JWT_SECRET,
        algorithms=[ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )
