# orders_api/schemas/order.py

from pydantic import BaseModel, EmailStr
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

# JSON наружу в camelCase (clientEmail), внутри snake_case
CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "from_attributes": True,
}

# ────────────── Схема для CREATE ──────────────
class OrderCreate(BaseModel):
    """
    Статус из запроса игнорируется, новый заказ всегда PENDING.
    Email и пароль клиента нужны только для последующего входа.
    """
    status: Optional[str] = None
    client_email: Optional[EmailStr] = None
    client_password: Optional[str] = None

    model_config = CAMEL_CONFIG

# ────────────── Схема для UPDATE ──────────────
class OrderUpdate(BaseModel):
    status: Optional[str] = None

    model_config = CAMEL_CONFIG

# ────────────── Схемы для RESPONSE ──────────────
class OrderStatus(BaseModel):
    """Проекция заказа: только id и статус."""
    id: int
    status: str

    model_config = CAMEL_CONFIG

class Order(OrderStatus):
    client_email: Optional[str] = None
    created: datetime

class OrderClient(OrderStatus):
    client_email: Optional[str] = None
