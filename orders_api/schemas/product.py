# orders_api/schemas/product.py

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from orders_api.schemas.order import CAMEL_CONFIG

# ────────────── Схема для CREATE ──────────────
class ProductCreate(BaseModel):
    name: str = Field(..., min_length=5, max_length=40, description="Название (5-40 символов)")
    description: str = Field(..., min_length=5, max_length=200, description="Описание (5-200 символов)")
    price: float = Field(..., description="Цена")
    quantity: float = Field(..., description="Количество")
    order_id: int = Field(..., description="ID заказа")

    model_config = CAMEL_CONFIG

# ────────────── Схема для UPDATE ──────────────
class ProductUpdate(BaseModel):
    """
    Частичное обновление. Передаются только поля, которые нужно изменить.
    orderId после создания не меняется и здесь не принимается.
    """
    name: Optional[str] = Field(None, min_length=5, max_length=40)
    description: Optional[str] = Field(None, min_length=5, max_length=200)
    price: Optional[float] = None
    quantity: Optional[float] = None

    model_config = CAMEL_CONFIG

# ────────────── Схема для RESPONSE ──────────────
class Product(BaseModel):
    id: int
    name: str
    description: str
    price: float
    quantity: float
    order_id: int
    created: datetime

    model_config = CAMEL_CONFIG
