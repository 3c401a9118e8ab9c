# orders_api/models/order.py

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from orders_api.utils.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(Base):
    __tablename__ = "order"

    id = Column(Integer, primary_key=True, index=True)  # автоинкремент

    status               = Column(String, nullable=False, default="PENDING")  # Статус
    client_email         = Column(String, nullable=True, index=True)          # Email клиента
    client_password_hash = Column(String, nullable=True)                      # Хэш пароля клиента
    created              = Column(DateTime(timezone=True), nullable=False, default=utcnow)
