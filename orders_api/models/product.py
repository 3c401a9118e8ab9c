# orders_api/models/product.py

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from orders_api.utils.database import Base
from orders_api.models.order import utcnow


class Product(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True, index=True)  # автоинкремент

    name        = Column(String(40), nullable=False)     # Название
    description = Column(String(200), nullable=False)    # Описание
    price       = Column(Float, nullable=False)          # Цена
    quantity    = Column(Float, nullable=False)          # Количество
    order_id    = Column(
        Integer,
        ForeignKey("order.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created     = Column(DateTime(timezone=True), nullable=False, default=utcnow)
