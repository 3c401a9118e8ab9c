# orders_api/utils/database.py

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from orders_api.config import settings

# ────────────── Base для моделей ──────────────
Base = declarative_base()  # базовый класс для всех моделей SQLAlchemy

# ────────────── URL базы данных ──────────────
SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

# ────────────── Асинхронный движок ──────────────
engine = create_async_engine(
    SQLALCHEMY_DATABASE_URL,
    echo=False  # True можно включить для отладки SQL
)

# SQLite не проверяет внешние ключи без PRAGMA на каждом соединении
if engine.dialect.name == "sqlite":
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

# ────────────── Асинхронная сессия ──────────────
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False  # объекты остаются читаемыми после commit
)

# ────────────── Инициализация базы данных ──────────────
async def init_db():
    """
    Создаёт все таблицы в базе данных (если ещё не созданы).
    """
    # модели должны быть импортированы до create_all
    from orders_api.models import order, product  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db():
    """
    Удаляет все таблицы. Используется в тестах для чистого состояния.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
