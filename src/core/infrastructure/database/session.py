"""Database session management."""

from collections.abc import AsyncGenerator

from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from src.core.config import settings
from src.core.infrastructure.health import DatabaseHealthResult, HealthStatus

async_engine = create_async_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    echo=settings.ENVIRONMENT == "local" and settings.LOG_LEVEL == "DEBUG",
    pool_pre_ping=True,
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session with automatic transaction management.

    每个请求一个事务：列表接口的分页查询与补充计数在同一快照内完成，
    详情接口的读取与浏览量自增一起提交。
    """
    async with AsyncSession(async_engine, expire_on_commit=False) as session:
        async with session.begin():
            yield session


async def init_db() -> None:
    """Initialize database connection."""
    try:
        async with async_engine.begin() as conn:
            # 测试连接
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection established successfully")
    except Exception as e:
        logger.error(f"Failed to connect to database: {e}")
        raise


async def close_db() -> None:
    """Dispose the connection pool on shutdown."""
    await async_engine.dispose()
    logger.info("Database connection pool disposed")


async def check_db_health() -> DatabaseHealthResult:
    """检查数据库健康状态。

    Returns:
        DatabaseHealthResult: 健康检查结果
    """
    try:
        async with async_engine.connect() as conn:
            result = await conn.execute(text("SELECT version()"))
            version = result.scalar()

            return DatabaseHealthResult(
                status=HealthStatus.OK,
                connected=True,
                version=version.split(",")[0] if version else "unknown",
            )
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        return DatabaseHealthResult(
            status=HealthStatus.ERROR,
            connected=False,
            error=str(e),
        )
