from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from promo_parser.config import settings

engine = create_async_engine(url=settings.database.url(), echo=False, future=True)
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False, autocommit=False)


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Provide a database session scoped to one request.

    :return: database session generator
    """

    session: AsyncSession = SessionLocal()
    try:
        yield session
    finally:
        await session.close()
