from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base
from relay_resolver.core.config import get_settings

settings = get_settings()

# Creating the engine does not connect; the first session does.
engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()

async def get_db():
    """Yield one session per request; read-only, so nothing is committed."""
    async with AsyncSessionLocal() as session:
        yield session
