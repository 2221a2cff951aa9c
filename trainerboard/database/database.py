from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from trainerboard.config import Config
from trainerboard.database.models import Base, PlayerPeriodStats
from trainerboard.utils.logger import setup_logger

class Database:
    def __init__(self, database_url: Optional[str] = None):
        self.logger = setup_logger(__name__)
        self.database_url = database_url or Config.DATABASE_URL
        self.engine = None
        self.async_session = None
        
    async def initialize(self):
        """Initialize the database connection and create tables"""
        self.logger.info("Initializing database...")
        
        # Convert sqlite URL to async if needed
        database_url = self.database_url
        if database_url.startswith('sqlite:///'):
            database_url = database_url.replace('sqlite:///', 'sqlite+aiosqlite:///')
        
        self.engine = create_async_engine(
            database_url,
            echo=Config.DEBUG,
            future=True
        )
        
        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False
        )
        
        # Create all tables
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            
        self.logger.info("Database initialized successfully")
    
    @asynccontextmanager
    async def get_session(self):
        """Get a database session"""
        async with self.async_session() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()
    
    async def add_period_stats(self, rows) -> int:
        """Insert PlayerPeriodStats rows in one transaction"""
        async with self.get_session() as session:
            session.add_all(rows)
            await session.commit()
        self.logger.info(f"Added {len(rows)} period stat rows")
        return len(rows)
    
    async def clear_period_stats(self) -> int:
        """Delete every stored period stat row"""
        async with self.get_session() as session:
            result = await session.execute(delete(PlayerPeriodStats))
            await session.commit()
            cleared = result.rowcount
        self.logger.info(f"Cleared {cleared} period stat rows")
        return cleared
    
    async def count_period_stats(self) -> int:
        async with self.get_session() as session:
            return await session.scalar(select(func.count(PlayerPeriodStats.id)))
    
    async def close(self):
        """Close database connections"""
        if self.engine:
            await self.engine.dispose()
            self.logger.info("Database connections closed")
