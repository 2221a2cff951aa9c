"""
Base service class for leaderboard data services.

Leaderboard services only read; every session scope is rolled back on exit so
nothing a board query touches is ever committed.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

class BaseService:
    """Base class for read-only services with async database session management."""
    
    def __init__(self, session_factory):
        """
        Initialize base service with session factory.
        
        Args:
            session_factory: Async session factory from Database class
        """
        self.session_factory = session_factory
    
    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a read-only scope for async database queries."""
        session = self.session_factory()
        try:
            yield session
        except Exception:
            logger.debug(f"{type(self).__name__} query failed; rolling back read scope")
            raise
        finally:
            await session.rollback()
            await session.close()
