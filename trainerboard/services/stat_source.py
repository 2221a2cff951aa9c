"""
Statistic row sources for the leaderboard service.

The service only depends on the StatRowSource protocol; DatabaseStatSource
is the SQLAlchemy-backed implementation.
"""

import logging
from typing import List, Optional, Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from trainerboard.data_models.leaderboard import AggregationMode, GroupFilter, Period, StatRow
from trainerboard.database.models import PlayerPeriodStats
from trainerboard.services.base import BaseService
from trainerboard.utils.grouping import normalize_group_key
from trainerboard.utils.leaderboard_exceptions import DataSourceError

logger = logging.getLogger(__name__)


class StatRowSource(Protocol):
    """Anything that can load raw rows for a period."""
    
    async def fetch_rows(
        self,
        period: Period,
        locked: bool = False,
        group_filter: Optional[GroupFilter] = None
    ) -> List[StatRow]:
        ...


class DatabaseStatSource(BaseService):
    """Loads period statistics from the player_period_stats table."""
    
    async def fetch_rows(
        self,
        period: Period,
        locked: bool = False,
        group_filter: Optional[GroupFilter] = None
    ) -> List[StatRow]:
        """
        Fetch rows for one period, live or locked.
        
        Args:
            period: Leaderboard period
            locked: Load the finalized snapshot instead of live rows
            group_filter: Restrict to one country or team
            
        Returns:
            Every matching StatRow in storage order; ranking needs the whole period
            
        Raises:
            DataSourceError: If the query fails
        """
        if locked and not period.has_locked:
            return []
        
        query = (
            select(PlayerPeriodStats)
            .where(PlayerPeriodStats.period == period.value)
            .where(PlayerPeriodStats.is_locked == locked)
        )
        
        if group_filter is not None and group_filter.mode is not AggregationMode.NONE:
            column = (
                PlayerPeriodStats.country
                if group_filter.mode is AggregationMode.BY_COUNTRY
                else PlayerPeriodStats.team
            )
            query = query.where(func.lower(func.trim(column)) == normalize_group_key(group_filter.value))
        
        query = query.order_by(PlayerPeriodStats.id)
        
        try:
            async with self.get_session() as session:
                result = await session.execute(query)
                # Rows are detached once the read scope rolls back
                rows = [record.to_stat_row() for record in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to load {period.value} rows (locked={locked}): {e}")
            raise DataSourceError(f"fetch {period.value} rows", str(e)) from e
        
        logger.debug(f"Loaded {len(rows)} {period.value} rows (locked={locked})")
        return rows
