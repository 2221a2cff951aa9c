"""
Leaderboard service for live and locked period boards.

Loads rows from a StatRowSource, runs the ranking pipeline for the live and
locked datasets, and caches the result. Each viewer's requests carry a
generation number so a slow, superseded request never overwrites a newer one.
"""

from typing import Dict, List, Optional
import asyncio
import time
import logging

from trainerboard.config import Config
from trainerboard.data_models.leaderboard import (
    LeaderboardQuery, LeaderboardResponse, RankedRow
)
from trainerboard.operations.leaderboard_pipeline import (
    build_split, export_rows, select_export_result
)
from trainerboard.services.stat_source import StatRowSource
from trainerboard.utils.leaderboard_exceptions import DataSourceError

logger = logging.getLogger(__name__)


class LeaderboardService:
    """Service for leaderboard queries and ranking with caching."""

    def __init__(self, stat_source: StatRowSource, cache_ttl: Optional[int] = None, cache_max_size: Optional[int] = None):
        Config.validate()
        self.stat_source = stat_source
        # TTL cache for leaderboard responses
        self._cache: Dict[str, LeaderboardResponse] = {}
        self._cache_timestamps: Dict[str, float] = {}
        self._cache_ttl = cache_ttl if cache_ttl is not None else Config.CACHE_TTL
        self._cache_max_size = cache_max_size if cache_max_size is not None else Config.CACHE_MAX_SIZE
        self._cache_lock = asyncio.Lock()
        # Latest request generation per view
        self._generations: Dict[str, int] = {}

    @staticmethod
    def _cache_key(query: LeaderboardQuery, current_user_id: Optional[str]) -> str:
        return f"leaderboard:{query.cache_key}:{current_user_id}"

    async def _is_cache_valid(self, key: str) -> bool:
        """Check if cached leaderboard data is still valid."""
        async with self._cache_lock:
            if key not in self._cache_timestamps:
                return False
            return time.time() - self._cache_timestamps[key] < self._cache_ttl

    async def _cleanup_cache(self):
        """Remove expired entries and enforce size limits."""
        async with self._cache_lock:
            current_time = time.time()
            # Remove expired entries
            expired_keys = [
                key for key, timestamp in self._cache_timestamps.items()
                if current_time - timestamp >= self._cache_ttl
            ]
            for key in expired_keys:
                self._cache.pop(key, None)
                self._cache_timestamps.pop(key, None)

            # Enforce size limit by removing oldest entries
            if len(self._cache) > self._cache_max_size:
                sorted_keys = sorted(
                    self._cache_timestamps.items(),
                    key=lambda x: x[1]
                )
                keys_to_remove = [key for key, _ in sorted_keys[:len(self._cache) - self._cache_max_size]]
                for key in keys_to_remove:
                    self._cache.pop(key, None)
                    self._cache_timestamps.pop(key, None)

    async def _next_generation(self, view_key: str) -> int:
        async with self._cache_lock:
            generation = self._generations.get(view_key, 0) + 1
            self._generations[view_key] = generation
            return generation

    async def get_leaderboard(
        self,
        query: LeaderboardQuery,
        current_user_id: Optional[str] = None,
        view_id: Optional[str] = None
    ) -> LeaderboardResponse:
        """
        Get the live and locked boards for a query.

        Args:
            query: Period, metric, grouping, limit and filter selection
            current_user_id: Viewer's player id for the separated row
            view_id: Identifies the UI region issuing requests; a newer
                request for the same view makes older ones stale.
                Defaults to the viewer id.

        Returns:
            LeaderboardResponse; split is None when the data source failed
        """
        cache_key = self._cache_key(query, current_user_id)
        view_key = view_id or current_user_id or "anonymous"
        generation = await self._next_generation(view_key)

        if await self._is_cache_valid(cache_key):
            async with self._cache_lock:
                cached = self._cache[cache_key]
            logger.debug(f"Cache hit for {cache_key}")
            return LeaderboardResponse(query=query, split=cached.split, from_cache=True)

        # Cleanup cache periodically
        await self._cleanup_cache()

        try:
            live_rows = await self.stat_source.fetch_rows(
                query.period, locked=False, group_filter=query.group_filter
            )
            locked_rows = None
            if query.period.has_locked:
                # An empty snapshot means the period has not been finalized yet
                locked_rows = await self.stat_source.fetch_rows(
                    query.period, locked=True, group_filter=query.group_filter
                ) or None
        except DataSourceError as e:
            logger.error(f"Leaderboard unavailable for {cache_key}: {e}")
            return LeaderboardResponse(query=query, split=None, error_message=e.user_message)

        split = build_split(live_rows, locked_rows, query, current_user_id)

        async with self._cache_lock:
            if self._generations.get(view_key) != generation:
                logger.info(f"Discarding stale leaderboard result for view {view_key} (generation {generation})")
                return LeaderboardResponse(query=query, split=split, is_stale=True)

            response = LeaderboardResponse(query=query, split=split)
            self._cache[cache_key] = response
            self._cache_timestamps[cache_key] = time.time()

        return response

    async def get_export_rows(
        self,
        query: LeaderboardQuery,
        current_user_id: Optional[str] = None,
        top_n: Optional[int] = None
    ) -> List[RankedRow]:
        """Top-N rows for image export, preferring the locked board when finalized."""
        response = await self.get_leaderboard(query, current_user_id, view_id="export")
        if not response.is_available:
            return []
        result = select_export_result(response.split)
        return export_rows(result, top_n or Config.EXPORT_TOP_N)

    async def clear_cache(self):
        """Clears the entire leaderboard cache."""
        async with self._cache_lock:
            self._cache.clear()
            self._cache_timestamps.clear()
        logger.info("Leaderboard cache cleared.")
