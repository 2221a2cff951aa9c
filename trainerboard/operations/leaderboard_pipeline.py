"""
Leaderboard pipeline operations.

Runs resolve -> aggregate -> rank -> window for one dataset, and once each
for the live and locked datasets of a period. The two results are never
merged; callers show them in separate regions.
"""

import logging
from typing import List, Optional

from trainerboard.data_models.leaderboard import (
    LeaderboardQuery, LeaderboardResult, LeaderboardSplit, RankedRow, StatRow
)
from trainerboard.utils.grouping import aggregate
from trainerboard.utils.ranking import rank_rows
from trainerboard.utils.windowing import select_window

logger = logging.getLogger(__name__)


def run_pipeline(
    rows: List[StatRow],
    query: LeaderboardQuery,
    current_user_id: Optional[str] = None,
    is_locked: bool = False
) -> LeaderboardResult:
    """Rank and window one dataset for the given query."""
    grouped = aggregate(rows, query.aggregation_mode, query.metric, query.period)
    ranked = rank_rows(grouped, query.metric, query.period, current_user_id)
    windowed = select_window(ranked, query.limit, current_user_id, query.aggregation_mode)
    
    return LeaderboardResult(
        period=query.period,
        metric=query.metric,
        aggregation_mode=query.aggregation_mode,
        limit=query.limit,
        is_locked=is_locked,
        ranked=ranked,
        rows=windowed,
    )


def build_split(
    live_rows: List[StatRow],
    locked_rows: Optional[List[StatRow]],
    query: LeaderboardQuery,
    current_user_id: Optional[str] = None
) -> LeaderboardSplit:
    """
    Run the pipeline for the live rows and, where the period has one, the
    locked rows.
    
    Args:
        live_rows: Rows for the period still in progress
        locked_rows: Rows for the most recently completed period, or None
        query: Board selection shared by both runs
        current_user_id: Viewer's player id
        
    Returns:
        LeaderboardSplit; locked is None for all-time boards and when no
        locked rows were supplied
    """
    live = run_pipeline(live_rows, query, current_user_id, is_locked=False)
    
    if not query.period.has_locked:
        if locked_rows:
            logger.debug(f"Ignoring {len(locked_rows)} locked rows for {query.period.value} board")
        return LeaderboardSplit(live=live, locked=None)
    
    if locked_rows is None:
        return LeaderboardSplit(live=live, locked=None)
    
    locked = run_pipeline(locked_rows, query, current_user_id, is_locked=True)
    return LeaderboardSplit(live=live, locked=locked)


def select_export_result(split: LeaderboardSplit) -> LeaderboardResult:
    """Prefer the finalized locked result for export whenever it has rows."""
    locked = split.locked
    if locked is not None and locked.period.has_locked and locked.ranked:
        return locked
    return split.live


def export_rows(result: LeaderboardResult, top_n: int) -> List[RankedRow]:
    """Top-N ranked rows for image export; the viewer is never appended."""
    return result.ranked[:top_n]
