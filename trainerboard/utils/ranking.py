"""
Shared ranking utilities for live and locked leaderboards.

Sorts rows by their resolved metric value and assigns dense 1-based ranks.
"""

import logging
from typing import List, Optional

from trainerboard.data_models.leaderboard import Metric, Period, RankedRow, StatRow
from trainerboard.utils.metrics import resolve_metric_value

logger = logging.getLogger(__name__)


def rank_rows(
    rows: List[StatRow],
    metric: Metric,
    period: Period,
    current_user_id: Optional[str] = None
) -> List[RankedRow]:
    """
    Rank rows by resolved metric value, highest first.
    
    Python's sort is stable, so rows with equal values keep their input
    order and the earlier row gets the lower rank number. Ranks run 1..n
    with no gaps, ties included.
    
    Args:
        rows: Player rows or synthetic group rows
        metric: Metric to rank by
        period: Board period, passed to the metric resolver
        current_user_id: Viewer's player id; marks their row when present
        
    Returns:
        Ranked rows in rank order
    """
    valued = [(resolve_metric_value(row, metric, period), row) for row in rows]
    valued.sort(key=lambda item: item[0], reverse=True)
    
    ranked = []
    for rank, (value, row) in enumerate(valued, start=1):
        is_current_user = (
            current_user_id is not None
            and not row.is_aggregated
            and row.player_id == current_user_id
        )
        ranked.append(RankedRow(
            rank=rank,
            display_name=row.display_name,
            metric_value=value,
            country_name=row.country_name,
            team_key=row.team_key,
            is_aggregated=row.is_aggregated,
            aggregation_type=row.aggregation_type,
            source_player_id=None if row.is_aggregated else row.player_id,
            is_current_user=is_current_user,
            member_count=row.member_count,
        ))
    
    logger.debug(f"Ranked {len(ranked)} rows by {metric.value} ({period.value})")
    return ranked
