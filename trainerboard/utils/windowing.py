"""
Display windowing for ranked leaderboards.

Cuts a ranked list down to the requested display limit and, on individual
boards, appends the viewer's own row when it falls outside the window.
"""

import logging
from typing import List, Optional

from trainerboard.constants import DisplayConstants
from trainerboard.data_models.leaderboard import (
    AggregationMode, DisplayLimit, RankedRow, WindowedRow
)

logger = logging.getLogger(__name__)


def select_window(
    ranked_rows: List[RankedRow],
    limit: DisplayLimit,
    current_user_id: Optional[str],
    aggregation_mode: AggregationMode
) -> List[WindowedRow]:
    """
    Select the rows to display.
    
    At most one row is ever separated: it is the last element, it is the
    viewer's row, and it only appears when the viewer ranks below the
    window on an individual (non-grouped) board.
    
    Args:
        ranked_rows: Full ranked list in rank order
        limit: Positive integer cap or DisplayConstants.UNLIMITED
        current_user_id: Viewer's player id, if known
        aggregation_mode: Grouping of the board; grouped boards never separate
        
    Returns:
        Windowed rows, limit + 1 long when the viewer's row was appended
    """
    if limit == DisplayConstants.UNLIMITED:
        return [WindowedRow.from_ranked(row) for row in ranked_rows]
    
    top = [WindowedRow.from_ranked(row) for row in ranked_rows[:limit]]
    
    # Synthetic rows have no single viewer
    if aggregation_mode is not AggregationMode.NONE or current_user_id is None:
        return top
    
    own_row = next((row for row in ranked_rows if row.source_player_id == current_user_id), None)
    if own_row is None or own_row.rank <= limit:
        return top
    
    logger.debug(f"Viewer {current_user_id} at rank {own_row.rank} is outside top {limit}; appending separated row")
    top.append(WindowedRow.from_ranked(own_row, is_separated=True, is_current_user=True))
    return top
