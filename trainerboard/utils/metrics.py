"""
Metric resolution for leaderboard ranking.

Picks the number a row is ranked by: the period's change for weekly and
monthly boards, the running total for the all-time board, each falling back
to the other when absent.
"""

from trainerboard.data_models.leaderboard import Metric, Period, StatRow


def resolve_metric_value(row: StatRow, metric: Metric, period: Period) -> float:
    """
    Resolve the value to rank a row by.
    
    Args:
        row: Player or group statistics
        metric: Metric selected on the board
        period: Board period; decides delta or total preference
        
    Returns:
        The preferred value, the other value if the preferred one is absent,
        or 0 when both are absent
    """
    pair = row.pair(metric)
    if period.prefers_delta:
        first, second = pair.delta, pair.total
    else:
        first, second = pair.total, pair.delta
    
    if first is not None:
        return first
    if second is not None:
        return second
    return 0
