"""
Country and team aggregation for leaderboard views.

Collapses player rows into one synthetic row per country or team whose
metric pairs are the field-wise sums of the members' pairs.
"""

import logging
from typing import Dict, List, Optional

from trainerboard.constants import GroupingConstants
from trainerboard.data_models.leaderboard import (
    AggregationMode, AggregationType, Metric, MetricPair, Period, StatRow
)

logger = logging.getLogger(__name__)


_MODE_TO_TYPE = {
    AggregationMode.BY_COUNTRY: AggregationType.COUNTRY,
    AggregationMode.BY_TEAM: AggregationType.TEAM,
}


def normalize_group_key(value: Optional[str]) -> str:
    """Grouping key for a country name or team key; blank values share the Unknown bucket."""
    if value is None or not value.strip():
        return GroupingConstants.UNKNOWN_GROUP
    return value.strip().lower()


def group_value(row: StatRow, mode: AggregationMode) -> Optional[str]:
    """Raw country name or team key a row is grouped by."""
    if mode is AggregationMode.BY_COUNTRY:
        return row.country_name
    if mode is AggregationMode.BY_TEAM:
        return row.team_key
    return None


def _sum_optional(a: Optional[float], b: Optional[float]) -> Optional[float]:
    # Stays absent only while every member is absent
    if a is None and b is None:
        return None
    return (a or 0) + (b or 0)


def _add_pairs(a: MetricPair, b: MetricPair) -> MetricPair:
    return MetricPair(delta=_sum_optional(a.delta, b.delta), total=_sum_optional(a.total, b.total))


def _start_group(row: StatRow, raw_value: Optional[str], key: str, aggregation_type: AggregationType) -> StatRow:
    # First member decides the display name for the group
    label = GroupingConstants.UNKNOWN_GROUP if key == GroupingConstants.UNKNOWN_GROUP else raw_value.strip()
    return StatRow(
        display_name=label,
        player_id=None,
        country_name=label if aggregation_type is AggregationType.COUNTRY else None,
        team_key=label if aggregation_type is AggregationType.TEAM else None,
        experience=row.experience,
        catches=row.catches,
        distance=row.distance,
        landmarks=row.landmarks,
        unique_entries=row.unique_entries,
        aggregation_type=aggregation_type,
        member_count=1,
    )


def _merge_into(group: StatRow, row: StatRow) -> StatRow:
    return StatRow(
        display_name=group.display_name,
        player_id=None,
        country_name=group.country_name,
        team_key=group.team_key,
        experience=_add_pairs(group.experience, row.experience),
        catches=_add_pairs(group.catches, row.catches),
        distance=_add_pairs(group.distance, row.distance),
        landmarks=_add_pairs(group.landmarks, row.landmarks),
        unique_entries=_add_pairs(group.unique_entries, row.unique_entries),
        aggregation_type=group.aggregation_type,
        member_count=group.member_count + 1,
    )


def aggregate(rows: List[StatRow], mode: AggregationMode, metric: Metric, period: Period) -> List[StatRow]:
    """
    Group rows by country or team.

    Every metric is summed, not only the selected one, so a group row can be
    re-ranked by any metric. The metric and period keep the pipeline stages
    on one signature; values are resolved later by the ranker.

    Args:
        rows: Player rows for one dataset
        mode: Grouping mode; NONE returns rows unchanged
        metric: Metric selected on the board
        period: Board period

    Returns:
        The input list for NONE, otherwise one synthetic row per group in
        first-seen order
    """
    if mode is AggregationMode.NONE:
        return rows

    aggregation_type = _MODE_TO_TYPE[mode]
    groups: Dict[str, StatRow] = {}

    for row in rows:
        raw_value = group_value(row, mode)
        key = normalize_group_key(raw_value)
        if key in groups:
            groups[key] = _merge_into(groups[key], row)
        else:
            groups[key] = _start_group(row, raw_value, key, aggregation_type)

    logger.debug(
        f"Aggregated {len(rows)} rows into {len(groups)} {aggregation_type.value} groups "
        f"for {metric.value}/{period.value}"
    )
    return list(groups.values())
