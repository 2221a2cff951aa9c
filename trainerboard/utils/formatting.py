"""
Display formatting helpers for leaderboard rows.
"""

from typing import Optional

from trainerboard.constants import GroupingConstants, TeamConstants
from trainerboard.data_models.leaderboard import Metric

METRIC_LABELS = {
    Metric.EXPERIENCE: "Total XP",
    Metric.CATCHES: "Pokemon Caught",
    Metric.DISTANCE: "Distance Walked",
    Metric.LANDMARKS: "Pokestops Visited",
    Metric.UNIQUE_ENTRIES: "Unique Entries",
}


def metric_label(metric: Metric) -> str:
    return METRIC_LABELS[metric]


def format_metric_value(metric: Metric, value: Optional[float]) -> str:
    """Thousands separators; distance in km with one decimal."""
    if metric is Metric.DISTANCE:
        return f"{value or 0:,.1f} km"
    if not value:
        return "0"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.1f}"


def team_display_name(team_key: Optional[str]) -> str:
    """Resolve a stored team color, name or hex code to the team's name."""
    if team_key is None or not team_key.strip():
        return GroupingConstants.UNKNOWN_GROUP
    return TeamConstants.TEAM_ALIASES.get(team_key.strip().lower(), team_key.strip())
