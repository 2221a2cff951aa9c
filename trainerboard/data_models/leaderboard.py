"""
Leaderboard data models for the ranking and display-windowing engine.

Provides closed enumerations for the leaderboard filters and immutable data
transfer objects for raw statistic rows, ranked rows and windowed rows.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Optional, Union

from trainerboard.config import Config
from trainerboard.constants import DisplayConstants
from trainerboard.utils.leaderboard_exceptions import InvalidFilterError, InvalidLimitError


class Metric(Enum):
    EXPERIENCE = "experience"
    CATCHES = "catches"
    DISTANCE = "distance"
    LANDMARKS = "landmarks"
    UNIQUE_ENTRIES = "unique_entries"


class Period(Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ALL_TIME = "all_time"

    @property
    def prefers_delta(self) -> bool:
        """Weekly and monthly views rank by the period's change."""
        return self is not Period.ALL_TIME

    @property
    def has_locked(self) -> bool:
        """All-time is always live; it never has a finalized snapshot."""
        return self is not Period.ALL_TIME


class AggregationMode(Enum):
    NONE = "none"
    BY_COUNTRY = "by_country"
    BY_TEAM = "by_team"


class AggregationType(Enum):
    COUNTRY = "country"
    TEAM = "team"


# An integer cap or DisplayConstants.UNLIMITED
DisplayLimit = Union[int, str]


@dataclass(frozen=True)
class MetricPair:
    """Period change and running total for one metric."""
    delta: Optional[float] = None
    total: Optional[float] = None


@dataclass(frozen=True)
class StatRow:
    """One player's statistics for a period, or one synthetic group row."""
    display_name: str
    player_id: Optional[str] = None
    country_name: Optional[str] = None
    team_key: Optional[str] = None
    experience: MetricPair = field(default_factory=MetricPair)
    catches: MetricPair = field(default_factory=MetricPair)
    distance: MetricPair = field(default_factory=MetricPair)
    landmarks: MetricPair = field(default_factory=MetricPair)
    unique_entries: MetricPair = field(default_factory=MetricPair)
    aggregation_type: Optional[AggregationType] = None
    member_count: int = 1

    def pair(self, metric: Metric) -> MetricPair:
        return getattr(self, metric.value)

    @property
    def is_aggregated(self) -> bool:
        return self.aggregation_type is not None


@dataclass(frozen=True)
class RankedRow:
    """Single ranked leaderboard row."""
    rank: int
    display_name: str
    metric_value: float
    country_name: Optional[str] = None
    team_key: Optional[str] = None
    is_aggregated: bool = False
    aggregation_type: Optional[AggregationType] = None
    source_player_id: Optional[str] = None
    is_current_user: bool = False
    member_count: int = 1

    @property
    def is_top_three(self) -> bool:
        return self.rank <= DisplayConstants.MEDAL_RANKS

    @property
    def medal(self) -> Optional[str]:
        return DisplayConstants.MEDALS.get(self.rank)


@dataclass(frozen=True)
class WindowedRow(RankedRow):
    """Ranked row as placed in a display window."""
    is_separated: bool = False

    @classmethod
    def from_ranked(cls, row: RankedRow, **changes) -> "WindowedRow":
        values = {f.name: getattr(row, f.name) for f in fields(RankedRow)}
        values.update(changes)
        return cls(**values)


@dataclass(frozen=True)
class GroupFilter:
    """Restricts a data source query to one country or team."""
    mode: AggregationMode
    value: str


@dataclass(frozen=True)
class LeaderboardQuery:
    """Everything that selects one leaderboard view."""
    period: Period = Period.WEEKLY
    metric: Metric = Metric.EXPERIENCE
    aggregation_mode: AggregationMode = AggregationMode.NONE
    limit: DisplayLimit = 10
    group_filter: Optional[GroupFilter] = None

    @property
    def is_unlimited(self) -> bool:
        return self.limit == DisplayConstants.UNLIMITED

    @property
    def cache_key(self) -> str:
        group = f"{self.group_filter.mode.value}={self.group_filter.value}" if self.group_filter else "-"
        return f"{self.period.value}:{self.metric.value}:{self.aggregation_mode.value}:{self.limit}:{group}"

    @classmethod
    def parse(
        cls,
        period: str = "weekly",
        metric: str = "experience",
        aggregation_mode: str = "none",
        limit: Union[str, int, None] = None,
        group_filter: Optional[GroupFilter] = None,
        default_limit: Optional[int] = None
    ) -> "LeaderboardQuery":
        """
        Build a query from user-facing option strings.

        Raises:
            InvalidFilterError: If a period, metric or grouping name is unknown
            InvalidLimitError: If the limit is not a positive integer or 'all'
        """
        parsed_period = _parse_enum(Period, "period", period)
        parsed_limit = parse_display_limit(limit, default_limit or Config.DEFAULT_DISPLAY_LIMIT)
        # All-time boards are never capped
        if parsed_period is Period.ALL_TIME:
            parsed_limit = DisplayConstants.UNLIMITED
        return cls(
            period=parsed_period,
            metric=_parse_enum(Metric, "metric", metric),
            aggregation_mode=_parse_enum(AggregationMode, "grouping", aggregation_mode),
            limit=parsed_limit,
            group_filter=group_filter,
        )


def parse_display_limit(limit: Union[str, int, None], default: int = 10) -> DisplayLimit:
    """Parse '25', 25, 'all' or None into a display limit."""
    if limit is None:
        return default
    if isinstance(limit, str):
        text = limit.strip().lower()
        if text == DisplayConstants.UNLIMITED:
            return DisplayConstants.UNLIMITED
        try:
            limit = int(text)
        except ValueError:
            raise InvalidLimitError(limit)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidLimitError(limit)
    return limit


def _parse_enum(enum_cls, kind: str, value):
    if isinstance(value, enum_cls):
        return value
    normalized = str(value).strip().lower().replace("-", "_")
    for member in enum_cls:
        if member.value == normalized:
            return member
    raise InvalidFilterError(kind, str(value), [m.value for m in enum_cls])


@dataclass(frozen=True)
class LeaderboardResult:
    """Ranked and windowed output of one pipeline run."""
    period: Period
    metric: Metric
    aggregation_mode: AggregationMode
    limit: DisplayLimit
    is_locked: bool
    ranked: List[RankedRow]
    rows: List[WindowedRow]

    @property
    def total_entries(self) -> int:
        return len(self.ranked)

    @property
    def separated_row(self) -> Optional[WindowedRow]:
        if self.rows and self.rows[-1].is_separated:
            return self.rows[-1]
        return None

    @property
    def current_user_row(self) -> Optional[RankedRow]:
        return next((row for row in self.ranked if row.is_current_user), None)


@dataclass(frozen=True)
class LeaderboardSplit:
    """Live and locked results, shown in separate regions."""
    live: LeaderboardResult
    locked: Optional[LeaderboardResult] = None


@dataclass(frozen=True)
class LeaderboardResponse:
    """Service response; split is None when data could not be loaded."""
    query: LeaderboardQuery
    split: Optional[LeaderboardSplit]
    is_stale: bool = False
    from_cache: bool = False
    error_message: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self.split is not None
