import pytest

from trainerboard.data_models.leaderboard import (
    AggregationMode, GroupFilter, LeaderboardQuery, Metric, Period, RankedRow,
    WindowedRow, parse_display_limit
)
from trainerboard.utils.leaderboard_exceptions import InvalidFilterError, InvalidLimitError


class TestParseDisplayLimit:
    @pytest.mark.parametrize("raw, expected", [("25", 25), (" 10 ", 10), (50, 50), ("all", "all"), ("ALL", "all")])
    def test_valid(self, raw, expected):
        assert parse_display_limit(raw) == expected

    def test_default_when_missing(self):
        assert parse_display_limit(None, default=10) == 10

    @pytest.mark.parametrize("raw", ["0", "-3", "ten", 0, -1, True])
    def test_invalid(self, raw):
        with pytest.raises(InvalidLimitError):
            parse_display_limit(raw)


class TestLeaderboardQueryParse:
    def test_parses_names(self):
        query = LeaderboardQuery.parse(period="Monthly", metric="catches", aggregation_mode="by-team", limit="25")

        assert query.period is Period.MONTHLY
        assert query.metric is Metric.CATCHES
        assert query.aggregation_mode is AggregationMode.BY_TEAM
        assert query.limit == 25

    def test_all_time_is_always_unlimited(self):
        query = LeaderboardQuery.parse(period="all-time", limit="10")
        assert query.period is Period.ALL_TIME
        assert query.is_unlimited

    def test_unknown_metric(self):
        with pytest.raises(InvalidFilterError) as exc_info:
            LeaderboardQuery.parse(metric="steps")
        assert "steps" in exc_info.value.user_message

    def test_cache_key_distinguishes_filters(self):
        a = LeaderboardQuery(group_filter=GroupFilter(AggregationMode.BY_COUNTRY, "JP"))
        b = LeaderboardQuery(group_filter=GroupFilter(AggregationMode.BY_COUNTRY, "AU"))
        assert a.cache_key != b.cache_key
        assert LeaderboardQuery().cache_key == LeaderboardQuery().cache_key


class TestWindowedRow:
    def test_from_ranked_copies_fields(self):
        ranked = RankedRow(rank=4, display_name="Ash", metric_value=12, source_player_id="p4")
        windowed = WindowedRow.from_ranked(ranked, is_separated=True, is_current_user=True)

        assert windowed.rank == 4 and windowed.display_name == "Ash" and windowed.metric_value == 12
        assert windowed.is_separated and windowed.is_current_user
        assert not ranked.is_current_user
