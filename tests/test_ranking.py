from trainerboard.data_models.leaderboard import AggregationMode, Metric, Period
from trainerboard.utils.grouping import aggregate
from trainerboard.utils.ranking import rank_rows


class TestRankRows:
    def test_empty_input(self):
        assert rank_rows([], Metric.EXPERIENCE, Period.WEEKLY) == []

    def test_sorts_descending_by_resolved_value(self, make_row):
        rows = [
            make_row("low", xp_delta=1),
            make_row("high", xp_delta=50),
            make_row("mid", xp_delta=None, xp_total=20),
        ]
        ranked = rank_rows(rows, Metric.EXPERIENCE, Period.WEEKLY)

        assert [r.source_player_id for r in ranked] == ["high", "mid", "low"]
        assert [r.metric_value for r in ranked] == [50, 20, 1]

    def test_ranks_are_dense_with_ties(self, make_row):
        rows = [make_row(f"p{i}", xp_delta=float(i % 3)) for i in range(10)]
        ranked = rank_rows(rows, Metric.EXPERIENCE, Period.WEEKLY)

        assert [r.rank for r in ranked] == list(range(1, 11))

    def test_ties_keep_input_order(self, make_row):
        rows = [
            make_row("a", xp_delta=10),
            make_row("b", xp_delta=20),
            make_row("c", xp_delta=10),
            make_row("d", xp_delta=10),
        ]
        ranked = rank_rows(rows, Metric.EXPERIENCE, Period.WEEKLY)

        assert [r.source_player_id for r in ranked] == ["b", "a", "c", "d"]

    def test_top_three_and_medals(self, ladder):
        ranked = rank_rows(ladder(5), Metric.EXPERIENCE, Period.WEEKLY)

        assert [r.is_top_three for r in ranked] == [True, True, True, False, False]
        assert [r.medal for r in ranked] == ["gold", "silver", "bronze", None, None]

    def test_marks_current_user(self, ladder):
        ranked = rank_rows(ladder(5), Metric.EXPERIENCE, Period.WEEKLY, current_user_id="p4")

        assert [r.is_current_user for r in ranked] == [False, False, False, True, False]

    def test_period_changes_order(self, make_row):
        rows = [make_row("a", xp_delta=5, xp_total=100), make_row("b", xp_delta=1, xp_total=900)]

        assert rank_rows(rows, Metric.EXPERIENCE, Period.WEEKLY)[0].source_player_id == "a"
        assert rank_rows(rows, Metric.EXPERIENCE, Period.ALL_TIME)[0].source_player_id == "b"

    def test_group_rows_have_no_source_player(self, make_row):
        rows = [make_row("a", country="US", xp_delta=5), make_row("b", country="JP", xp_delta=9)]
        groups = aggregate(rows, AggregationMode.BY_COUNTRY, Metric.EXPERIENCE, Period.WEEKLY)
        ranked = rank_rows(groups, Metric.EXPERIENCE, Period.WEEKLY, current_user_id="a")

        assert [r.display_name for r in ranked] == ["JP", "US"]
        assert all(r.is_aggregated for r in ranked)
        assert all(r.source_player_id is None for r in ranked)
        assert not any(r.is_current_user for r in ranked)
