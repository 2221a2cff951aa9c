from trainerboard.data_models.leaderboard import AggregationMode, Metric, Period
from trainerboard.utils.ranking import rank_rows
from trainerboard.utils.windowing import select_window


def ranked_ladder(ladder, n, current_user_id=None):
    return rank_rows(ladder(n), Metric.EXPERIENCE, Period.WEEKLY, current_user_id)


class TestSelectWindow:
    def test_user_inside_window(self, ladder):
        ranked = ranked_ladder(ladder, 20, "p7")
        rows = select_window(ranked, 10, "p7", AggregationMode.NONE)

        assert len(rows) == 10
        assert not any(r.is_separated for r in rows)
        assert rows[6].rank == 7
        assert rows[6].is_current_user

    def test_user_outside_window(self, ladder):
        ranked = ranked_ladder(ladder, 200, "p67")
        rows = select_window(ranked, 10, "p67", AggregationMode.NONE)

        assert len(rows) == 11
        assert [r.rank for r in rows[:10]] == list(range(1, 11))
        assert not any(r.is_separated for r in rows[:10])
        last = rows[-1]
        assert last.rank == 67
        assert last.is_separated
        assert last.is_current_user
        assert last.source_player_id == "p67"

    def test_aggregated_view_never_separates(self, ladder):
        ranked = ranked_ladder(ladder, 200, "p67")
        rows = select_window(ranked, 10, "p67", AggregationMode.BY_COUNTRY)

        assert len(rows) == 10
        assert not any(r.is_separated for r in rows)

    def test_unlimited_returns_everything_in_order(self, ladder):
        ranked = ranked_ladder(ladder, 50, "p40")
        rows = select_window(ranked, "all", "p40", AggregationMode.NONE)

        assert len(rows) == 50
        assert [r.rank for r in rows] == [r.rank for r in ranked]
        assert not any(r.is_separated for r in rows)
        assert [r.is_current_user for r in rows] == [r.is_current_user for r in ranked]

    def test_fewer_rows_than_limit(self, ladder):
        ranked = ranked_ladder(ladder, 4)
        rows = select_window(ranked, 10, None, AggregationMode.NONE)

        assert len(rows) == 4

    def test_viewer_missing_or_absent(self, ladder):
        ranked = ranked_ladder(ladder, 30)

        assert len(select_window(ranked, 10, None, AggregationMode.NONE)) == 10
        assert len(select_window(ranked, 10, "nobody", AggregationMode.NONE)) == 10

    def test_viewer_at_window_boundary(self, ladder):
        ranked = ranked_ladder(ladder, 30, "p10")

        inside = select_window(ranked, 10, "p10", AggregationMode.NONE)
        assert len(inside) == 10 and inside[-1].is_current_user and not inside[-1].is_separated

        ranked = ranked_ladder(ladder, 30, "p11")
        outside = select_window(ranked, 10, "p11", AggregationMode.NONE)
        assert len(outside) == 11 and outside[-1].rank == 11 and outside[-1].is_separated

    def test_at_most_one_separated_row_and_it_is_last(self, ladder):
        ranked = ranked_ladder(ladder, 60)
        for limit in (1, 5, 10, 25, 59, 60, 100):
            for viewer in ("p1", "p30", "p60", None):
                rows = select_window(ranked, limit, viewer, AggregationMode.NONE)
                separated = [i for i, r in enumerate(rows) if r.is_separated]
                assert len(separated) <= 1
                if separated:
                    assert separated[0] == len(rows) - 1
                    assert rows[-1].is_current_user
                    assert len(rows) == limit + 1

    def test_ranked_input_is_not_modified(self, ladder):
        ranked = ranked_ladder(ladder, 20, "p15")
        select_window(ranked, 5, "p15", AggregationMode.NONE)

        assert len(ranked) == 20
        assert ranked[14].is_current_user
