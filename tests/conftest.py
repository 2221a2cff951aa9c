import pytest

from trainerboard.data_models.leaderboard import MetricPair, StatRow


def build_row(player_id, display_name=None, country=None, team=None, xp_delta=None, xp_total=None, **pairs):
    """StatRow with experience set from xp_delta/xp_total and other metrics from MetricPair kwargs."""
    return StatRow(
        display_name=display_name or f"Trainer {player_id}",
        player_id=player_id,
        country_name=country,
        team_key=team,
        experience=MetricPair(delta=xp_delta, total=xp_total),
        **pairs
    )


@pytest.fixture
def make_row():
    return build_row


@pytest.fixture
def ladder(make_row):
    """Factory for n rows with strictly descending weekly XP: p1 has the most."""
    def _ladder(n, **kwargs):
        return [make_row(f"p{i}", xp_delta=float(n - i + 1), xp_total=float(1000 + i), **kwargs) for i in range(1, n + 1)]
    return _ladder
