import pytest

from trainerboard.config import Config
from trainerboard.data_models.leaderboard import LeaderboardQuery


class TestConfig:
    def test_defaults(self):
        assert hasattr(Config, 'DATABASE_URL')
        assert Config.DEFAULT_DISPLAY_LIMIT > 0
        assert Config.CACHE_TTL > 0
        Config.validate()

    def test_validate_rejects_non_positive_limits(self, monkeypatch):
        monkeypatch.setattr(Config, 'DEFAULT_DISPLAY_LIMIT', 0)
        with pytest.raises(ValueError):
            Config.validate()

    def test_query_parse_uses_configured_default_limit(self, monkeypatch):
        monkeypatch.setattr(Config, 'DEFAULT_DISPLAY_LIMIT', 25)
        assert LeaderboardQuery.parse(period="weekly").limit == 25
