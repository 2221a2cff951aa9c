"""
Services package for the trainer leaderboard.

Data loading, caching and request staleness around the ranking engine.
"""

from .base import BaseService
from .leaderboard import LeaderboardService
from .stat_source import DatabaseStatSource, StatRowSource

__all__ = ['BaseService', 'LeaderboardService', 'DatabaseStatSource', 'StatRowSource']
