from sqlalchemy import (
    Column, Integer, String, DateTime, Boolean, Float, Date, Index
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from trainerboard.data_models.leaderboard import Metric, MetricPair, StatRow

Base = declarative_base()

class PlayerPeriodStats(Base):
    """
    One trainer's statistics for a leaderboard period.
    
    Each metric is stored as a period delta and a running total. Either may
    be NULL when the app has not reported it. Live rows accumulate during
    the period; locked rows are the frozen snapshot of the last completed
    weekly or monthly period.
    """
    __tablename__ = 'player_period_stats'
    
    id = Column(Integer, primary_key=True)
    player_id = Column(String(64), nullable=False, index=True)
    display_name = Column(String(100), nullable=False)
    country = Column(String(100), nullable=True)
    team = Column(String(20), nullable=True)
    
    # weekly, monthly or all_time
    period = Column(String(10), nullable=False)
    is_locked = Column(Boolean, default=False, nullable=False)
    period_start = Column(Date, nullable=True)
    
    # Metric pairs
    experience_delta = Column(Float, nullable=True)
    experience_total = Column(Float, nullable=True)
    catches_delta = Column(Float, nullable=True)
    catches_total = Column(Float, nullable=True)
    distance_delta = Column(Float, nullable=True)
    distance_total = Column(Float, nullable=True)
    landmarks_delta = Column(Float, nullable=True)
    landmarks_total = Column(Float, nullable=True)
    unique_entries_delta = Column(Float, nullable=True)
    unique_entries_total = Column(Float, nullable=True)
    
    # Metadata
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
    
    __table_args__ = (
        Index('idx_period_stats_lookup', 'period', 'is_locked'),
    )
    
    def to_stat_row(self) -> StatRow:
        """Convert to the engine's immutable row."""
        pairs = {
            metric.value: MetricPair(
                delta=getattr(self, f"{metric.value}_delta"),
                total=getattr(self, f"{metric.value}_total"),
            )
            for metric in Metric
        }
        return StatRow(
            display_name=self.display_name,
            player_id=self.player_id,
            country_name=self.country,
            team_key=self.team,
            **pairs
        )
    
    def __repr__(self):
        return f"<PlayerPeriodStats(player_id='{self.player_id}', period='{self.period}', locked={self.is_locked})>"
