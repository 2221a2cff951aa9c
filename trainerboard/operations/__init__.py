"""
Operations Layer

Composes the pure ranking stages into complete leaderboard runs.

Architecture:
- Utils layer: metric resolution, grouping, ranking and windowing stages
- Operations layer: pipeline composition and live/locked selection
- Services layer: data loading, caching and request staleness
"""
