"""
Leaderboard-wide constants.

This module contains the fixed values used by the ranking engine, the
data source and the embed renderer.
"""

class GroupingConstants:
    """Constants for country/team aggregation."""
    
    # Bucket for rows with no country or team
    UNKNOWN_GROUP = "Unknown"


class DisplayConstants:
    """Constants for leaderboard display windows."""
    
    # Sentinel for "no cap" on the display window
    UNLIMITED = "all"
    
    # Limits offered to users in the limit dropdown
    LIMIT_CHOICES = (10, 25, 50, 100, UNLIMITED)
    
    # Ranks that earn medal styling
    MEDAL_RANKS = 3
    MEDALS = {1: "gold", 2: "silver", 3: "bronze"}


class TeamConstants:
    """Team aliases as stored by the companion app."""
    
    # Color names, team names and hex codes all map onto a team
    TEAM_ALIASES = {
        'red': 'Valor',
        'blue': 'Mystic',
        'yellow': 'Instinct',
        'valor': 'Valor',
        'mystic': 'Mystic',
        'instinct': 'Instinct',
        '#ff0000': 'Valor',
        '#0000ff': 'Mystic',
        '#ffff00': 'Instinct',
    }


class UIConstants:
    """Constants for Discord leaderboard embeds."""
    
    # Embed colors
    LIVE_EMBED_COLOR = 0x3498db    # Blue
    LOCKED_EMBED_COLOR = 0x95a5a6  # Grey for finalized periods
    
    # Emoji for UI elements
    MEDAL_EMOJI = {"gold": "🥇", "silver": "🥈", "bronze": "🥉"}
    LOCK_EMOJI = "🔒"
    TROPHY_EMOJI = "🏆"
    SEPARATOR = "⋯"
