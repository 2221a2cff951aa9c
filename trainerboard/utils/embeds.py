"""
Embed utilities for leaderboard display.

Renders windowed leaderboard results as Discord embeds. The viewer's own row
is special-cased only through is_current_user and is_separated.
"""

import discord
from typing import List, Optional

from trainerboard.constants import UIConstants
from trainerboard.data_models.leaderboard import (
    AggregationType, LeaderboardResult, LeaderboardSplit, WindowedRow
)
from trainerboard.utils.formatting import format_metric_value, metric_label, team_display_name


def _row_name(row: WindowedRow) -> str:
    if row.aggregation_type is AggregationType.TEAM:
        name = team_display_name(row.team_key)
    else:
        name = row.display_name
    if row.is_aggregated:
        name = f"{name} ({row.member_count})"
    return name


def format_row_line(row: WindowedRow, result: LeaderboardResult) -> str:
    """One leaderboard line: medal or rank, name, value; the viewer in bold."""
    position = UIConstants.MEDAL_EMOJI[row.medal] if row.medal else f"#{row.rank}"
    line = f"{position} {_row_name(row)} - {format_metric_value(result.metric, row.metric_value)}"
    if row.is_current_user:
        line = f"**{line}**"
    return line


def build_leaderboard_embed(
    result: LeaderboardResult,
    title: Optional[str] = None,
    empty_message: str = "The leaderboard is empty."
) -> discord.Embed:
    """
    Build a leaderboard embed from one pipeline result.
    
    Args:
        result: Ranked and windowed result
        title: Custom title; defaults to period and lock state
        empty_message: Message shown when there are no rows
        
    Returns:
        Formatted Discord embed
    """
    period_name = result.period.value.replace('_', ' ').title()
    if title is None:
        title = f"{UIConstants.LOCK_EMOJI} Final {period_name} Results" if result.is_locked else f"{UIConstants.TROPHY_EMOJI} {period_name} Leaderboard"
    
    embed = discord.Embed(
        title=title,
        description=f"Sorted by: **{metric_label(result.metric)}**",
        color=UIConstants.LOCKED_EMBED_COLOR if result.is_locked else UIConstants.LIVE_EMBED_COLOR
    )
    
    if not result.rows:
        embed.description += f"\n\n{empty_message}"
        return embed
    
    lines = []
    for row in result.rows:
        if row.is_separated:
            lines.append(UIConstants.SEPARATOR)
        lines.append(format_row_line(row, result))
    
    embed.description += "\n\n" + "\n".join(lines)
    embed.set_footer(text=f"Showing {len(result.rows)} of {result.total_entries} entries")
    return embed


def build_split_embeds(split: LeaderboardSplit) -> List[discord.Embed]:
    """Live embed first, then the locked results when the period has them."""
    embeds = [build_leaderboard_embed(split.live)]
    if split.locked is not None and split.locked.rows:
        embeds.append(build_leaderboard_embed(split.locked))
    return embeds
