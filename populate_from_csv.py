#!/usr/bin/env python3
"""
CSV Parsing and Leaderboard Data Population

Standalone script for populating the player_period_stats table from a CSV
export of trainer statistics. Each CSV row is one trainer for one period,
live or locked, with a delta and a total column per metric.

Expected columns:
    player_id, display_name, country, team, period, is_locked, period_start,
    experience_delta, experience_total, catches_delta, catches_total,
    distance_delta, distance_total, landmarks_delta, landmarks_total,
    unique_entries_delta, unique_entries_total
"""

import os
import sys
import csv
import asyncio
import argparse
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional

from trainerboard.config import Config
from trainerboard.data_models.leaderboard import Metric, Period
from trainerboard.database.database import Database
from trainerboard.database.models import PlayerPeriodStats


def setup_logging() -> logging.Logger:
    """Setup logging for the population script"""
    Path(Config.LOG_DIR).mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(os.path.join(Config.LOG_DIR, f'csv_population_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log')),
            logging.StreamHandler()
        ]
    )
    return logging.getLogger(__name__)


def parse_optional_number(value: Optional[str], column: str) -> Optional[float]:
    """
    Parse a metric cell; blank cells are absent values, not zero.

    Raises:
        ValueError: If the cell is not a non-negative number
    """
    if value is None or not value.strip():
        return None
    try:
        number = float(value.replace(',', ''))
    except ValueError:
        raise ValueError(f"Column '{column}' is not a number: {value!r}")
    if number < 0:
        raise ValueError(f"Column '{column}' cannot be negative: {value!r}")
    return number


def parse_bool(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in ('1', 'true', 'yes', 'y', 'locked')


def parse_period_start(value: Optional[str]) -> Optional[date]:
    if value is None or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValueError(f"Invalid period_start date: {value!r}")


def parse_stat_row(row: Dict[str, str]) -> PlayerPeriodStats:
    """
    Convert one CSV row into a PlayerPeriodStats record.

    Raises:
        ValueError: If required columns are missing or values are invalid
    """
    player_id = (row.get('player_id') or '').strip()
    display_name = (row.get('display_name') or '').strip()
    if not player_id or not display_name:
        raise ValueError("player_id and display_name are required")

    period_text = (row.get('period') or '').strip().lower().replace('-', '_')
    try:
        period = Period(period_text)
    except ValueError:
        raise ValueError(f"Unknown period: {row.get('period')!r}")

    is_locked = parse_bool(row.get('is_locked'))
    if is_locked and not period.has_locked:
        raise ValueError("all_time rows cannot be locked")

    metric_values = {}
    for metric in Metric:
        for suffix in ('delta', 'total'):
            column = f"{metric.value}_{suffix}"
            metric_values[column] = parse_optional_number(row.get(column), column)

    return PlayerPeriodStats(
        player_id=player_id,
        display_name=display_name,
        country=(row.get('country') or '').strip() or None,
        team=(row.get('team') or '').strip() or None,
        period=period.value,
        is_locked=is_locked,
        period_start=parse_period_start(row.get('period_start')),
        **metric_values
    )


def read_stat_rows(csv_path: str, logger: logging.Logger) -> List[PlayerPeriodStats]:
    """Read and validate every row; invalid rows are logged and skipped."""
    records = []
    with open(csv_path, 'r', encoding='utf-8') as file:
        reader = csv.DictReader(file)
        for row_num, row in enumerate(reader, start=2):  # Start at 2 for CSV line numbers
            try:
                records.append(parse_stat_row(row))
            except ValueError as e:
                logger.warning(f"Line {row_num}: {e}, skipping")
    return records


async def populate_period_stats(csv_path: str, clear_existing: bool = False, database_url: Optional[str] = None) -> Dict[str, int]:
    """
    Populate player_period_stats from CSV.

    Args:
        csv_path: Path to the CSV export
        clear_existing: Delete existing rows first
        database_url: Override Config.DATABASE_URL

    Returns:
        Counts of rows cleared, created and skipped
    """
    logger = logging.getLogger(__name__)

    if not os.path.exists(csv_path):
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    with open(csv_path, 'r', encoding='utf-8') as file:
        total_rows = sum(1 for _ in csv.DictReader(file))
    records = read_stat_rows(csv_path, logger)

    db = Database(database_url)
    cleared = 0
    try:
        await db.initialize()
        if clear_existing:
            cleared = await db.clear_period_stats()
        created = await db.add_period_stats(records)
    except Exception as e:
        logger.error(f"Error during CSV population: {e}")
        raise
    finally:
        await db.close()

    results = {
        'rows_cleared': cleared,
        'rows_created': created,
        'rows_skipped': total_rows - len(records)
    }

    logger.info(
        f"CSV population completed: "
        f"{results['rows_created']} rows created, "
        f"{results['rows_skipped']} rows skipped, "
        f"{results['rows_cleared']} rows cleared"
    )

    return results


async def main():
    """Main entry point for standalone script execution"""
    parser = argparse.ArgumentParser(description="Populate leaderboard statistics from CSV")
    parser.add_argument('csv_path', help="Path to the trainer statistics CSV")
    parser.add_argument('--clear', action='store_true', help="Delete existing rows before import")
    parser.add_argument('--database-url', default=None, help="Override DATABASE_URL")
    args = parser.parse_args()

    logger = setup_logging()

    try:
        logger.info("Starting CSV population script...")
        results = await populate_period_stats(args.csv_path, args.clear, args.database_url)

        print("\n" + "="*50)
        print("CSV POPULATION COMPLETED SUCCESSFULLY")
        print("="*50)
        print(f"Rows created: {results['rows_created']}")
        print(f"Rows skipped: {results['rows_skipped']}")
        print(f"Rows cleared: {results['rows_cleared']}")
        print("="*50)

    except Exception as e:
        logger.error(f"CSV population failed: {e}")
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
