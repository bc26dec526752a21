#!/usr/bin/env python3
"""
Load items into the list pages index.

Reads a CSV of items (item_id, datasource, bundle, title, created,
published) and writes it into the DuckDB item index. Date columns may hold
unix timestamps or ISO 8601 dates.

Usage:
    python scripts/load_index.py items.csv
    python scripts/load_index.py items.csv --datasource entity:node --bundle news
    python scripts/load_index.py items.csv --db data/index.duckdb --log-level DEBUG
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import pandas as pd

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import setup_logging, get_logger
from src.database import get_connection, create_index_table, insert_items, get_table_counts

logger = get_logger("load_index")


def read_items(
    csv_path: Path,
    datasource: Optional[str] = None,
    bundle: Optional[str] = None,
) -> pd.DataFrame:
    """
    Read items from a CSV file.

    Args:
        csv_path: CSV file with one item per row.
        datasource: Datasource for rows that do not carry one.
        bundle: Bundle for rows that do not carry one.

    Returns:
        DataFrame of items.
    """
    items = pd.read_csv(csv_path, dtype={"item_id": str})

    if datasource:
        if "datasource" in items.columns:
            items["datasource"] = items["datasource"].fillna(datasource)
        else:
            items["datasource"] = datasource
    if bundle:
        if "bundle" in items.columns:
            items["bundle"] = items["bundle"].fillna(bundle)
        else:
            items["bundle"] = bundle

    logger.info(f"Read {len(items)} items from {csv_path}")
    return items


def main():
    """Main entry point for loading the index."""
    parser = argparse.ArgumentParser(
        description="Load items into the list pages index",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "csv_path",
        type=Path,
        help="CSV file of items",
    )
    parser.add_argument(
        "--datasource",
        type=str,
        default=None,
        help="Datasource for rows without one (e.g., 'entity:node')",
    )
    parser.add_argument(
        "--bundle",
        type=str,
        default=None,
        help="Bundle for rows without one",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=config.database.path,
        help="Custom database path",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level",
    )

    args = parser.parse_args()

    setup_logging(log_level=args.log_level)

    start_time = datetime.now()
    logger.info("=" * 60)
    logger.info("List Pages - Index Load")
    logger.info(f"Started at: {start_time}")
    logger.info("=" * 60)

    if not args.csv_path.exists():
        logger.error(f"File not found: {args.csv_path}")
        return 1

    args.db.parent.mkdir(parents=True, exist_ok=True)

    try:
        items = read_items(args.csv_path, args.datasource, args.bundle)

        with get_connection(args.db) as conn:
            create_index_table(conn)
            written = insert_items(conn, items)

            logger.info(f"Wrote {written} items to {args.db}")
            for source, count in get_table_counts(conn).items():
                logger.info(f"  {source}: {count:,}")

        logger.info(f"Total duration: {datetime.now() - start_time}")
        return 0

    except KeyboardInterrupt:
        logger.warning("Load interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Error during load: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
