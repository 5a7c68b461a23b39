"""
Team index seeding script.

Reads team names from a CSV file (one `team` column) and upserts them into
the vector index in fixed-size batches. Entry ids are assigned in row order
starting at 0, so a given CSV always produces the same ids.

Any CSV problem aborts the run before anything is written. A failed batch
is logged and stops the run; already-written batches are not rolled back
and the job does not resume.

Dependencies: csv (stdlib), premier_guard.boundary.vdb, premier_guard.configs
System role: Offline index population

Usage:
    python -m premier_guard.scripts.seed_index [path/to/teams.csv]
"""

import asyncio
import csv
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from premier_guard.boundary.vdb.team_index_client import TeamIndexClient
from premier_guard.configs import get_settings
from premier_guard.core.exceptions import SeedDataError
from premier_guard.models.index_entry import IndexEntry, TeamRow
from premier_guard.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def parse_csv(path: str | Path) -> list[TeamRow]:
    """
    Read team rows from a CSV file.

    Args:
        path: CSV file with a header row containing `team`

    Returns:
        list[TeamRow]: Rows in file order

    Raises:
        SeedDataError: File missing, unreadable, or without a team column
    """
    csv_path = Path(path)
    try:
        with csv_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f, delimiter=",")
            if not reader.fieldnames or "team" not in reader.fieldnames:
                raise SeedDataError(
                    "CSV must have a 'team' column",
                    path=str(csv_path),
                    details={"columns": reader.fieldnames},
                )
            return [TeamRow(team=row["team"]) for row in reader]
    except (OSError, csv.Error, UnicodeDecodeError, ValidationError) as e:
        raise SeedDataError(
            f"Failed to read CSV: {e}",
            path=str(csv_path),
        ) from e


def build_batches(rows: list[TeamRow], batch_size: int = 10) -> list[list[IndexEntry]]:
    """
    Split rows into upsert batches with sequential ids.

    Args:
        rows: Parsed CSV rows
        batch_size: Maximum entries per batch

    Returns:
        list[list[IndexEntry]]: Batches in row order
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    batches = []
    for start in range(0, len(rows), batch_size):
        batch = rows[start:start + batch_size]
        batches.append([
            IndexEntry.from_row(start + position, row)
            for position, row in enumerate(batch)
        ])
    return batches


async def seed(
    index_client: TeamIndexClient,
    rows: list[TeamRow],
    batch_size: int = 10,
) -> int:
    """
    Upsert all rows batch by batch.

    Args:
        index_client: Team index client
        rows: Parsed CSV rows
        batch_size: Maximum entries per batch

    Returns:
        int: Number of entries written

    Raises:
        VectorStoreError: First failing batch (later batches are skipped)
    """
    written = 0
    for batch_number, batch in enumerate(build_batches(rows, batch_size)):
        try:
            await index_client.upsert(batch)
        except Exception:
            logger.error(
                f"{__name__}:seed - Batch {batch_number} failed, stopping",
                extra={"batch": batch_number, "first_id": batch[0].id, "written": written},
            )
            raise
        written += len(batch)
        logger.info(
            f"{__name__}:seed - Upserted batch {batch_number} ({len(batch)} entries)",
        )
    return written


def main(argv: list[str] | None = None) -> int:
    """
    Run the seeding job.

    Args:
        argv: Optional [csv_path]; defaults to SEED_CSV_PATH

    Returns:
        int: Process exit code
    """
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()
    configure_logging(settings.log_level)

    csv_path = args[0] if args else settings.seeding.csv_path

    try:
        rows = parse_csv(csv_path)
        index_client = TeamIndexClient(settings.vector_store)
        written = asyncio.run(seed(index_client, rows, settings.seeding.batch_size))
    except Exception as e:
        logger.exception(f"Seeding failed: {e}")
        return 1

    logger.info(f"Seeding complete: {written} entries from {csv_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
