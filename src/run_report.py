"""Generate the client match report for one executor.

Usage:
    python -m src.run_report [sort_by] [data_dir]

Examples:
    python -m src.run_report distance
    python -m src.run_report reward /path/to/records
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from src.data_sources.config import DATA_DIR
from src.data_sources.sources import FileDataSource
from src.logging_config import setup_logging
from src.matching.models import SortBy
from src.matching.result import FallibleResult
from src.reporting.config import DEFAULT_SORT_BY
from src.reporting.orchestrator import generate_report_result

logger = logging.getLogger(__name__)


def run(
    sort_by: str = DEFAULT_SORT_BY,
    data_dir: Optional[Path] = None,
) -> FallibleResult[str]:
    """Run one report generation against a directory of record files.

    Args:
        sort_by: ``"distance"`` or ``"reward"``.
        data_dir: Directory holding ``clients.json`` (or ``clients.csv``)
            and ``executor.json``. Defaults to ``data/``.

    Returns:
        Success with the report text, or Failure with the error message.

    Raises:
        ValueError: If *sort_by* is not a known criterion.
    """
    criterion = SortBy.parse(sort_by)
    source = FileDataSource(data_dir if data_dir is not None else DATA_DIR)

    logger.info(
        "Generating report sorted by %s (data: %s)", criterion.value, source.data_dir
    )
    return asyncio.run(generate_report_result(criterion, source))


if __name__ == "__main__":
    setup_logging()

    sort_by = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SORT_BY
    data_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        SortBy.parse(sort_by)
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(2)

    result = run(sort_by, data_dir)

    print(result.value if result.is_success else result.message)
    sys.exit(0 if result.is_success else 1)
