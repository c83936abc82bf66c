"""Report orchestration - fetch both inputs concurrently, then build the report."""

import asyncio
import logging

from src.data_sources.sources import DataSource
from src.matching.geometry import euclidean_distance
from src.matching.models import SortBy
from src.matching.result import FallibleResult, combine, flatten, get_or_else
from src.reporting.report_builder import DistanceFn, build_report

logger = logging.getLogger(__name__)


async def generate_report_result(
    sort_by: SortBy,
    source: DataSource,
    distance_fn: DistanceFn = euclidean_distance,
) -> FallibleResult[str]:
    """Fetch clients and executor, then match, rank and format.

    Both fetches are started together and both are awaited before any
    matching runs. When either fails the report is never built; the
    clients failure is reported if both failed. A failure from the report
    itself comes back the same way as a fetch failure.
    """
    sort_by = SortBy.parse(sort_by)
    clients, executor = await asyncio.gather(
        source.fetch_clients(),
        source.fetch_executor(),
    )

    result = flatten(
        combine(
            clients,
            executor,
            lambda c, e: build_report(sort_by, c, e, distance_fn=distance_fn),
        )
    )

    if not result.is_success:
        logger.warning("Report not generated: %s", result.message)
    return result


async def generate_report(
    sort_by: SortBy,
    source: DataSource,
    distance_fn: DistanceFn = euclidean_distance,
) -> str:
    """Same as generate_report_result, but always yields text.

    The text is the report on success and the error message otherwise.
    """
    result = await generate_report_result(sort_by, source, distance_fn)
    return get_or_else(result, lambda message: message)
