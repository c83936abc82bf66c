"""Matching -> filtering -> ranking -> formatting pipeline."""

import logging
from typing import Callable, List, Sequence

from src.matching.demand_matcher import meets_demands
from src.matching.geometry import euclidean_distance
from src.matching.models import Client, ClientWithStats, Executor, Position, SortBy
from src.matching.ranker import rank_clients
from src.matching.result import Failure, FallibleResult
from src.reporting.config import NO_ELIGIBLE_CLIENTS_MESSAGE
from src.reporting.report_formatter import format_report

logger = logging.getLogger(__name__)

DistanceFn = Callable[[Position, Position], float]


def compute_client_stats(
    clients: Sequence[Client],
    executor: Executor,
    distance_fn: DistanceFn = euclidean_distance,
) -> List[ClientWithStats]:
    """Annotate every client with its distance and demand match flag."""
    return [
        ClientWithStats(
            client=client,
            distance=distance_fn(executor.position, client.position),
            meets_demands=meets_demands(executor, client),
        )
        for client in clients
    ]


def build_report(
    sort_by: SortBy,
    clients: Sequence[Client],
    executor: Executor,
    distance_fn: DistanceFn = euclidean_distance,
) -> FallibleResult[str]:
    """Build the report text for already-fetched clients and executor.

    Returns a Failure instead of raising when a client position has a
    different number of coordinates than the executor's. Returns the
    no-eligible-clients Failure before any ranking or formatting happens
    when nobody can be served.
    """
    sort_by = SortBy.parse(sort_by)

    mismatched = [
        client for client in clients
        if len(client.position) != len(executor.position)
    ]
    if mismatched:
        first = mismatched[0]
        return Failure(
            f"Client {first.name} has a {len(first.position)}-D position "
            f"but the executor position is {len(executor.position)}-D"
        )

    stats = compute_client_stats(clients, executor, distance_fn)
    available = [client for client in stats if client.meets_demands]

    logger.info(
        "%d of %d clients meet the executor's possibilities",
        len(available), len(stats),
    )

    if not available:
        return Failure(NO_ELIGIBLE_CLIENTS_MESSAGE)

    ranked = rank_clients(available, sort_by)
    return format_report(clients, ranked, sort_by)
