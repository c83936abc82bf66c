"""Text rendering of the client match report."""

import math
from decimal import Decimal
from typing import Sequence

from src.matching.models import ClientWithStats, Number, SortBy
from src.matching.result import Failure, FallibleResult, Success
from src.reporting.config import (
    ALL_CLIENTS_COVERED_MESSAGE,
    CLIENT_ROW_TEMPLATE,
    DISTANCE_DECIMALS,
    HEADER_BY_DISTANCE,
    HEADER_BY_REWARD,
    NO_ELIGIBLE_CLIENTS_MESSAGE,
    PARTIAL_COVERAGE_TEMPLATE,
)


def format_number(value: Number) -> str:
    """Render a plain number the way a JavaScript number prints.

    Integral values have no fractional part. Magnitudes at or above 1e21,
    or below 1e-6, use exponent notation without zero-padding.

    Examples:
        5      -> "5"
        5.0    -> "5"
        5.5    -> "5.5"
        1e-06  -> "0.000001"
        1e-07  -> "1e-7"
        1e21   -> "1e+21"
    """
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    as_float = float(value)
    if math.isnan(as_float):
        return "NaN"
    if math.isinf(as_float):
        return "Infinity" if as_float > 0 else "-Infinity"
    if as_float == 0:
        return "0"

    magnitude = abs(as_float)
    if magnitude >= 1e21 or magnitude < 1e-6:
        mantissa, exponent = repr(as_float).split("e")
        sign = "+" if int(exponent) > 0 else "-"
        return f"{mantissa}e{sign}{abs(int(exponent))}"
    if as_float.is_integer():
        return str(int(as_float))
    return format(Decimal(repr(as_float)), "f")


def format_distance(distance: float) -> str:
    """Fixed-point distance (round-half-even on the exact binary value)."""
    return format(float(distance), f".{DISTANCE_DECIMALS}f")


def format_summary(matching_count: int, total_count: int) -> str:
    """Coverage sentence for the top of the report."""
    if matching_count == total_count:
        return ALL_CLIENTS_COVERED_MESSAGE
    return PARTIAL_COVERAGE_TEMPLATE.format(matching=matching_count, total=total_count)


def format_header(sort_by: SortBy) -> str:
    if SortBy.parse(sort_by) is SortBy.REWARD:
        return HEADER_BY_REWARD
    return HEADER_BY_DISTANCE


def format_client_row(client: ClientWithStats) -> str:
    return CLIENT_ROW_TEMPLATE.format(
        name=client.name,
        distance=format_distance(client.distance),
        reward=format_number(client.reward),
    )


def format_report(
    all_clients: Sequence,
    ranked_clients: Sequence[ClientWithStats],
    sort_by: SortBy,
) -> FallibleResult[str]:
    """Compose the final report.

    Three blocks separated by blank lines: the coverage summary, the
    header for the chosen ordering, and one row per ranked client.

    Args:
        all_clients: Every fetched client, used only for the total count.
        ranked_clients: Clients that meet demands, already in report order.
        sort_by: The criterion the clients were ranked by.

    Returns:
        Success with the report text, or Failure with
        NO_ELIGIBLE_CLIENTS_MESSAGE if *ranked_clients* is empty.
    """
    if not ranked_clients:
        return Failure(NO_ELIGIBLE_CLIENTS_MESSAGE)

    summary = format_summary(len(ranked_clients), len(all_clients))
    header = format_header(sort_by)
    rows = "\n".join(format_client_row(client) for client in ranked_clients)

    return Success(f"{summary}\n\n{header}\n{rows}")
