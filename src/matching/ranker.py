"""Ranking of matching clients."""

from typing import Callable, Dict, Iterable, List, Tuple

from src.matching.models import ClientWithStats, Number, SortBy

# sort_by -> (key, descending)
_ORDERINGS: Dict[SortBy, Tuple[Callable[[ClientWithStats], Number], bool]] = {
    SortBy.DISTANCE: (lambda c: c.distance, False),
    SortBy.REWARD: (lambda c: c.reward, True),
}


def rank_clients(
    clients: Iterable[ClientWithStats], sort_by: SortBy
) -> List[ClientWithStats]:
    """Order clients by distance (closest first) or reward (highest first).

    ``sorted`` is stable, including with ``reverse=True``, so clients with
    equal keys keep their input order. NaN keys are not handled.
    """
    key, descending = _ORDERINGS[SortBy.parse(sort_by)]
    return sorted(clients, key=key, reverse=descending)
