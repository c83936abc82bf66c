from src.matching.demand_matcher import meets_demands
from src.matching.geometry import euclidean_distance
from src.matching.models import Client, ClientWithStats, Executor, SortBy
from src.matching.ranker import rank_clients
from src.matching.result import (
    Failure,
    Success,
    combine,
    flatten,
    get_or_else,
    map_result,
)

__all__ = [
    "Client",
    "ClientWithStats",
    "Executor",
    "Failure",
    "SortBy",
    "Success",
    "combine",
    "euclidean_distance",
    "flatten",
    "get_or_else",
    "map_result",
    "meets_demands",
    "rank_clients",
]
