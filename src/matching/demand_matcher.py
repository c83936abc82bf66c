"""Demand matching - can the executor serve a given client?"""

from src.matching.models import Client, Executor


def meets_demands(executor: Executor, client: Client) -> bool:
    """Check whether *executor* covers every demand of *client*.

    All-of semantics: each demand must be present in the executor's
    possibilities. A client without a demand list, or with an empty one,
    is always satisfied.
    """
    if client.demands is None:
        return True
    return all(demand in executor.possibilities for demand in client.demands)
