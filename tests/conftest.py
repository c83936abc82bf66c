"""Shared fixtures for the client match report test suite."""

import asyncio
import json

import pytest

from src.matching.models import Client, Executor
from src.matching.result import Failure, Success


# ------------------------------------------------------------------
# In-memory data source - no I/O, records the order fetches start in
# ------------------------------------------------------------------

class StaticDataSource:
    """DataSource stand-in that returns preset results."""

    def __init__(self, clients_result, executor_result, delay: float = 0.0):
        self.clients_result = clients_result
        self.executor_result = executor_result
        self.delay = delay
        self.events = []

    async def fetch_clients(self):
        self.events.append("clients:start")
        await asyncio.sleep(self.delay)
        self.events.append("clients:end")
        return self.clients_result

    async def fetch_executor(self):
        self.events.append("executor:start")
        await asyncio.sleep(self.delay)
        self.events.append("executor:end")
        return self.executor_result


# ------------------------------------------------------------------
# Record factories
# ------------------------------------------------------------------

def _make_client(name="Client", position=(0.0, 0.0), reward=10, demands=None):
    return Client(
        name=name,
        position=tuple(position),
        reward=reward,
        demands=None if demands is None else tuple(demands),
    )


def _make_executor(possibilities=("A", "B"), position=(0.0, 0.0)):
    return Executor(position=tuple(position), possibilities=frozenset(possibilities))


@pytest.fixture
def executor():
    return _make_executor()


@pytest.fixture
def example_clients():
    """The two-client example: X is servable, Y needs an unknown capability."""
    return [
        _make_client("X", (0, 0), 5, ["A"]),
        _make_client("Y", (3, 4), 10, ["C"]),
    ]


@pytest.fixture
def static_source(example_clients, executor):
    return StaticDataSource(Success(example_clients), Success(executor))


@pytest.fixture
def failing_source():
    return StaticDataSource(
        Failure("clients service unavailable"),
        Failure("executor service unavailable"),
    )


@pytest.fixture
def records_dir(tmp_path):
    """Directory with the example records written as JSON files."""
    clients = [
        {"name": "X", "position": [0, 0], "reward": 5, "demands": ["A"]},
        {"name": "Y", "position": [3, 4], "reward": 10, "demands": ["C"]},
    ]
    executor = {"position": [0, 0], "possibilities": ["A", "B"]}
    (tmp_path / "clients.json").write_text(json.dumps(clients), encoding="utf-8")
    (tmp_path / "executor.json").write_text(json.dumps(executor), encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_source():
    """Factory for StaticDataSource instances with custom results."""
    return StaticDataSource
