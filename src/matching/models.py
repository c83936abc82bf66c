"""Data models for client/executor matching."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Sequence, Tuple, Union

Position = Tuple[float, ...]
Demand = str
Number = Union[int, float]


def _to_position(raw: Sequence) -> Position:
    """Convert a raw coordinate sequence into a Position tuple."""
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise ValueError(f"Position must be a sequence of numbers, got {raw!r}")
    if len(raw) == 0:
        raise ValueError("Position must have at least one coordinate")
    position = tuple(float(coord) for coord in raw)
    if any(math.isnan(coord) for coord in position):
        raise ValueError(f"Position has a missing coordinate: {raw!r}")
    return position


class SortBy(str, Enum):
    """Criterion used to rank matching clients."""

    DISTANCE = "distance"
    REWARD = "reward"

    @classmethod
    def parse(cls, value: Union[str, "SortBy"]) -> "SortBy":
        """Parse a user-supplied value, raising ValueError if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Invalid sort_by: {value!r}. Must be one of: {choices}."
            ) from None


@dataclass(frozen=True)
class Client:
    """A client request: where it is, what it pays and what it requires.

    ``demands`` is None when the client has no demand list at all, which
    is treated the same as having no requirements.
    """

    name: str
    position: Position
    reward: Number
    demands: Optional[Tuple[Demand, ...]] = None

    @classmethod
    def from_raw(cls, record: Dict) -> "Client":
        """Build a Client from a fetched record.

        A ``demands`` value of ``None`` (or a missing key) is the absence
        marker and becomes "no demand list".
        """
        raw_demands = record.get("demands")
        demands = None if raw_demands is None else tuple(str(d) for d in raw_demands)
        return cls(
            name=str(record["name"]),
            position=_to_position(record["position"]),
            reward=record["reward"],
            demands=demands,
        )


@dataclass(frozen=True)
class Executor:
    """The single executor clients are matched against.

    Demand tags are compared as strings on both sides, so a JSON tag of
    ``1`` matches a client demand of ``1`` or ``"1"``.
    """

    position: Position
    possibilities: FrozenSet[Demand]

    @classmethod
    def from_raw(cls, record: Dict) -> "Executor":
        return cls(
            position=_to_position(record["position"]),
            possibilities=frozenset(
                str(tag) for tag in (record.get("possibilities") or ())
            ),
        )


@dataclass(frozen=True)
class ClientWithStats:
    """A client annotated with its distance to the executor and match flag.

    Only lives for the duration of a single report build.
    """

    client: Client
    distance: float
    meets_demands: bool

    @property
    def name(self) -> str:
        return self.client.name

    @property
    def reward(self) -> Number:
        return self.client.reward

    @property
    def position(self) -> Position:
        return self.client.position

    @property
    def demands(self) -> Optional[Tuple[Demand, ...]]:
        return self.client.demands
