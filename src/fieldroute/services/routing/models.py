"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from .errors import MatrixShapeError

# Stand-in cost for pairs without a route; large enough to lose every
# comparison against a real drive.
UNREACHABLE_COST = 999999


@dataclass(slots=True, frozen=True)
class Reachable:
    duration_seconds: int
    distance_meters: int

    def __post_init__(self) -> None:
        if self.duration_seconds < 0 or self.distance_meters < 0:
            raise ValueError(
                f"Travel values must be non-negative (got {self.duration_seconds}s / {self.distance_meters}m)."
            )


@dataclass(slots=True, frozen=True)
class Unreachable:
    pass


TravelCell = Union[Reachable, Unreachable]

ZERO_CELL = Reachable(duration_seconds=0, distance_meters=0)


@dataclass(slots=True, frozen=True)
class TravelMatrix:
    """Square grid of travel cells, indices aligned with the input locations."""

    cells: tuple[tuple[TravelCell, ...], ...]

    def __post_init__(self) -> None:
        size = len(self.cells)
        for row_index, row in enumerate(self.cells):
            if len(row) != size:
                raise MatrixShapeError(
                    f"Travel matrix row {row_index} has {len(row)} cells, expected {size}."
                )
            for col_index, cell in enumerate(row):
                if not isinstance(cell, (Reachable, Unreachable)):
                    raise MatrixShapeError(f"Travel matrix cell ({row_index}, {col_index}) is missing.")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[TravelCell]]) -> "TravelMatrix":
        return cls(cells=tuple(tuple(row) for row in rows))

    @classmethod
    def empty(cls) -> "TravelMatrix":
        return cls(cells=())

    @property
    def size(self) -> int:
        return len(self.cells)

    def cell(self, i: int, j: int) -> TravelCell:
        return self.cells[i][j]

    def is_reachable(self, i: int, j: int) -> bool:
        return isinstance(self.cells[i][j], Reachable)

    def duration_cost(self, i: int, j: int) -> int:
        cell = self.cells[i][j]
        return cell.duration_seconds if isinstance(cell, Reachable) else UNREACHABLE_COST

    def distance_cost(self, i: int, j: int) -> int:
        cell = self.cells[i][j]
        return cell.distance_meters if isinstance(cell, Reachable) else UNREACHABLE_COST

    def unreachable_pairs(self) -> list[tuple[int, int]]:
        return [
            (i, j)
            for i, row in enumerate(self.cells)
            for j, cell in enumerate(row)
            if isinstance(cell, Unreachable)
        ]


@dataclass(slots=True, frozen=True)
class Leg:
    from_id: str
    to_id: str
    duration_minutes: int
    distance_km: float
    reachable: bool = True


@dataclass(slots=True, frozen=True)
class Itinerary:
    order: List[str]
    legs: List[Leg]
    total_duration_minutes: int
    total_distance_km: float
    total_duration_minutes_exact: int = 0
    total_distance_km_exact: float = 0.0
    degraded: bool = False
