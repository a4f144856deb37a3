"""Nearest-neighbor tour construction."""

from __future__ import annotations

import logging

from .models import TravelMatrix

logger = logging.getLogger(__name__)


def nearest_neighbor_tour(matrix: TravelMatrix) -> list[int]:
    """Order the matrix indices greedily by travel duration.

    The tour always starts at index 0 (the depot). Each step moves to the
    unvisited index with the smallest duration from the current one; ties go
    to the smallest index. Unreachable pairs compare as ``UNREACHABLE_COST``
    so the loop always places every index, even when only unreachable
    candidates remain.
    """
    n = matrix.size
    if n == 0:
        return []
    if n == 1:
        return [0]

    visited = [False] * n
    current = 0
    visited[current] = True
    tour = [current]

    for _ in range(n - 1):
        nearest = -1
        best_cost = 0
        for j in range(n):
            if visited[j]:
                continue
            cost = matrix.duration_cost(current, j)
            # Strict comparison keeps the smallest index on ties.
            if nearest == -1 or cost < best_cost:
                nearest = j
                best_cost = cost

        if not matrix.is_reachable(current, nearest):
            logger.warning("No reachable stop left from index %s; continuing with index %s", current, nearest)

        tour.append(nearest)
        visited[nearest] = True
        current = nearest

    return tour
