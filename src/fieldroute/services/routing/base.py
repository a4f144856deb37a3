"""Base class for travel-matrix providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...models.domain import Location
from .models import ZERO_CELL, TravelMatrix


class MatrixProvider(ABC):
    """Contract for duration/distance matrix backends.

    ``get_matrix`` makes at most one upstream call per invocation. Sizes 0 and
    1 are answered locally; larger inputs are delegated to ``_fetch_matrix``,
    which must return an ``n x n`` matrix aligned with ``locations`` and raise
    ``ProviderUnavailable`` when the batched call fails as a whole.
    """

    name: str = "provider"
    # Most stops one batched call can carry; None means no provider-side cap.
    max_locations: int | None = None

    def get_matrix(self, locations: Sequence[Location]) -> TravelMatrix:
        if not locations:
            return TravelMatrix.empty()
        if len(locations) == 1:
            return TravelMatrix.from_rows([[ZERO_CELL]])
        return self._fetch_matrix(locations)

    @abstractmethod
    def _fetch_matrix(self, locations: Sequence[Location]) -> TravelMatrix:
        raise NotImplementedError

    def is_configured(self) -> bool:
        return True
