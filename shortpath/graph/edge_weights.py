"""Edge weight lookup with non-negativity validation.

Every weight the engine reads goes through NonNegativeEdgeWeights,
so a missing or negative entry is reported the moment the edge is
examined rather than when the map is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Hashable, Optional

from ..domain.errors import InvalidWeightError
from ..ports.graph import EdgeWeightSource


class NonNegativeEdgeWeights:
    """Validating view over a caller-supplied weight source.

    Args:
        weights: Mapping of (u, v) pairs to weights, or a callable
            ``weight_of(u, v)`` returning None for undefined edges.
        directed: Whether the graph is directed. Undirected graphs
            accept a weight stored under either orientation.
    """

    def __init__(self, weights: EdgeWeightSource, directed: bool) -> None:
        self._weights = weights
        self._directed = directed

    @property
    def directed(self) -> bool:
        return self._directed

    def edge_weight(self, u: Hashable, v: Hashable) -> float:
        """Return the weight of edge (u, v).

        Raises:
            InvalidWeightError: If the weight is undefined, negative or NaN.
        """
        weight = self._lookup(u, v)
        if weight is None and not self._directed:
            weight = self._lookup(v, u)

        if weight is None:
            raise InvalidWeightError(
                f"weight of edge ({u!r}, {v!r}) is not defined",
                edge=(u, v),
            )
        # NaN fails this comparison too
        if not weight >= 0:
            raise InvalidWeightError(
                f"weight of edge ({u!r}, {v!r}) is negative or not a number: {weight}",
                edge=(u, v),
                weight=weight,
            )
        return weight

    def _lookup(self, u: Hashable, v: Hashable) -> Optional[float]:
        if isinstance(self._weights, Mapping):
            return self._weights.get((u, v))
        return self._weights(u, v)
