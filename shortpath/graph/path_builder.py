"""Path reconstruction from a parent-pointer map."""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Mapping, Optional

from ..domain.errors import PathReconstructionError


class PathBuilder:
    """Rebuild vertex sequences from the parents of a finished run.

    Args:
        source: The source vertex of the run.
        parents: Vertex -> predecessor map produced by the run.
    """

    def __init__(self, source: Hashable, parents: Mapping[Hashable, Hashable]) -> None:
        self._source = source
        self._parents = parents

    def path(self, target: Hashable) -> Optional[List[Hashable]]:
        """Return the path from the source to ``target``.

        Returns:
            ``[source]`` when ``target`` is the source, None when the
            target was never reached, otherwise the vertex sequence
            from source to target.

        Raises:
            PathReconstructionError: If the parent chain loops or does
                not end at the source.
        """
        if target == self._source:
            return [self._source]
        if target not in self._parents:
            return None

        path = [target]
        vertex = target
        # A tree over n parent entries has paths of at most n + 1 vertices
        limit = len(self._parents) + 1
        while vertex != self._source:
            if vertex not in self._parents:
                raise PathReconstructionError(
                    f"parent chain of {target!r} ends at {vertex!r}, "
                    f"not at source {self._source!r}",
                    vertex=target,
                )
            vertex = self._parents[vertex]
            path.append(vertex)
            if len(path) > limit:
                raise PathReconstructionError(
                    f"parent chain of {target!r} does not terminate",
                    vertex=target,
                )

        path.reverse()
        return path

    def paths(self, vertices: Iterable[Hashable]) -> Dict[Hashable, Optional[List[Hashable]]]:
        """Return ``{vertex: path(vertex)}`` for each of ``vertices``."""
        return {vertex: self.path(vertex) for vertex in vertices}
