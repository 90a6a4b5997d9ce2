from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from types import MappingProxyType

import numpy as np

from campus_router.domain.entities.geography import NetworkEdge, NetworkNode, NodeId, id_key
from campus_router.domain.errors import ConstructionError, UnknownNodeError


class Graph:
    """
    Immutable undirected road network.

    Built all-or-nothing: any invalid node or edge raises ConstructionError
    and no instance is returned. Nodes iterate in ascending id order, which
    is the order locators use for tie-breaks. Parallel edges collapse to the
    lightest one for adjacency and path length.
    """

    def __init__(self, nodes: Iterable[NetworkNode], edges: Iterable[NetworkEdge] = ()):
        by_id: dict[NodeId, NetworkNode] = {}
        for n in nodes:
            if n.id in by_id:
                raise ConstructionError(f"duplicate node id {n.id!r}")
            if not (math.isfinite(n.lat) and math.isfinite(n.lon)):
                raise ConstructionError(f"node {n.id!r} has non-finite coordinates")
            by_id[n.id] = n

        try:
            ordered = sorted(by_id, key=id_key)
        except TypeError as exc:
            raise ConstructionError(f"node ids are not comparable: {exc}") from exc

        edges = tuple(edges)
        weights: dict[tuple[NodeId, NodeId], float] = {}
        for e in edges:
            for end in (e.a, e.b):
                if end not in by_id:
                    raise ConstructionError(f"edge {e.a!r}-{e.b!r} references unknown node {end!r}")
            try:
                w = float(e.weight)
            except (TypeError, ValueError):
                w = math.nan
            if math.isnan(w) or w < 0 or math.isinf(w):
                raise ConstructionError(f"edge {e.a!r}-{e.b!r} has invalid weight {e.weight!r}")
            for key in ((e.a, e.b), (e.b, e.a)):
                if key not in weights or w < weights[key]:
                    weights[key] = w

        adj: dict[NodeId, list[tuple[NodeId, float]]] = {i: [] for i in ordered}
        for (u, v), w in weights.items():
            if u != v:
                adj[u].append((v, w))

        self._nodes = MappingProxyType({i: by_id[i] for i in ordered})
        self._edges = edges
        self._weights = MappingProxyType(weights)
        self._adj = MappingProxyType(
            {u: tuple(sorted(nbrs, key=lambda t: id_key(t[0]))) for u, nbrs in adj.items()}
        )

        self._ids = tuple(ordered)
        self._lats = np.array([by_id[i].lat for i in ordered], dtype=float)
        self._lons = np.array([by_id[i].lon for i in ordered], dtype=float)
        self._lats.flags.writeable = False
        self._lons.flags.writeable = False

    # --------------- Lookup -----------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    @property
    def nodes(self) -> tuple[NetworkNode, ...]:
        return tuple(self._nodes.values())

    @property
    def edges(self) -> tuple[NetworkEdge, ...]:
        return self._edges

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def node(self, node_id: NodeId) -> NetworkNode:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def neighbors(self, node_id: NodeId) -> tuple[tuple[NodeId, float], ...]:
        try:
            return self._adj[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def edge_weight(self, a: NodeId, b: NodeId) -> float:
        try:
            return self._weights[(a, b)]
        except KeyError:
            raise KeyError(f"no edge between {a!r} and {b!r}") from None

    def path_length(self, node_ids: Sequence[NodeId]) -> float:
        """Sum of edge weights over consecutive pairs of `node_ids`."""
        total = 0.0
        for u, v in zip(node_ids, node_ids[1:]):
            total += self.edge_weight(u, v)
        return total

    # --------------- Array views (ascending id order) ----

    @property
    def ids(self) -> tuple[NodeId, ...]:
        return self._ids

    @property
    def lats(self) -> np.ndarray:
        return self._lats

    @property
    def lons(self) -> np.ndarray:
        return self._lons
