import numpy as np

from campus_router.app.protocols import NodeLocator
from campus_router.domain import geo_math
from campus_router.domain.entities.geography import NetworkNode
from campus_router.domain.errors import EmptyNetworkError
from campus_router.domain.network.graph import Graph

# Both locators are O(n) per call. Fine at survey scale (tens to a few
# thousand nodes); past that a spatial index should take over, keeping the
# lowest-id tie-break.


class LinearScanLocator(NodeLocator):
    def locate(self, lat: float, lon: float, graph: Graph) -> NetworkNode:
        if len(graph) == 0:
            raise EmptyNetworkError("cannot locate a point on an empty network")
        best, best_d = None, float("inf")
        for n in graph.nodes:  # ascending id; strict < keeps the lowest id on ties
            d = geo_math.distance(lat, lon, n.lat, n.lon)
            if best is None or d < best_d:
                best, best_d = n, d
        return best


class VectorizedLocator(NodeLocator):
    """Same scan over the graph's coordinate arrays."""

    def locate(self, lat: float, lon: float, graph: Graph) -> NetworkNode:
        if len(graph) == 0:
            raise EmptyNetworkError("cannot locate a point on an empty network")
        d = geo_math.distance_many(lat, lon, graph.lats, graph.lons)
        # argmin returns the first minimum, i.e. the lowest id
        return graph.node(graph.ids[int(np.argmin(d))])
