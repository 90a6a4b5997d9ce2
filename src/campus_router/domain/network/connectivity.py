from campus_router.app.protocols import ConnectivityPolicy
from campus_router.domain import geo_math
from campus_router.domain.entities.geography import NetworkEdge, NetworkNode
from campus_router.domain.entities.survey import NetworkData, SurveyPoint
from campus_router.domain.errors import ConstructionError
from campus_router.domain.network.graph import Graph


def _leg(p: SurveyPoint, q: SurveyPoint) -> float:
    return geo_math.distance(p.lat, p.lon, q.lat, q.lon)


def _index(points: list[SurveyPoint]) -> dict:
    return {p.id: p for p in points}


class ExplicitEdges(ConnectivityPolicy):
    """Use the supplied edge list; missing weights come from haversine."""

    name = "explicit"

    def derive(self, data: NetworkData) -> list[NetworkEdge]:
        pts = _index(data.points)
        out = []
        for e in data.edges:
            w = e.weight
            if w is None:
                try:
                    w = _leg(pts[e.a], pts[e.b])
                except KeyError as exc:
                    raise ConstructionError(
                        f"edge {e.a!r}-{e.b!r} references unknown node {exc.args[0]!r}"
                    ) from None
            out.append(NetworkEdge(e.a, e.b, w))
        return out


class SeriesLinkage(ConnectivityPolicy):
    """One edge per point that names its successor via `next_id`."""

    name = "series"

    def derive(self, data: NetworkData) -> list[NetworkEdge]:
        pts = _index(data.points)
        out = []
        for p in data.points:
            if p.next_id is None:
                continue
            q = pts.get(p.next_id)
            if q is None:
                raise ConstructionError(f"point {p.id!r} links to unknown point {p.next_id!r}")
            out.append(NetworkEdge(p.id, q.id, _leg(p, q)))
        return out


class SurveyOrder(ConnectivityPolicy):
    """
    Chain point i to point i+1 in survey order.

    Weakest policy: assumes the survey walked the roads in order. With
    `use_recorded_distance`, the edge into point i+1 takes that point's
    surveyed distance when it has one.
    """

    name = "survey_order"

    def __init__(self, use_recorded_distance: bool = False):
        self.use_recorded_distance = use_recorded_distance

    def derive(self, data: NetworkData) -> list[NetworkEdge]:
        out = []
        for p, q in zip(data.points, data.points[1:]):
            if self.use_recorded_distance and q.recorded_distance is not None:
                w = q.recorded_distance
            else:
                w = _leg(p, q)
            out.append(NetworkEdge(p.id, q.id, w))
        return out


def build_network(data: NetworkData, policy: ConnectivityPolicy) -> Graph:
    nodes = [NetworkNode(p.id, p.lat, p.lon, p.category) for p in data.points]
    return Graph(nodes, policy.derive(data))
