from dataclasses import dataclass

NodeId = int | str


def id_key(node_id: NodeId) -> tuple[int, int | str]:
    # ints sort numerically ahead of strings; mixed ids stay comparable
    return (1, node_id) if isinstance(node_id, str) else (0, node_id)


@dataclass(frozen=True)
class Coord:
    lat: float  # degrees
    lon: float


@dataclass(frozen=True)
class NetworkNode:
    id: NodeId
    lat: float
    lon: float
    category: str | None = None  # render-only tag (e.g. "pink"/"blue")

    @property
    def coord(self) -> Coord:
        return Coord(self.lat, self.lon)


@dataclass(frozen=True)
class NetworkEdge:
    a: NodeId
    b: NodeId
    weight: float  # undirected; same weight both ways


@dataclass(frozen=True)
class Route:
    nodes: tuple[NetworkNode, ...]
    distance: float  # sum of edge weights along `nodes`
    start: NetworkNode
    end: NetworkNode

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def polyline(self) -> list[tuple[float, float]]:
        return [(n.lat, n.lon) for n in self.nodes]
