import heapq
import math

from campus_router.app.protocols import PathSolver
from campus_router.domain.entities.geography import NetworkNode, NodeId
from campus_router.domain.errors import NoPathError
from campus_router.domain.network.graph import Graph


def _walk_back(prev: dict, start_id: NodeId, end_id: NodeId, graph: Graph) -> list[NetworkNode]:
    ids = [end_id]
    while ids[-1] != start_id:
        ids.append(prev[ids[-1]])
    return [graph.node(i) for i in reversed(ids)]


class DijkstraSolver(PathSolver):
    """
    Binary-heap Dijkstra, O((V + E) log V).

    Frontier entries are (distance, seq, node); seq grows on every push so
    equal distances pop in enqueue order. Stops once the target is settled.
    """

    def solve(self, start_id: NodeId, end_id: NodeId, graph: Graph) -> list[NetworkNode]:
        start = graph.node(start_id)
        graph.node(end_id)
        if start_id == end_id:
            return [start]

        dist: dict[NodeId, float] = {start_id: 0.0}
        prev: dict[NodeId, NodeId] = {}
        settled: set[NodeId] = set()
        seq = 0
        q: list[tuple[float, int, NodeId]] = [(0.0, seq, start_id)]
        while q:
            d, _, u = heapq.heappop(q)
            if u in settled:
                continue  # stale entry
            settled.add(u)
            if u == end_id:
                return _walk_back(prev, start_id, end_id, graph)
            for v, w in graph.neighbors(u):
                if v in settled:
                    continue
                nd = d + w
                if nd < dist.get(v, math.inf):
                    dist[v], prev[v] = nd, u
                    seq += 1
                    heapq.heappush(q, (nd, seq, v))
        raise NoPathError(start_id, end_id)


class ScanSolver(PathSolver):
    """
    Array-scan Dijkstra, O(V^2): each step scans every reached node for the
    minimum. Only for small networks (a few thousand nodes at most). Same
    tie-break as DijkstraSolver, so both return identical paths.
    """

    def solve(self, start_id: NodeId, end_id: NodeId, graph: Graph) -> list[NetworkNode]:
        start = graph.node(start_id)
        graph.node(end_id)
        if start_id == end_id:
            return [start]

        dist: dict[NodeId, float] = {start_id: 0.0}
        order: dict[NodeId, int] = {start_id: 0}
        prev: dict[NodeId, NodeId] = {}
        settled: set[NodeId] = set()
        seq = 0
        while True:
            u, best = None, None
            for v, dv in dist.items():
                if v in settled:
                    continue
                key = (dv, order[v])
                if best is None or key < best:
                    u, best = v, key
            if u is None:
                raise NoPathError(start_id, end_id)
            settled.add(u)
            if u == end_id:
                return _walk_back(prev, start_id, end_id, graph)
            for v, w in graph.neighbors(u):
                if v in settled:
                    continue
                nd = dist[u] + w
                if nd < dist.get(v, math.inf):
                    seq += 1
                    dist[v], prev[v], order[v] = nd, u, seq
