from dataclasses import dataclass, field

from campus_router.app.protocols import NodeLocator, PathSolver, RoutePlanner
from campus_router.domain.entities.geography import Coord, Route
from campus_router.domain.network.graph import Graph
from campus_router.domain.routing.locators import LinearScanLocator
from campus_router.domain.routing.solvers import DijkstraSolver

Pt = Coord | tuple[float, float]


def _to_coord(p: Pt) -> Coord:
    return p if isinstance(p, Coord) else Coord(float(p[0]), float(p[1]))


@dataclass
class RouteAssembler(RoutePlanner):
    """
    Snap both coordinates onto the network and join them with a shortest path.

    Errors from the locator (EmptyNetworkError) and the solver (NoPathError)
    pass through unchanged.
    """

    locator: NodeLocator = field(default_factory=LinearScanLocator)
    solver: PathSolver = field(default_factory=DijkstraSolver)

    def plan_route(self, current: Pt, destination: Pt, graph: Graph) -> Route:
        a, b = _to_coord(current), _to_coord(destination)
        start = self.locator.locate(a.lat, a.lon, graph)
        end = self.locator.locate(b.lat, b.lon, graph)
        if start.id == end.id:
            return Route(nodes=(start,), distance=0.0, start=start, end=end)

        path = self.solver.solve(start.id, end.id, graph)
        # distance comes from the graph's edge weights, not the solver's bookkeeping
        distance = graph.path_length([n.id for n in path])
        return Route(nodes=tuple(path), distance=distance, start=start, end=end)


def plan_route(current: Pt, destination: Pt, graph: Graph) -> Route:
    return RouteAssembler().plan_route(current, destination, graph)
