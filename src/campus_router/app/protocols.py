from typing import Protocol, runtime_checkable

from campus_router.domain.entities.geography import NetworkEdge, NetworkNode, NodeId, Route
from campus_router.domain.entities.survey import NetworkData


# ------------- Network construction --------------------
@runtime_checkable
class ConnectivityPolicy(Protocol):
    """
    Responsibilities:
    • Derive the undirected edge list of a network from loaded survey data.
    • Fill in weights the data omits (haversine meters).
    Exactly one policy is chosen per load; it never inspects which optional
    fields are present to pick a strategy.
    """

    name: str

    def derive(self, data: NetworkData) -> list[NetworkEdge]: ...


# ------------- Routing --------------------
@runtime_checkable
class NodeLocator(Protocol):
    """
    Responsibilities:
      • Snap an arbitrary coordinate onto the closest network node.
      • Break exact ties by lowest node id.
    Raises EmptyNetworkError on a zero-node graph.
    """

    def locate(self, lat: float, lon: float, graph) -> NetworkNode: ...


@runtime_checkable
class PathSolver(Protocol):
    """
    Responsibilities:
      • Return the minimum-weight node sequence between two node ids, both inclusive.
    Raises NoPathError when the endpoints are disconnected.
    """

    def solve(self, start_id: NodeId, end_id: NodeId, graph) -> list[NetworkNode]: ...


@runtime_checkable
class RoutePlanner(Protocol):
    def plan_route(self, current, destination, graph) -> Route: ...
