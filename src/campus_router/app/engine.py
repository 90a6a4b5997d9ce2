# app/engine.py
import threading
import time

from campus_router.app.hooks import EngineHooks, NoopHooks
from campus_router.app.protocols import ConnectivityPolicy, RoutePlanner
from campus_router.config.models import NetworkSourceModel
from campus_router.domain.entities.geography import Route
from campus_router.domain.entities.survey import NetworkData
from campus_router.domain.errors import ConstructionError, RoutingError
from campus_router.domain.network.connectivity import build_network
from campus_router.domain.network.graph import Graph
from campus_router.runtime.resources import load_network_data


class RoutingEngine:
    """
    Serves route plans over the current network snapshot.

    The Graph is never mutated. A (re)load builds a new one and swaps the
    reference; a failed load leaves the previous Graph in service. Each
    plan_route reads the reference once, so it finishes on the snapshot it
    started with.
    """

    def __init__(
        self,
        *,
        policy: ConnectivityPolicy,
        planner: RoutePlanner,
        source: NetworkSourceModel | None = None,
        hooks: EngineHooks | None = None,
    ):
        self._policy, self._planner, self._source = policy, planner, source
        self._hooks = hooks or NoopHooks()
        self._graph = Graph([])
        self._lock = threading.Lock()  # one builder at a time; readers never take it

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def policy(self) -> ConnectivityPolicy:
        return self._policy

    def load(self, data: NetworkData) -> Graph:
        return self._swap_in(lambda: data)

    def reload(self) -> Graph:
        if self._source is None:
            raise ValueError("engine has no network source configured")
        src = self._source
        return self._swap_in(lambda: load_network_data(src.file, src.fmt, src.columns))

    def _swap_in(self, fetch) -> Graph:
        with self._lock:
            t0 = time.perf_counter()
            try:
                graph = build_network(fetch(), self._policy)
            except ConstructionError as exc:
                self._hooks.network_rejected(policy=self._policy.name, error=exc)
                raise
            self._graph = graph
        self._hooks.network_built(
            nodes=graph.number_of_nodes(),
            edges=graph.number_of_edges(),
            policy=self._policy.name,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return graph

    def plan_route(self, current, destination) -> Route:
        graph = self._graph
        t0 = time.perf_counter()
        try:
            route = self._planner.plan_route(current, destination, graph)
        except RoutingError as exc:
            self._hooks.route_failed(current=current, destination=destination, error=exc)
            raise
        self._hooks.route_planned(
            route,
            current=current,
            destination=destination,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return route
