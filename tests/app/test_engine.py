# tests/app/test_engine.py
from concurrent.futures import ThreadPoolExecutor

import pytest

from campus_router.app.build import build
from campus_router.app.engine import RoutingEngine
from campus_router.app.hooks import NoopHooks
from campus_router.domain.entities.survey import EdgeRecord, NetworkData, SurveyPoint
from campus_router.domain.errors import ConstructionError, EmptyNetworkError, NoPathError
from campus_router.domain.network.connectivity import ExplicitEdges
from campus_router.domain.routing.assembler import RouteAssembler


def _diamond() -> NetworkData:
    return NetworkData(
        points=[
            SurveyPoint("A", 0.0, 0.0, "pink"),
            SurveyPoint("B", 0.0, 1.0, "blue"),
            SurveyPoint("C", 0.0, 2.0, "pink"),
            SurveyPoint("D", 1.0, 1.0, "blue"),
        ],
        edges=[
            EdgeRecord("A", "B", 1.0),
            EdgeRecord("B", "C", 1.0),
            EdgeRecord("B", "D", 0.5),
            EdgeRecord("A", "D", 2.0),
        ],
    )


# --- test hook that records what the engine reports ---
class TraceHooks(NoopHooks):
    def __init__(self):
        self.trace = []

    def network_built(self, *, nodes, edges, policy, ms):
        self.trace.append(("built", nodes, edges, policy))

    def network_rejected(self, *, policy, error):
        self.trace.append(("rejected", policy, type(error).__name__))

    def route_planned(self, route, *, current, destination, ms):
        self.trace.append(("planned", route.start.id, route.end.id, route.distance))

    def route_failed(self, *, current, destination, error):
        self.trace.append(("failed", type(error).__name__))


def _engine(hooks=None) -> RoutingEngine:
    return RoutingEngine(policy=ExplicitEdges(), planner=RouteAssembler(), hooks=hooks)


def test_plan_route_end_to_end():
    engine = build({"connectivity": {"kind": "explicit"}}, data=_diamond(), use_logging=False)
    route = engine.plan_route((0.0, 0.0), (0.0, 2.0))
    assert [n.id for n in route.nodes] == ["A", "B", "C"]
    assert route.distance == 2.0


def test_unloaded_engine_reports_empty_network():
    hooks = TraceHooks()
    engine = _engine(hooks)
    with pytest.raises(EmptyNetworkError):
        engine.plan_route((0.0, 0.0), (1.0, 1.0))
    assert hooks.trace == [("failed", "EmptyNetworkError")]


def test_hooks_see_build_and_plan():
    hooks = TraceHooks()
    engine = _engine(hooks)
    engine.load(_diamond())
    engine.plan_route((0.0, 0.0), (0.0, 2.0))
    assert hooks.trace == [("built", 4, 4, "explicit"), ("planned", "A", "C", 2.0)]


def test_no_path_is_reported_and_raised():
    hooks = TraceHooks()
    engine = _engine(hooks)
    engine.load(NetworkData(points=[SurveyPoint(1, 0.0, 0.0), SurveyPoint(2, 0.0, 1.0)]))
    with pytest.raises(NoPathError):
        engine.plan_route((0.0, 0.0), (0.0, 1.0))
    assert hooks.trace[-1] == ("failed", "NoPathError")


def test_failed_load_keeps_previous_graph():
    hooks = TraceHooks()
    engine = _engine(hooks)
    good = engine.load(_diamond())
    bad = _diamond()
    bad.edges.append(EdgeRecord("A", "Z", 1.0))
    with pytest.raises(ConstructionError):
        engine.load(bad)
    assert engine.graph is good
    assert hooks.trace[-1] == ("rejected", "explicit", "ConstructionError")
    assert engine.plan_route((0.0, 0.0), (0.0, 2.0)).distance == 2.0


def test_reload_from_source(tmp_path):
    f = tmp_path / "road_path.csv"
    f.write_text("s.no,latitudinal,longitudinal,colour,distance\n1,0.0,0.0,pink,\n2,0.0,0.001,blue,\n")
    engine = build(
        {"network": {"file": str(f)}, "connectivity": {"kind": "survey_order"}}, use_logging=False
    )
    first = engine.graph
    assert first.number_of_nodes() == 2

    f.write_text(
        "s.no,latitudinal,longitudinal,colour,distance\n"
        "1,0.0,0.0,pink,\n2,0.0,0.001,blue,\n3,0.0,0.002,pink,\n"
    )
    second = engine.reload()
    assert second is engine.graph and second is not first
    assert second.number_of_nodes() == 3

    f.write_text("s.no,latitudinal,longitudinal,colour,distance\n1,0.0,0.0,pink,\n1,0.0,1.0,pink,\n")
    with pytest.raises(ConstructionError):
        engine.reload()
    assert engine.graph is second


def test_reload_without_source():
    with pytest.raises(ValueError):
        _engine().reload()


def test_in_flight_plan_keeps_its_snapshot():
    class _ReloadingPlanner(RouteAssembler):
        """Swaps the engine's network mid-request."""

        def plan_route(self, current, destination, graph):
            engine.load(NetworkData(points=[SurveyPoint("X", 5.0, 5.0)]))
            self.seen = graph
            return super().plan_route(current, destination, graph)

    planner = _ReloadingPlanner()
    engine = RoutingEngine(policy=ExplicitEdges(), planner=planner)
    old = engine.load(_diamond())
    route = engine.plan_route((0.0, 0.0), (0.0, 2.0))
    assert planner.seen is old
    assert [n.id for n in route.nodes] == ["A", "B", "C"]
    assert engine.graph.ids == ("X",)


def test_concurrent_plans_during_reloads():
    engine = _engine()
    engine.load(_diamond())

    def plan(i):
        if i % 10 == 0:
            engine.load(_diamond())
        return engine.plan_route((0.0, 0.0), (0.0, 2.0))

    with ThreadPoolExecutor(max_workers=8) as pool:
        routes = list(pool.map(plan, range(100)))
    assert all([n.id for n in r.nodes] == ["A", "B", "C"] for r in routes)
    assert all(r.distance == 2.0 for r in routes)
