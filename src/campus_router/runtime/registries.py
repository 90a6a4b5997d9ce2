# runtime/registries.py
from collections.abc import Callable

from campus_router.app.protocols import ConnectivityPolicy, NodeLocator, PathSolver
from campus_router.config.models import (
    ConnectivityExplicitModel,
    ConnectivitySeriesModel,
    ConnectivitySurveyOrderModel,
    ConnectivityUnion,
    LocatorLinearModel,
    LocatorUnion,
    LocatorVectorizedModel,
    SolverDijkstraModel,
    SolverScanModel,
    SolverUnion,
)
from campus_router.domain.network.connectivity import ExplicitEdges, SeriesLinkage, SurveyOrder
from campus_router.domain.routing.locators import LinearScanLocator, VectorizedLocator
from campus_router.domain.routing.solvers import DijkstraSolver, ScanSolver

ConnectivityFactory = Callable[[ConnectivityUnion], ConnectivityPolicy]
LocatorFactory = Callable[[LocatorUnion], NodeLocator]
SolverFactory = Callable[[SolverUnion], PathSolver]

_connectivity_registry: dict[str, ConnectivityFactory] = {}
_locator_registry: dict[str, LocatorFactory] = {}
_solver_registry: dict[str, SolverFactory] = {}


# ------------------- Connectivity policies ---------------------------


def register_connectivity(kind: str):
    def deco(fn: ConnectivityFactory):
        _connectivity_registry[kind] = fn
        return fn

    return deco


def make_connectivity(cfg: ConnectivityUnion) -> ConnectivityPolicy:
    try:
        factory = _connectivity_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown connectivity kind {cfg.kind!r}") from None
    return factory(cfg)


@register_connectivity("explicit")
def _make_explicit(cfg: ConnectivityExplicitModel):
    return ExplicitEdges()


@register_connectivity("series")
def _make_series(cfg: ConnectivitySeriesModel):
    return SeriesLinkage()


@register_connectivity("survey_order")
def _make_survey_order(cfg: ConnectivitySurveyOrderModel):
    return SurveyOrder(use_recorded_distance=cfg.use_recorded_distance)


# ------------------- Locators ---------------------------


def register_locator(kind: str):
    def deco(fn: LocatorFactory):
        _locator_registry[kind] = fn
        return fn

    return deco


def make_locator(cfg: LocatorUnion) -> NodeLocator:
    try:
        factory = _locator_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown locator kind {cfg.kind!r}") from None
    return factory(cfg)


@register_locator("linear")
def _make_linear(cfg: LocatorLinearModel):
    return LinearScanLocator()


@register_locator("vectorized")
def _make_vectorized(cfg: LocatorVectorizedModel):
    return VectorizedLocator()


# ------------------- Solvers ---------------------------


def register_solver(kind: str):
    def deco(fn: SolverFactory):
        _solver_registry[kind] = fn
        return fn

    return deco


def make_solver(cfg: SolverUnion) -> PathSolver:
    try:
        factory = _solver_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown solver kind {cfg.kind!r}") from None
    return factory(cfg)


@register_solver("dijkstra")
def _make_dijkstra(cfg: SolverDijkstraModel):
    return DijkstraSolver()


@register_solver("scan")
def _make_scan(cfg: SolverScanModel):
    return ScanSolver()
