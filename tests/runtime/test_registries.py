# tests/runtime/test_registries.py
from types import SimpleNamespace

import pytest

from campus_router.config.models import (
    ConnectivitySeriesModel,
    ConnectivitySurveyOrderModel,
    LocatorVectorizedModel,
    SolverScanModel,
)
from campus_router.domain.network.connectivity import SeriesLinkage, SurveyOrder
from campus_router.domain.routing.locators import VectorizedLocator
from campus_router.domain.routing.solvers import ScanSolver
from campus_router.runtime.registries import (
    make_connectivity,
    make_locator,
    make_solver,
    register_solver,
)


def test_models_map_to_strategies():
    assert isinstance(make_connectivity(ConnectivitySeriesModel()), SeriesLinkage)
    so = make_connectivity(ConnectivitySurveyOrderModel(use_recorded_distance=True))
    assert isinstance(so, SurveyOrder) and so.use_recorded_distance
    assert isinstance(make_locator(LocatorVectorizedModel()), VectorizedLocator)
    assert isinstance(make_solver(SolverScanModel()), ScanSolver)


def test_unknown_kind_raises_value_error():
    with pytest.raises(ValueError):
        make_solver(SimpleNamespace(kind="bellman_ford"))
    with pytest.raises(ValueError):
        make_locator(SimpleNamespace(kind="kdtree"))
    with pytest.raises(ValueError):
        make_connectivity(SimpleNamespace(kind="delaunay"))


def test_register_custom_solver():
    class _Fixed(ScanSolver):
        pass

    register_solver("fixed-test")(lambda cfg: _Fixed())
    assert isinstance(make_solver(SimpleNamespace(kind="fixed-test")), _Fixed)
