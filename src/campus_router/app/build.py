# campus_router/app/build.py
from collections.abc import Mapping

from campus_router.app.engine import RoutingEngine
from campus_router.app.hooks import NoopHooks
from campus_router.config.models import EngineModel
from campus_router.domain.entities.survey import NetworkData
from campus_router.domain.routing.assembler import RouteAssembler
from campus_router.io.engine_logging import EngineLogging  # JSON logs
from campus_router.runtime.registries import make_connectivity, make_locator, make_solver


def build(
    cfg: EngineModel | Mapping,
    *,
    data: NetworkData | None = None,
    use_logging: bool = True,
) -> RoutingEngine:
    # 0) Validate config
    model = cfg if isinstance(cfg, EngineModel) else EngineModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        EngineLogging(name=model.name, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 2) Strategies
    policy = make_connectivity(model.connectivity)
    planner = RouteAssembler(locator=make_locator(model.locator), solver=make_solver(model.solver))

    engine = RoutingEngine(policy=policy, planner=planner, source=model.network, hooks=hooks)

    # 3) Initial network: explicit data wins over the configured source
    if data is not None:
        engine.load(data)
    elif model.network is not None:
        engine.reload()
    return engine
