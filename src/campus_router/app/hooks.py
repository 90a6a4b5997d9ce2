# app/hooks.py
from typing import Protocol


class EngineHooks(Protocol):
    def network_built(self, *, nodes, edges, policy, ms): ...
    def network_rejected(self, *, policy, error: BaseException): ...
    def route_planned(self, route, *, current, destination, ms): ...
    def route_failed(self, *, current, destination, error: BaseException): ...


class NoopHooks:
    def network_built(self, **_):
        pass

    def network_rejected(self, **_):
        pass

    def route_planned(self, *_, **__):
        pass

    def route_failed(self, **_):
        pass
