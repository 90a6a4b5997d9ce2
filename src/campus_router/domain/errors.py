# campus_router/domain/errors.py


class RoutingError(Exception):
    """Base for every failure the routing engine surfaces."""


class ConstructionError(RoutingError):
    """Malformed network data: duplicate ids, dangling edges, bad weights."""


class EmptyNetworkError(RoutingError):
    pass


class NoPathError(RoutingError):
    def __init__(self, start_id, end_id):
        super().__init__(f"no path between {start_id!r} and {end_id!r}")
        self.start_id, self.end_id = start_id, end_id


class UnknownNodeError(RoutingError, LookupError):
    def __init__(self, node_id):
        super().__init__(f"unknown node id {node_id!r}")
        self.node_id = node_id
