# io/engine_logging.py
import json
import logging
import sys

from campus_router.app.hooks import NoopHooks
from campus_router.domain.entities.geography import Coord


def _default_json_logger(name="campus_router", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _pair(p) -> list[float]:
    return [p.lat, p.lon] if isinstance(p, Coord) else [float(p[0]), float(p[1])]


class EngineLogging(NoopHooks):
    """
    Structured logs for network builds and route plans.
    """

    def __init__(
        self,
        name: str = "campus",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.name, self.debug = name, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"engine": self.name, **extra}})

    # network lifecycle

    def network_built(self, *, nodes, edges, policy, ms):
        self._emit("INFO", "network_built", nodes=nodes, edges=edges, policy=policy, ms=ms)

    def network_rejected(self, *, policy, error: BaseException):
        self._emit("ERROR", "network_rejected", policy=policy, error=str(error))

    # requests

    def route_planned(self, route, *, current, destination, ms):
        extra = {
            "start": route.start.id,
            "end": route.end.id,
            "node_count": route.node_count,
            "distance": route.distance,
            "ms": ms,
        }
        if self.debug:
            extra.update(current=_pair(current), destination=_pair(destination))
        self._emit("INFO", "route_planned", **extra)

    def route_failed(self, *, current, destination, error: BaseException):
        self._emit(
            "WARNING",
            "route_failed",
            reason=type(error).__name__,
            error=str(error),
            current=_pair(current),
            destination=_pair(destination),
        )
