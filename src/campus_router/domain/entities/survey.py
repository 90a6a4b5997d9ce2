# Raw records as produced by a network loader, before graph construction
from dataclasses import dataclass, field

from campus_router.domain.entities.geography import NodeId


@dataclass(frozen=True)
class SurveyPoint:
    id: NodeId
    lat: float
    lon: float
    category: str | None = None
    next_id: NodeId | None = None  # "series" linkage to the following point
    recorded_distance: float | None = None  # surveyed distance from the previous point


@dataclass(frozen=True)
class EdgeRecord:
    a: NodeId
    b: NodeId
    weight: float | None = None  # None => derive from coordinates


@dataclass
class NetworkData:
    points: list[SurveyPoint] = field(default_factory=list)
    edges: list[EdgeRecord] = field(default_factory=list)
