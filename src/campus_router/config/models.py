import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- NETWORK SOURCE ---------------------


class CsvColumnsModel(BaseModel):
    """Column names of a survey CSV; defaults follow road_path.csv."""

    model_config = ConfigDict(extra="forbid")
    id: str = "s.no"
    lat: str = "latitudinal"
    lon: str = "longitudinal"
    category: str = "colour"
    distance: str = "distance"
    next: str = "next"


class NetworkSourceModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    file: str
    fmt: Literal["csv", "json"] = "csv"
    columns: CsvColumnsModel = Field(default_factory=CsvColumnsModel)

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


# ----------------- CONNECTIVITY ---------------------


class ConnectivityExplicitModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["explicit"] = "explicit"


class ConnectivitySeriesModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["series"] = "series"


class ConnectivitySurveyOrderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["survey_order"] = "survey_order"
    use_recorded_distance: bool = False


ConnectivityUnion = Annotated[
    ConnectivityExplicitModel | ConnectivitySeriesModel | ConnectivitySurveyOrderModel,
    Field(discriminator="kind"),
]

# ----------------- LOCATORS ---------------------


class LocatorLinearModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear"] = "linear"


class LocatorVectorizedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["vectorized"] = "vectorized"


LocatorUnion = Annotated[
    LocatorLinearModel | LocatorVectorizedModel,
    Field(discriminator="kind"),
]

# ----------------- SOLVERS ---------------------


class SolverDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class SolverScanModel(BaseModel):
    """O(V^2) scan; small networks only."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["scan"] = "scan"


SolverUnion = Annotated[SolverDijkstraModel | SolverScanModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class EngineModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "campus"
    network: NetworkSourceModel | None = None  # None => caller loads data itself
    connectivity: ConnectivityUnion = Field(default_factory=ConnectivityExplicitModel)
    locator: LocatorUnion = Field(default_factory=LocatorLinearModel)
    solver: SolverUnion = Field(default_factory=SolverDijkstraModel)
    log: LogModel = LogModel()
