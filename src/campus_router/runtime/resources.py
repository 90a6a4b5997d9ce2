# campus_router/runtime/resources.py
import csv
import json
import logging
import math

from campus_router.config.models import CsvColumnsModel
from campus_router.domain.entities.survey import EdgeRecord, NetworkData, SurveyPoint
from campus_router.domain.errors import ConstructionError

log = logging.getLogger(__name__)


def _parse_id(raw):
    if isinstance(raw, str):
        raw = raw.strip()
        try:
            return int(raw)
        except ValueError:
            return raw
    return raw


def _opt_float(raw) -> float | None:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return float(raw)


def _opt_id(raw):
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    return _parse_id(raw)


def load_network_data(
    file: str, fmt: str = "csv", columns: CsvColumnsModel | None = None
) -> NetworkData:
    if fmt == "csv":
        return _load_csv(file, columns or CsvColumnsModel())
    if fmt == "json":
        return _load_json(file)
    raise ValueError(f"Unsupported network fmt {fmt!r}")


def _load_csv(file: str, cols: CsvColumnsModel) -> NetworkData:
    points: list[SurveyPoint] = []
    skipped = 0
    with open(file, newline="", encoding="utf-8") as f:
        for lineno, row in enumerate(csv.DictReader(f), start=2):
            try:
                lat, lon = float(row.get(cols.lat) or "nan"), float(row.get(cols.lon) or "nan")
            except ValueError:
                lat = lon = math.nan
            if math.isnan(lat) or math.isnan(lon):
                skipped += 1
                continue
            if not (row.get(cols.id) or "").strip():
                raise ConstructionError(f"{file}:{lineno}: survey row has no {cols.id!r} id")
            try:
                points.append(
                    SurveyPoint(
                        id=_parse_id(row[cols.id]),
                        lat=lat,
                        lon=lon,
                        category=(row.get(cols.category) or "").strip() or None,
                        next_id=_opt_id(row.get(cols.next)),
                        recorded_distance=_opt_float(row.get(cols.distance)),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise ConstructionError(f"{file}:{lineno}: bad survey row ({exc})") from exc
    if skipped:
        log.warning("skipped %d survey rows without usable coordinates in %s", skipped, file)
    return NetworkData(points=points)


def _load_json(file: str) -> NetworkData:
    with open(file, encoding="utf-8") as f:
        doc = json.load(f)
    try:
        points = [
            SurveyPoint(
                id=_parse_id(p["id"]),
                lat=float(p["lat"]),
                lon=float(p["lon"]),
                category=p.get("category"),
                next_id=_opt_id(p.get("next_id")),
                recorded_distance=_opt_float(p.get("distance")),
            )
            for p in doc.get("points", [])
        ]
        edges = [
            EdgeRecord(a=_parse_id(e["a"]), b=_parse_id(e["b"]), weight=_opt_float(e.get("weight")))
            for e in doc.get("edges", [])
        ]
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ConstructionError(f"{file}: malformed network document ({exc!r})") from exc
    return NetworkData(points=points, edges=edges)
