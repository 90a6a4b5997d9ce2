# main.py
import argparse
import json

from campus_router.app.build import build
from campus_router.domain.errors import RoutingError


def run(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Plan one route over a surveyed campus network.")
    ap.add_argument("network", help="survey file (csv or json)")
    ap.add_argument("--fmt", choices=["csv", "json"], default="csv")
    ap.add_argument(
        "--connectivity", choices=["explicit", "series", "survey_order"], default="survey_order"
    )
    ap.add_argument("--solver", choices=["dijkstra", "scan"], default="dijkstra")
    for flag, dest in (("--from", "src"), ("--to", "dst")):
        ap.add_argument(flag, dest=dest, nargs=2, type=float, metavar=("LAT", "LON"), required=True)
    ap.add_argument("--quiet", action="store_true", help="no JSON engine logs")
    args = ap.parse_args(argv)

    engine = build(
        {
            "network": {"file": args.network, "fmt": args.fmt},
            "connectivity": {"kind": args.connectivity},
            "solver": {"kind": args.solver},
        },
        use_logging=not args.quiet,
    )
    try:
        route = engine.plan_route(tuple(args.src), tuple(args.dst))
    except RoutingError as exc:
        print(json.dumps({"error": type(exc).__name__, "detail": str(exc)}))
        return 1

    print(
        json.dumps(
            {
                "start": route.start.id,
                "end": route.end.id,
                "distance": route.distance,
                "node_count": route.node_count,
                "path": route.polyline(),
            }
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
