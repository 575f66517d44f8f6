"""tripclient CLI: plan trips, run preflight checks, probe backend health."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from tripclient.domain.enums import OptimizationMode
from tripclient.domain.exceptions import DomainError
from tripclient.domain.models import Coordinate, TripPlanRequest, TripPreferences
from tripclient.planner.distance import distance_km
from tripclient.services.routing_service import RoutingService, build_routing_service
from tripclient.shared.exceptions import ConfigError
from tripclient.validators.preflight_validator import validate_trip_request

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _coordinate(raw: str) -> Coordinate:
    """Parse ``"lat,lng"``."""
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected 'lat,lng', got {raw!r}")
    try:
        return Coordinate(latitude=float(parts[0]), longitude=float(parts[1]))
    except (ValueError, ValidationError):
        raise argparse.ArgumentTypeError(f"invalid coordinate {raw!r}") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tripclient", description="Multimodal trip-planning client")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("plan", "Plan a trip via the routing backend"),
        ("check", "Run the local preflight checks only"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("origin", type=_coordinate, help="Origin as lat,lng")
        cmd.add_argument("destination", type=_coordinate, help="Destination as lat,lng")
        if name == "plan":
            cmd.add_argument(
                "--mode",
                choices=[m.value for m in OptimizationMode],
                default=OptimizationMode.FASTEST.value,
            )
            cmd.add_argument("--departure-time", default=None, help="ISO-8601 departure time")
            cmd.add_argument("--arrival-time", default=None, help="ISO-8601 arrival time")
            cmd.add_argument("--alternatives", type=int, default=3)
            cmd.add_argument("--no-scooters", action="store_true")
            cmd.add_argument("--no-bikes", action="store_true")
            cmd.add_argument("--wheelchair", action="store_true")

    sub.add_parser("health", help="Probe the routing backend health endpoint")
    sub.add_parser("modes", help="List supported transport modes")
    return parser


def _print(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _request_from_args(args: argparse.Namespace) -> TripPlanRequest:
    return TripPlanRequest(
        origin=args.origin,
        destination=args.destination,
        departure_time=args.departure_time,
        arrival_time=args.arrival_time,
        preferences=TripPreferences(
            mode=OptimizationMode(args.mode),
            allow_scooters=not args.no_scooters,
            allow_bikes=not args.no_bikes,
            wheelchair_accessible=args.wheelchair,
            num_alternatives=max(1, args.alternatives),
        ),
    )


async def _run(args: argparse.Namespace, service: RoutingService) -> int:
    if args.command == "plan":
        try:
            response = await service.plan_trip(_request_from_args(args))
        except DomainError as exc:
            _print({"ok": False, "error": exc.to_dict()})
            return EXIT_FAILED
        _print({"ok": True, "data": response.model_dump(mode="json", by_alias=True)})
        return EXIT_OK

    if args.command == "health":
        report = await service.probe_health()
        _print(report.model_dump(mode="json"))
        return EXIT_OK if report.healthy else EXIT_FAILED

    modes = await service.get_available_modes()
    _print([mode.model_dump(mode="json") for mode in modes])
    return EXIT_OK


def main(argv: Optional[list[str]] = None, *, service: Optional[RoutingService] = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    if args.command == "check":
        request = TripPlanRequest(origin=args.origin, destination=args.destination)
        issues = validate_trip_request(request)
        _print({
            "ok": not issues,
            "distance_km": round(distance_km(request.origin, request.destination), 3),
            "issues": issues,
        })
        return EXIT_FAILED if issues else EXIT_OK

    if service is None:
        try:
            service = build_routing_service()
        except ConfigError as exc:
            print(f"configuration error: {exc}", file=sys.stderr)
            return EXIT_USAGE
    return asyncio.run(_run(args, service))


if __name__ == "__main__":
    sys.exit(main())
