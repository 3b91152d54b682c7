"""Command-line interface for resolving bus stops and converting coordinates."""

import argparse
import asyncio
import json
import sys
from typing import Any

from pydantic import ValidationError

from kr_bus_craft.adapters.config import AppConfig
from kr_bus_craft.adapters.gemini_api import GeminiStopResolver
from kr_bus_craft.application.services import StopConversionService
from kr_bus_craft.domain.errors import ResolutionError
from kr_bus_craft.domain.models import ConversionResult, GridCoords


def coords_to_dict(coords: GridCoords) -> dict[str, Any]:
    """Serialize grid coordinates for JSON output."""
    return {
        "x": coords.x,
        "y": coords.y,
        "z": coords.z,
        "origin": coords.origin_name,
        "command": coords.teleport_command,
    }


def result_to_dict(result: ConversionResult) -> dict[str, Any]:
    """Serialize a conversion result for JSON output."""
    stop = result.stop
    return {
        "stop": {
            "id": stop.id,
            "name": stop.name,
            "city": stop.city,
            "latitude": stop.latitude,
            "longitude": stop.longitude,
            "description": stop.description,
        },
        "coords": coords_to_dict(result.coords),
        "sources": [{"uri": s.uri, "title": s.title} for s in result.sources],
    }


def _print_coords(coords: GridCoords) -> None:
    print(f"  X: {coords.x}  Y: {coords.y}  Z: {coords.z}")
    print(f"  Command: {coords.teleport_command}")
    print(f"  (relative to {coords.origin_name})")


def _print_result(result: ConversionResult) -> None:
    stop = result.stop
    print(f"\n{stop.name}")
    print(f"  {stop.city or 'Unknown City'} (ID: {stop.id})")
    print(f"  Latitude:  {stop.latitude:.6f}")
    print(f"  Longitude: {stop.longitude:.6f}")
    print("\nMinecraft Space:")
    _print_coords(result.coords)
    if result.sources:
        print("\nData Sources:")
        for source in result.sources:
            print(f"  - {source.title}: {source.uri}")


def _load_config() -> AppConfig:
    try:
        config = AppConfig()
        config.load_config_file()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    return config


def build_service(config: AppConfig) -> StopConversionService:
    """Wire the Gemini resolver and conversion service from configuration."""
    resolver = GeminiStopResolver.from_config(config)
    return StopConversionService(
        resolver,
        origin=config.get_origin(),
        lat_scale=config.lat_to_meters,
        lng_scale=config.lng_to_meters,
    )


async def _handle_resolve_command(
    service: StopConversionService, stop_id: str, output_json: bool
) -> None:
    if service.normalize_stop_id(stop_id) is None:
        print("Stop ID must not be empty.", file=sys.stderr)
        sys.exit(1)
    try:
        result = await service.convert_stop(stop_id)
    except ResolutionError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)

    if output_json:
        print(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        _print_result(result)


def _handle_convert_command(
    service: StopConversionService, latitude: float, longitude: float, output_json: bool
) -> None:
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        print("Latitude must be in [-90, 90] and longitude in [-180, 180].", file=sys.stderr)
        sys.exit(1)
    coords = service.convert_coordinates(latitude, longitude)
    if output_json:
        print(json.dumps(coords_to_dict(coords), indent=2, ensure_ascii=False))
    else:
        _print_coords(coords)


def _setup_argparse() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kr-bus-craft",
        description="Convert South Korean bus stops to Minecraft block coordinates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  kr-bus-craft resolve 01141
  kr-bus-craft resolve 01141 --json
  kr-bus-craft convert 37.5665 126.9780
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    resolve_parser = subparsers.add_parser("resolve", help="Look up a stop and convert it")
    resolve_parser.add_argument("stop_id", help="Bus stop ID (e.g., 01141)")
    resolve_parser.add_argument("--json", action="store_true", help="Output as JSON")

    convert_parser = subparsers.add_parser("convert", help="Convert latitude/longitude directly")
    convert_parser.add_argument("latitude", type=float, help="Latitude in degrees")
    convert_parser.add_argument("longitude", type=float, help="Longitude in degrees")
    convert_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    service = build_service(_load_config())

    try:
        if args.command == "resolve":
            await _handle_resolve_command(service, args.stop_id, args.json)
        elif args.command == "convert":
            _handle_convert_command(service, args.latitude, args.longitude, args.json)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
