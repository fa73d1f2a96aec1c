"""CLI entry point for the forecast normalization engine."""

import argparse
import dataclasses
import json
import logging
from datetime import date

import httpx

from nimbus.codec import weather_id
from nimbus.codec.moon_phase import phase_fraction, phase_from_fraction
from nimbus.config.loader import (
    default_config,
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from nimbus.config.schema import NimbusConfig
from nimbus.errors import NimbusError
from nimbus.ingest.forecast_fetcher import ForecastFetcher, location_from_config
from nimbus.ingest.open_weather_client import OpenWeatherClientError
from nimbus.models.common import ProviderId
from nimbus.models.forecast import Location


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nimbus",
        description="Weather forecast normalization engine",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch and normalize a forecast")
    fetch_p.add_argument("--location", help="Name of a configured location")
    fetch_p.add_argument("--lat", type=float, help="Latitude")
    fetch_p.add_argument("--lon", type=float, help="Longitude")
    fetch_p.add_argument("--tz", help="IANA timezone, required with --lat/--lon")
    fetch_p.add_argument(
        "--provider", choices=[p.value for p in ProviderId], help="Override provider"
    )

    # moon
    moon_p = sub.add_parser("moon", help="Moon phase for a date")
    moon_p.add_argument("date", help="YYYY-MM-DD")

    # decode
    decode_p = sub.add_parser("decode", help="Explain a packed weather id")
    decode_p.add_argument("weather_id", type=int)

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else default_config()

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "moon":
        return _cmd_moon(args)
    elif args.command == "decode":
        return _cmd_decode(args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_fetch(config: NimbusConfig, args) -> int:
    if args.provider:
        config = config.model_copy(
            update={
                "provider": config.provider.model_copy(
                    update={"active": ProviderId(args.provider)}
                )
            }
        )

    try:
        location = _resolve_location(config, args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    fetcher = ForecastFetcher(config)
    try:
        forecast = fetcher.fetch(location)
    except (NimbusError, OpenWeatherClientError, httpx.HTTPError) as e:
        print(f"Error: {e}")
        return 1

    print(json.dumps(dataclasses.asdict(forecast), indent=2))
    return 0


def _resolve_location(config: NimbusConfig, args) -> Location:
    if args.lat is not None or args.lon is not None:
        if args.lat is None or args.lon is None or not args.tz:
            raise ValueError("--lat, --lon and --tz must be given together")
        return Location(
            name=args.location or f"{args.lat},{args.lon}",
            latitude=args.lat,
            longitude=args.lon,
            timezone=args.tz,
        )

    if not config.locations:
        raise ValueError("no locations configured")
    if args.location is None:
        return location_from_config(config.locations[0])
    for loc in config.locations:
        if loc.name.lower() == args.location.lower():
            return location_from_config(loc)
    raise ValueError(f"unknown location: {args.location}")


def _cmd_moon(args) -> int:
    try:
        day = date.fromisoformat(args.date)
    except ValueError:
        print("Error: use YYYY-MM-DD")
        return 1
    fraction = phase_fraction(day)
    phase = phase_from_fraction(fraction)
    print(f"{day.isoformat()}: {phase.name.lower()} ({fraction:.4f})")
    return 0


def _cmd_decode(args) -> int:
    try:
        parts = weather_id.decode(args.weather_id)
        text = weather_id.describe(args.weather_id)
    except NimbusError as e:
        print(f"Error: {e}")
        return 1

    print(f"{args.weather_id}: {text}")
    print(
        f"  base={parts.base} scale_id={parts.scale_id} "
        f"scale_position={parts.scale_position} shower_thunder={parts.shower_thunder}"
    )
    if weather_id.is_precipitation(args.weather_id):
        print(
            f"  precipitation form={weather_id.get_form(args.weather_id)} "
            f"intensity={weather_id.get_intensity(args.weather_id)}"
        )
    return 0


def _cmd_config(config: NimbusConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        if not args.config:
            print("Error: config set needs --config to write to")
            return 1
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except (KeyError, IndexError, TypeError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1
