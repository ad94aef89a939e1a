"""CLI entry point for the climate outlook service."""

import argparse
import logging

from outlook.config.loader import get_config_value, load_config, set_config_value
from outlook.errors import OutlookError
from outlook.reporting.formatters import format_outlook_json, format_outlook_text
from outlook.server import build_service, create_app, resolve_path
from outlook.storage.dataset_cache import FileDatasetCache

DEFAULT_CONFIG = "ops/configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="outlook",
        description="Day-of-year climate outlook from NASA POWER history",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    # analyze
    an_p = sub.add_parser("analyze", help="Compute one outlook")
    an_p.add_argument("--lat", type=float, required=True)
    an_p.add_argument("--lon", type=float, required=True)
    an_p.add_argument("--month", type=int, required=True)
    an_p.add_argument("--day", type=int, required=True)
    an_p.add_argument("--year", type=int, required=True, help="Target year")
    an_p.add_argument("--json", action="store_true", help="Print the API payload")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Validate a config override")
    set_p.add_argument("keyvalue", help="key=value to set")

    # cache clear
    cache_p = sub.add_parser("cache", help="Dataset cache operations")
    cache_sub = cache_p.add_subparsers(dest="cache_command")
    cache_sub.add_parser("clear", help="Delete cached datasets")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "analyze":
        return _cmd_analyze(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "cache":
        return _cmd_cache(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_analyze(config, args) -> int:
    service = build_service(config)
    payload = {
        "latitude": args.lat,
        "longitude": args.lon,
        "month": args.month,
        "day": args.day,
        "targetYear": args.year,
    }
    try:
        result = service.outlook(payload)
    except OutlookError as e:
        print(f"Error: {e.message}")
        return 1
    print(format_outlook_json(result) if args.json else format_outlook_text(result))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_cache(config, args) -> int:
    if args.cache_command == "clear":
        cache = FileDatasetCache(resolve_path(config.cache.directory))
        removed = cache.clear()
        print(f"Removed {removed} cached datasets")
        return 0
    print("Use: cache clear")
    return 1
