"""``file-bridge run`` — start the server.

Builds the config from CLI flags, configures logging, composes the app
and hands it to pounce.
"""

import argparse
import logging
import sys
from dataclasses import replace

from file_bridge.config import AppConfig
from file_bridge.errors import ConfigurationError
from file_bridge.views import create_app


def build_config(args: argparse.Namespace, base: AppConfig | None = None) -> AppConfig:
    """Apply CLI overrides on top of *base* (or the defaults)."""
    config = base or AppConfig()
    overrides: dict[str, object] = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.debug:
        overrides["debug"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides) if overrides else config


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def run_server(args: argparse.Namespace) -> None:
    """Start the file bridge server with CLI overrides applied."""
    config = build_config(args)
    try:
        config.validate()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    configure_logging(config.log_level)
    create_app(config).run()
