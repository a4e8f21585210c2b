"""The ``file-bridge`` command.

``file-bridge run`` serves the bridge; ``file-bridge routes`` prints the
route table. Subcommand modules are imported only when chosen, so
``--help`` stays fast.
"""

import argparse
import sys

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-bridge",
        description="Share a directory tree between two browser sessions.",
    )
    commands = parser.add_subparsers(dest="command")

    run = commands.add_parser("run", help="serve the bridge")
    run.add_argument("--host", help="address to bind (default 127.0.0.1)")
    run.add_argument("--port", type=int, help="port to bind (default 6666)")
    run.add_argument("--debug", action="store_true", help="reload on change, tracebacks in 500s")
    run.add_argument("--log-level", choices=_LOG_LEVELS, help="default info")

    commands.add_parser("routes", help="list routes in match order")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    match args.command:
        case "run":
            from file_bridge.cli._run import run_server

            run_server(args)
        case "routes":
            from file_bridge.cli._routes import print_routes

            print_routes()
        case _:
            parser.print_help()
            sys.exit(0)
