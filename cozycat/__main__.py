"""Entry point for Cozy Cat Garden."""

from __future__ import annotations

import argparse
import logging

from cozycat.engine.save import JsonFileStorage, default_save_dir


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cozy Cat Garden — an idle petting game")
    parser.add_argument("--save-dir", default=None, help="Save directory (default: $COZYCAT_HOME or ~/.cozycat)")
    parser.add_argument("--web", action="store_true", help="Serve the JSON API instead of the terminal UI")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=5000, help="Port (default: 5000)")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    storage = JsonFileStorage(args.save_dir or default_save_dir())
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    if args.web:
        logging.basicConfig(level=level, format=fmt)
        from cozycat.web.server import run_server

        print(f"\n  🐾 Cozy Cat Garden (Web API)")
        print(f"  ➜ http://{args.host}:{args.port}/api/state\n")
        run_server(host=args.host, port=args.port, debug=args.debug, storage=storage)
        return

    # The TUI owns the terminal, so log lines go to a file beside the save
    storage.directory.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(level=level, format=fmt, filename=storage.directory / "cozycat.log")
    from cozycat.app import CozyCatApp

    app = CozyCatApp(storage=storage)
    app.run()


if __name__ == "__main__":
    main()
