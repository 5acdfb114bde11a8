"""Entry point for the web API: python -m cozycat.web"""

import argparse
import logging

from cozycat.engine.save import JsonFileStorage
from cozycat.web.server import run_server


def main() -> None:
    parser = argparse.ArgumentParser(description="Cozy Cat Garden — Web API")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=5000, help="Port (default: 5000)")
    parser.add_argument("--save-dir", default=None, help="Save directory (default: $COZYCAT_HOME or ~/.cozycat)")
    parser.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    print(f"\n  🐾 Cozy Cat Garden (Web API)")
    print(f"  ➜ http://{args.host}:{args.port}/api/state\n")

    run_server(host=args.host, port=args.port, debug=args.debug, storage=JsonFileStorage(args.save_dir))


if __name__ == "__main__":
    main()
