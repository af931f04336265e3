#!/usr/bin/env python3

import argparse
import os
from dataclasses import replace

from web_json import create_app
from web_json.routes import demo
from web_json.utils.config import DEFAULT_CONFIG_PATH, load_config


def parse_arguments():
    parser = argparse.ArgumentParser(description="web_json demo server")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH, help="Path to the YAML configuration file")
    parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", 5050)), help="Port to listen on")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main():
    args = parse_arguments()

    config = load_config(args.config)
    if args.verbose:
        config = replace(config, log_level="DEBUG")

    app = create_app(config)
    demo.register_routes(app)
    app.run(debug=args.verbose, host="0.0.0.0", port=args.port)


if __name__ == "__main__":
    main()
