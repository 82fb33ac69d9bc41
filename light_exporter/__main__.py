import argparse
from typing import List, Optional

import uvicorn

from light_exporter.config import Settings
from light_exporter.main import create_app

LISTEN_HOST = "0.0.0.0"
LISTEN_PORT = 8080


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="light-exporter",
        description="Expose WTY2001 lighting controller brightness as Prometheus metrics.",
    )
    parser.add_argument("--target", default=None, help="The WTY2001 HTTP API endpoint")
    parser.add_argument("--mock", default=None, help="The file to read mock response from")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def build_settings(argv: Optional[List[str]] = None) -> Settings:
    """Settings from env/.env, with any flags given on the command line taking precedence."""
    args = parse_args(argv)
    overrides = {
        "target": args.target,
        "mock": args.mock,
        "log_level": args.log_level,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> None:
    app = create_app(build_settings(argv))
    uvicorn.run(app, host=LISTEN_HOST, port=LISTEN_PORT, log_config=None)


if __name__ == "__main__":
    main()
