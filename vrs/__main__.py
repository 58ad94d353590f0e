from __future__ import annotations

import argparse
import logging
import sys

from vrs.config import runtime_config
from vrs.config.runtime_config import MissingConfiguration


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vrs", description="Run the VRS resource API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = runtime_config.get_log_level()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        import uvicorn
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("uvicorn is required to serve the API. Install project dependencies.") from exc

    try:
        runtime_config.require_database_url()
    except MissingConfiguration as exc:
        logging.getLogger("vrs").error("%s", exc)
        return 2

    uvicorn.run(
        "vrs.server:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
