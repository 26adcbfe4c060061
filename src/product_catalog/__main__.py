import argparse
import logging
from dataclasses import replace
from typing import Mapping, Optional, Sequence, Tuple

from flask import Flask

from .app import ENDPOINTS, create_app
from .config import API_KEY_HEADER, Settings


def parse_settings(argv: Optional[Sequence[str]] = None,
                   environ: Optional[Mapping[str, str]] = None) -> Settings:
    settings = Settings.from_env(environ)
    parser = argparse.ArgumentParser(description="Serve the in-memory product catalog API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level name")
    args = parser.parse_args(argv)
    return replace(settings, host=args.host, port=args.port, log_level=args.log_level.upper())


def prepare(argv: Optional[Sequence[str]] = None,
            environ: Optional[Mapping[str, str]] = None) -> Tuple[Flask, Settings]:
    """Configure logging and build the app, everything short of serving."""
    settings = parse_settings(argv, environ)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    if not settings.api_key_from_env:
        app.logger.warning("API_KEY is not set; using the development key. Do not deploy like this.")

    app.logger.info("Server is running on http://%s:%d", settings.host, settings.port)
    for route in ENDPOINTS.values():
        app.logger.info("  %s", route)
    app.logger.info("Protected routes expect the %s header", API_KEY_HEADER)
    return app, settings


def main() -> None:
    app, settings = prepare()
    # threaded=True serves requests concurrently; the store locks every access
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
