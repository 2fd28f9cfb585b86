"""Unified entry point for the catalog, info and rating services.

This script launches the requested services as separate Uvicorn
servers running concurrently in one asyncio loop, each on its own
port.  Without arguments all three services are started, which is the
usual way to run the demo locally; pass service names to start a
subset, e.g. when each service runs in its own container.

Ports, upstream URLs and the choice of movie info source are read from
environment variables (see ``movie_catalog/app/core/config.py``).

Usage:
    python run.py [catalog] [info] [rating]
"""
import asyncio
import logging
import sys
from typing import List, Sequence

from uvicorn import Config, Server

from movie_catalog.app.core.config import settings
from movie_catalog.app.core.logging_config import setup_logging
from movie_catalog.app.main import SERVICES, create_app


def service_port(service: str) -> int:
    return {
        "catalog": settings.catalog_port,
        "info": settings.info_port,
        "rating": settings.rating_port,
    }[service]


async def run_service(service: str) -> None:
    """Serve one service with Uvicorn until it is stopped."""
    config = Config(
        app=create_app(service),
        host=settings.host,
        port=service_port(service),
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()


async def main(services: Sequence[str]) -> None:
    """Run the given services concurrently."""
    tasks = [asyncio.create_task(run_service(name)) for name in services]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


def parse_services(argv: List[str]) -> List[str]:
    """Validate service names; exits with an error message on unknown names."""
    unknown = [name for name in argv if name not in SERVICES]
    if unknown:
        raise SystemExit(f"Unknown service(s): {', '.join(unknown)}. Choose from {', '.join(SERVICES)}.")
    return argv or list(SERVICES)


def cli(argv: List[str]) -> None:
    """Start the services named in ``argv`` and block until interrupted."""
    services = parse_services(argv)
    setup_logging(settings.log_level, settings.log_file or None, label="+".join(services), force=True)
    try:
        asyncio.run(main(services))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli(sys.argv[1:])
