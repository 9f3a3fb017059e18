"""
xG Stats Pipeline - Hauptanwendung

Startet die HTTP API (Scrapen + Abrufen von xG-Shotmaps) mit uvicorn.
Einzelne Seiten lassen sich ohne Server über ``python -m xgstats.apps.cli`` scrapen.
"""

import logging
import sys

import uvicorn

from xgstats.api.main import create_fastapi_app
from xgstats.common.logging_utils import configure_logging
from xgstats.core.config import settings


def main() -> int:
    """Haupteinstiegspunkt"""
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger("xgstats")

    app = create_fastapi_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=True,
    )
    server = uvicorn.Server(config)

    logger.info(f"Starting API server on {settings.api_host}:{settings.api_port}")
    logger.info("Available endpoints:")
    logger.info("  POST /api/scrape/xgstats   - Scrape xG shot map data from xgstat.com")
    logger.info("  GET  /api/xgstats?id=XXX   - Get saved xG statistics by fixture ID")
    logger.info("  GET  /health               - Health check")

    # uvicorn installs SIGINT/SIGTERM handlers and shuts down gracefully
    try:
        server.run()
    except KeyboardInterrupt:
        print("\nShutdown requested by user")
    except Exception as e:
        logger.error(f"API server failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
