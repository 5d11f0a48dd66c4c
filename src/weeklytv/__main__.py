from __future__ import annotations

import argparse
import logging
import uvicorn

from weeklytv.app import app
from weeklytv.logging import configure_logging


def main() -> None:
    """Serve the weekly timetable API until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the WeeklyTV weekly timetable API")
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    args = parser.parse_args()

    configure_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting WeeklyTV with host=%s port=%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
